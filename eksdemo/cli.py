# /*
# Copyright 2026 The eksdemo Authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
# */

"""
cli.py - Command line interface for EKS cluster provisioning.

Subcommands:
    create     Create resources (cluster)
    delete     Delete resources (cluster)

Examples:
    # Create a cluster with the default node group
    eksdemo create cluster blue

    # Kubernetes 1.25, three Spot nodes, custom VPC range
    eksdemo create cluster blue -v 1.25 -N 3 --spot --vpc-cidr 10.10.0.0/16

    # Show the eksctl config that would be used
    eksdemo create cluster blue --dry-run

    # Delete eksdemo stacks for the cluster, then the cluster
    eksdemo delete cluster blue

Environment Variables:
    EKSDEMO_PROFILE, EKSDEMO_REGION, EKSDEMO_MAX_ATTEMPTS, EKSDEMO_RETRY_MODE
"""

from __future__ import annotations

import logging
import sys

import typer

from eksdemo import console
from eksdemo.commands import create_cmd, delete_cmd
from eksdemo.config import resolve_settings

app = typer.Typer(
    help="Provision EKS clusters and their dependent resources.",
    no_args_is_help=True,
)


@app.callback()
def _main_callback(
    ctx: typer.Context,
    profile: str | None = typer.Option(None, "--profile", help="AWS profile (overrides EKSDEMO_PROFILE)"),
    region: str | None = typer.Option(None, "--region", help="AWS region (overrides EKSDEMO_REGION)"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """Initialize logging and AWS settings for all subcommands."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )
    ctx.obj = resolve_settings(profile=profile, region=region)


app.add_typer(create_cmd.app, name="create")
app.add_typer(delete_cmd.app, name="delete")


def main() -> None:
    try:
        app()
    except Exception as e:
        console.print(f"[red]\u274c {e}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    main()

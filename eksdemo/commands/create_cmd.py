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

"""Create subcommands (cluster).

The options of a create command come from the resource's declared flags, so
the command signature is assembled at runtime and handed to typer.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any

import typer

from eksdemo import cluster
from eksdemo.aws import AwsSession
from eksdemo.config import AwsSettings, validate_flags
from eksdemo.resource import Resource

app = typer.Typer(help="Create resources.")


def add_create_command(typer_app: typer.Typer, new_resource: Callable[[], Resource]) -> None:
    """Register ``create <resource>`` with the resource's flags as options.

    The command line is built from one resource instance; each invocation
    applies the parsed values to a freshly built one.

    Args:
        typer_app: Typer app the command is added to.
        new_resource: Factory returning a resource with options and create flags attached.
    """
    res = new_resource()

    def _create(ctx: typer.Context, name: str, dry_run: bool = False, **values: Any) -> None:
        target = new_resource()
        target.create_flags.apply(values)
        target.options.aws = AwsSession(ctx.find_object(AwsSettings))
        validate_flags(target.options)
        target.create(name, dry_run=dry_run)

    _create.__signature__ = inspect.Signature([
        inspect.Parameter("ctx", inspect.Parameter.POSITIONAL_OR_KEYWORD, annotation=typer.Context),
        inspect.Parameter(
            "name",
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
            default=typer.Argument(..., help=f"{res.description} name"),
            annotation=str,
        ),
        *res.create_flags.parameters(),
        inspect.Parameter(
            "dry_run",
            inspect.Parameter.KEYWORD_ONLY,
            default=typer.Option(False, "--dry-run", help="Print the eksctl config and exit"),
            annotation=bool,
        ),
    ])

    typer_app.command(res.name, help=f"Create {res.description}")(_create)


add_create_command(app, cluster.new_resource)

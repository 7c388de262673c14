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

"""Delete subcommands (cluster)."""

from __future__ import annotations

import typer

from eksdemo import cluster
from eksdemo.aws import AwsSession
from eksdemo.config import AwsSettings

app = typer.Typer(help="Delete resources.")


@app.command("cluster")
def cluster_cmd(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="EKS cluster name"),
) -> None:
    """Delete eksdemo CloudFormation stacks for the cluster, then the cluster."""
    res = cluster.new_resource()
    res.options.aws = AwsSession(ctx.find_object(AwsSettings))
    res.delete(name)

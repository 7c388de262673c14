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

"""eksctl ClusterConfig rendering and hand-off."""

from __future__ import annotations

import json
import tempfile
from typing import TYPE_CHECKING, Any

import sh
import typer
import yaml
from rich.panel import Panel

from eksdemo import console
from eksdemo.config import display_config
from eksdemo.constants import (
    EKSCTL_API_VERSION,
    EKSCTL_KIND,
    FARGATE_NAMESPACE,
    FARGATE_PROFILE_NAME,
)
from eksdemo.irsa import render_service_accounts
from eksdemo.utils import require_command

if TYPE_CHECKING:
    from eksdemo.cluster import ClusterOptions


def _addons(options: ClusterOptions) -> list[dict[str, Any]]:
    vpc_cni: dict[str, Any] = {"name": "vpc-cni", "version": "latest"}
    if options.prefix_assignment and not options.ipv6:
        vpc_cni["configurationValues"] = json.dumps({"env": {"ENABLE_PREFIX_DELEGATION": "true"}})
    return [
        vpc_cni,
        {"name": "coredns", "version": "latest"},
        {"name": "kube-proxy", "version": "latest"},
    ]


def cluster_config(options: ClusterOptions) -> dict[str, Any]:
    """Build the eksctl ClusterConfig for a cluster.

    Args:
        options: Cluster options after pre-create.

    Returns:
        ClusterConfig as a dictionary ready for YAML serialization.

    Raises:
        ValueError: If an IRSA role is missing identity fields.
    """
    common = options.common
    config: dict[str, Any] = {
        "apiVersion": EKSCTL_API_VERSION,
        "kind": EKSCTL_KIND,
        "metadata": {
            "name": common.cluster_name,
            "region": common.region,
            "version": common.kubernetes_version,
        },
        "addons": _addons(options),
        "iam": {"withOIDC": True},
    }

    if not options.no_roles and options.irsa_roles:
        config["iam"]["serviceAccounts"] = render_service_accounts(options.irsa_template, options.irsa_roles)

    if options.ipv6:
        config["kubernetesNetworkConfig"] = {"ipFamily": "IPv6"}
    else:
        config["vpc"] = {"cidr": options.vpc_cidr}

    if options.private:
        config["privateCluster"] = {"enabled": True}

    config["managedNodeGroups"] = [options.nodegroup.manifest(private=options.private)]

    if options.fargate:
        config["fargateProfiles"] = [{
            "name": FARGATE_PROFILE_NAME,
            "selectors": [{"namespace": FARGATE_NAMESPACE}],
        }]

    return config


class EksctlManager:
    """Hands a prepared cluster configuration to eksctl."""

    def create(self, options: ClusterOptions, dry_run: bool = False) -> None:
        """Render the ClusterConfig and run ``eksctl create cluster``.

        Args:
            options: Cluster options after pre-create.
            dry_run: Print the ClusterConfig to stdout instead of creating.
        """
        text = yaml.safe_dump(cluster_config(options), sort_keys=False)
        display_config(options)
        if dry_run:
            typer.echo(text, nl=False)
            return

        require_command("eksctl")
        console.print(Panel.fit(f"Creating EKS cluster '{options.common.cluster_name}'", style="bold blue"))
        with tempfile.NamedTemporaryFile("w", prefix="eksdemo-", suffix=".yaml") as f:
            f.write(text)
            f.flush()
            sh.eksctl("create", "cluster", "-f", f.name, _fg=True)
        console.print(f"[green]\u2705 Cluster '{options.common.cluster_name}' created[/green]")

    def delete(self, options: ClusterOptions) -> None:
        """Run ``eksctl delete cluster``.

        Args:
            options: Cluster options after pre-delete.
        """
        require_command("eksctl")
        console.print(Panel.fit(f"Deleting EKS cluster '{options.common.cluster_name}'", style="bold blue"))
        sh.eksctl(
            "delete", "cluster",
            "--name", options.common.cluster_name,
            "--region", options.common.region,
            _fg=True,
        )
        console.print(f"[green]\u2705 Cluster '{options.common.cluster_name}' deleted[/green]")

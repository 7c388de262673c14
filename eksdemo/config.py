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

"""Environment settings, flag combination checks, and config display."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from rich.panel import Panel

from eksdemo import console, logger
from eksdemo.constants import DEFAULT_MAX_ATTEMPTS, DEFAULT_RETRY_MODE

if TYPE_CHECKING:
    from eksdemo.cluster import ClusterOptions


# ============================================================================
# Configuration classes
# ============================================================================

class AwsSettings(BaseSettings):
    """AWS session configuration, auto-loaded from EKSDEMO_* env vars.

    Attributes:
        profile: Named AWS profile, or None for the default credential chain.
        region: Region override, or None to use the profile's region.
        max_attempts: Total attempts botocore makes for a single API call.
        retry_mode: botocore retry mode.
    """

    model_config = SettingsConfigDict(env_prefix="EKSDEMO_", extra="ignore")

    profile: str | None = None
    region: str | None = None
    max_attempts: int = Field(default=DEFAULT_MAX_ATTEMPTS, ge=1, le=20)
    retry_mode: str = Field(default=DEFAULT_RETRY_MODE, pattern=r"^(legacy|standard|adaptive)$")


def resolve_settings(profile: str | None = None, region: str | None = None) -> AwsSettings:
    """Merge CLI overrides over EKSDEMO_* environment variables.

    Args:
        profile: CLI override for the AWS profile, or None.
        region: CLI override for the AWS region, or None.

    Returns:
        Resolved settings (CLI > env > default).
    """
    settings = AwsSettings()
    overrides: dict = {}
    if profile is not None:
        overrides["profile"] = profile
    if region is not None:
        overrides["region"] = region
    if overrides:
        settings = settings.model_copy(update=overrides)
    return settings


# ============================================================================
# Validation
# ============================================================================

def validate_flags(options: ClusterOptions) -> None:
    """Warn about flag combinations that are accepted but have no effect.

    Args:
        options: Cluster options after flag values have been applied.
    """
    if options.prefix_assignment and options.ipv6:
        logger.warning("--prefix-assignment is implied by --ipv6; the flag has no additional effect")

    if options.private and options.fargate:
        logger.warning("--fargate on a --private cluster requires VPC endpoints for every image registry used")


# ============================================================================
# Display
# ============================================================================

def display_config(options: ClusterOptions) -> None:
    """Print the resolved cluster configuration.

    Args:
        options: Cluster options after pre-create has populated identity.
    """
    common = options.common
    ng = options.nodegroup
    console.print(Panel.fit("Configuration", style="bold blue"))

    console.print("[yellow]Cluster:[/yellow]")
    console.print(f"  name            : {common.cluster_name}")
    console.print(f"  account         : {common.account}")
    console.print(f"  region          : {common.region}")
    console.print(f"  version         : {common.kubernetes_version}")
    console.print(f"  network         : {'IPv6' if options.ipv6 else 'IPv4 ' + options.vpc_cidr}")
    console.print(f"  private         : {options.private}")
    console.print(f"  fargate         : {options.fargate}")

    console.print("[yellow]Node group:[/yellow]")
    console.print(f"  name            : {ng.nodegroup_name}")
    console.print(f"  instance_type   : {ng.instance_type}{' (spot)' if ng.spot else ''}")
    console.print(f"  nodes           : {ng.desired_capacity} (min {ng.min_size}, max {ng.max_size})")

    if options.no_roles:
        console.print("[yellow]IAM roles:[/yellow] skipped (--no-roles)")
    elif options.irsa_roles:
        console.print("[yellow]IAM roles for service accounts:[/yellow]")
        for role in options.irsa_roles:
            console.print(f"  {role.options.common.namespace}/{role.options.common.service_account}")

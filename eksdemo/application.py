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

"""Applications and the registry of those needing pre-created IAM roles."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from eksdemo import cloudformation, irsa
from eksdemo.constants import APPLICATIONS_FILE, IRSA_RESOURCE_NAME
from eksdemo.options import AcceptsCommonOptions, CommonOptions
from eksdemo.resource import Resource


@dataclass
class Application:
    """An installable application and the resources it depends on.

    Attributes:
        name: Application identifier (e.g. ``ebs-csi``).
        description: Human readable name.
        common: Namespace and service account the application runs as, plus
            identity fields filled in by the cluster.
        dependencies: Resources that must exist before the application is installed.
    """

    name: str
    description: str = ""
    common: CommonOptions = field(default_factory=CommonOptions)
    dependencies: list[Resource] = field(default_factory=list)

    def assign_common_resource_options(self, res: Resource) -> None:
        """Copy this application's identity fields onto a dependency's options."""
        options: AcceptsCommonOptions = res.options
        options.set_common_options(self.common)


def load_registry(path: Path = APPLICATIONS_FILE) -> dict[str, dict[str, Any]]:
    """Load the application registry.

    Args:
        path: Registry YAML file.

    Returns:
        Mapping of application id to its registry entry.
    """
    with open(path) as f:
        return yaml.safe_load(f) or {}


def _new_dependency(app_id: str, dep: dict[str, Any]) -> Resource:
    kind = dep.get("type")
    if not kind:
        raise ValueError(f"Dependency of application '{app_id}' has no type")
    if kind == "irsa":
        return irsa.new_resource(
            managed_policies=dep.get("managed_policies"),
            policy_document=dep.get("policy", ""),
            name=dep.get("name", IRSA_RESOURCE_NAME),
        )
    if kind == "cloudformation-stack":
        if not dep.get("name"):
            raise ValueError(f"Stack dependency of application '{app_id}' has no name")
        return cloudformation.new_stack_resource(name=dep["name"], suffix=dep.get("suffix", dep["name"]))
    raise ValueError(f"Unknown dependency type '{kind}' in application '{app_id}'")


def new_application(app_id: str, entry: dict[str, Any]) -> Application:
    """Build a fresh Application from a registry entry.

    Args:
        app_id: Application identifier.
        entry: Registry entry with namespace, service account, and dependencies.

    Returns:
        Application whose dependencies are new, unpopulated resources.

    Raises:
        ValueError: If a dependency has a missing or unknown type.
    """
    return Application(
        name=app_id,
        description=entry.get("description", ""),
        common=CommonOptions(
            namespace=entry.get("namespace", ""),
            service_account=entry.get("service_account", ""),
        ),
        dependencies=[_new_dependency(app_id, dep) for dep in entry.get("dependencies", [])],
    )


def irsa_candidates(registry: dict[str, dict[str, Any]] | None = None) -> list[Application]:
    """Create every registered application, in registry order."""
    if registry is None:
        registry = load_registry()
    return [new_application(app_id, entry) for app_id, entry in registry.items()]

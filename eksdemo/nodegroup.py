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

"""Managed node group options, flags, and eksctl manifest."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from eksdemo import logger
from eksdemo.constants import (
    DEFAULT_INSTANCE_TYPE,
    DEFAULT_MAX_SIZE,
    DEFAULT_MIN_SIZE,
    DEFAULT_OPERATING_SYSTEM,
    DEFAULT_VOLUME_SIZE,
    OPERATING_SYSTEMS,
)
from eksdemo.flags import BoolFlag, Flags, IntFlag, StringFlag
from eksdemo.options import CommonOptions


@dataclass
class NodegroupOptions:
    """Managed node group configuration.

    ``common`` is shared with the owning cluster when embedded, while
    ``kubernetes_version`` is the node group's own copy, synced by the cluster.

    Attributes:
        common: Identity fields, shared by reference with the cluster.
        kubernetes_version: Kubernetes version of the node group.
        nodegroup_name: Name of the node group.
        desired_capacity: Desired number of nodes.
        min_size: Minimum number of nodes.
        max_size: Maximum number of nodes.
        instance_type: EC2 instance type.
        operating_system: eksctl AMI family.
        spot: Whether to use Spot capacity.
        volume_size: Root volume size in GiB.
    """

    common: CommonOptions = field(default_factory=CommonOptions)
    kubernetes_version: str = ""
    nodegroup_name: str = ""
    desired_capacity: int = 1
    min_size: int = DEFAULT_MIN_SIZE
    max_size: int = DEFAULT_MAX_SIZE
    instance_type: str = DEFAULT_INSTANCE_TYPE
    operating_system: str = DEFAULT_OPERATING_SYSTEM
    spot: bool = False
    volume_size: int = DEFAULT_VOLUME_SIZE

    def set_name(self, name: str) -> None:
        self.nodegroup_name = name

    def pre_create(self) -> None:
        """Validate node group sizing before creation.

        Raises:
            ValueError: If the desired count is outside min/max, or max is below min.
        """
        if self.min_size > self.max_size:
            raise ValueError(f"--min ({self.min_size}) cannot be greater than --max ({self.max_size})")
        if not self.min_size <= self.desired_capacity <= self.max_size:
            raise ValueError(
                f"--nodes ({self.desired_capacity}) must be between --min ({self.min_size}) and --max ({self.max_size})"
            )
        logger.debug(
            "Node group %s: %d x %s (k8s %s)",
            self.nodegroup_name, self.desired_capacity, self.instance_type, self.kubernetes_version,
        )

    def manifest(self, private: bool = False) -> dict[str, Any]:
        """Build the eksctl ``managedNodeGroups`` entry.

        Args:
            private: Place nodes in private subnets only.

        Returns:
            Node group definition ready for YAML serialization.
        """
        ng: dict[str, Any] = {
            "name": self.nodegroup_name,
            "amiFamily": self.operating_system,
            "desiredCapacity": self.desired_capacity,
            "minSize": self.min_size,
            "maxSize": self.max_size,
            "volumeSize": self.volume_size,
        }
        if self.spot:
            ng["instanceTypes"] = [self.instance_type]
            ng["spot"] = True
        else:
            ng["instanceType"] = self.instance_type
        if private:
            ng["privateNetworking"] = True
        return ng


def new_options() -> tuple[NodegroupOptions, Flags]:
    """Create node group options and the flags bound to them."""
    options = NodegroupOptions()

    flags = Flags([
        StringFlag(
            name="instance",
            description="instance type",
            shorthand="i",
            target=options,
            attr="instance_type",
        ),
        IntFlag(
            name="nodes",
            description="desired number of nodes",
            shorthand="N",
            target=options,
            attr="desired_capacity",
            minimum=0,
        ),
        IntFlag(
            name="min",
            description="min number of nodes",
            target=options,
            attr="min_size",
            minimum=0,
        ),
        IntFlag(
            name="max",
            description="max number of nodes",
            target=options,
            attr="max_size",
            minimum=1,
        ),
        StringFlag(
            name="os",
            description="operating system",
            target=options,
            attr="operating_system",
            choices=OPERATING_SYSTEMS,
        ),
        BoolFlag(
            name="spot",
            description="use Spot instances",
            target=options,
            attr="spot",
        ),
        IntFlag(
            name="volume-size",
            description="root volume size in GiB",
            target=options,
            attr="volume_size",
            minimum=1,
        ),
    ])

    return options, flags

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

"""Options shared by every resource, and the contracts resources implement."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Protocol


@dataclass
class CommonOptions:
    """Identity and placement fields common to all resources.

    Attributes:
        account: AWS account id.
        cluster_name: Name of the EKS cluster the resource belongs to.
        kubernetes_version: Kubernetes minor version (e.g. ``1.26``).
        namespace: Kubernetes namespace, for resources that live in one.
        partition: AWS partition (``aws``, ``aws-cn``, ``aws-us-gov``).
        region: AWS region.
        service_account: Kubernetes service account name.
    """

    IDENTITY_FIELDS: ClassVar[tuple[str, ...]] = (
        "account",
        "cluster_name",
        "namespace",
        "partition",
        "region",
        "service_account",
    )
    REQUIRED_FOR_BINDING: ClassVar[tuple[str, ...]] = (
        "account",
        "cluster_name",
        "partition",
        "region",
        "service_account",
    )

    account: str = ""
    cluster_name: str = ""
    kubernetes_version: str = ""
    namespace: str = ""
    partition: str = ""
    region: str = ""
    service_account: str = ""

    def copy_identity(self, source: CommonOptions) -> None:
        """Overwrite this object's identity fields with those of *source*."""
        for field_name in self.IDENTITY_FIELDS:
            setattr(self, field_name, getattr(source, field_name))

    def missing_identity(self) -> list[str]:
        """Return the binding identity fields that are still empty."""
        return [name for name in self.REQUIRED_FOR_BINDING if not getattr(self, name)]


class Nameable(Protocol):
    def set_name(self, name: str) -> None: ...


class AcceptsCommonOptions(Protocol):
    """Resource options that can take identity fields from another resource."""

    def set_common_options(self, source: CommonOptions) -> None: ...

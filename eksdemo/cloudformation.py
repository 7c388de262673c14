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

"""CloudFormation stack lookup, deletion, and stack dependency descriptors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from eksdemo.constants import TAG_CLUSTER_NAME, TAG_STACK_CATEGORY
from eksdemo.options import CommonOptions
from eksdemo.resource import Resource


@dataclass(frozen=True)
class Stack:
    name: str
    status: str = ""
    tags: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Stack:
        return cls(
            name=data["StackName"],
            status=data.get("StackStatus", ""),
            tags={tag["Key"]: tag["Value"] for tag in data.get("Tags", [])},
        )


class CloudformationClient:
    """Thin wrapper over the boto3 CloudFormation client."""

    def __init__(self, client: Any) -> None:
        self._client = client

    def describe_stacks(self) -> list[Stack]:
        paginator = self._client.get_paginator("describe_stacks")
        return [Stack.from_api(stack) for page in paginator.paginate() for stack in page.get("Stacks", [])]

    def delete_stack(self, stack_name: str) -> None:
        self._client.delete_stack(StackName=stack_name)


class StackGetter:
    def __init__(self, client: CloudformationClient) -> None:
        self._client = client

    def get_stacks_by_cluster(self, cluster_name: str, category: str = "") -> list[Stack]:
        """Return stacks tagged as belonging to a cluster, in lookup order.

        Args:
            cluster_name: EKS cluster name matched against the eksctl cluster tag.
            category: Optional stack category tag value; empty matches every category.

        Returns:
            Matching stacks, excluding any already fully deleted.
        """
        stacks = []
        for stack in self._client.describe_stacks():
            if stack.status == "DELETE_COMPLETE":
                continue
            if stack.tags.get(TAG_CLUSTER_NAME) != cluster_name:
                continue
            if category and stack.tags.get(TAG_STACK_CATEGORY) != category:
                continue
            stacks.append(stack)
        return stacks


@dataclass
class StackOptions:
    """Descriptor for a CloudFormation stack an application depends on.

    Cluster pre-create skips these; they only carry identity and naming.

    Attributes:
        common: Identity fields copied from the owning application.
        suffix: Stack name suffix.
    """

    common: CommonOptions = field(default_factory=CommonOptions)
    suffix: str = ""

    def set_common_options(self, source: CommonOptions) -> None:
        self.common.copy_identity(source)

    def set_name(self, name: str) -> None:
        self.suffix = name


def new_stack_resource(name: str, suffix: str) -> Resource:
    return Resource(
        name=name,
        description="CloudFormation Stack",
        options=StackOptions(suffix=suffix),
    )

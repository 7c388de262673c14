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

"""IAM roles for service accounts (IRSA) descriptors and eksctl rendering."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

import yaml

from eksdemo.constants import IRSA_RESOURCE_NAME
from eksdemo.options import CommonOptions
from eksdemo.resource import Resource
from eksdemo.template import TextTemplate

# One entry of an eksctl ClusterConfig ``iam.serviceAccounts`` list.
EKSCTL_TEMPLATE = """\
- metadata:
    name: {{ service_account }}
    namespace: {{ namespace }}
  roleName: {{ role_name }}
{% if policy_arns %}
  attachPolicyARNs: {{ policy_arns | tojson }}
{% endif %}
{% if policy_document %}
  attachPolicy: {{ policy_document | tojson }}
{% endif %}
"""

# IAM role names are limited to 64 characters.
MAX_ROLE_NAME_LENGTH = 64


@dataclass
class IrsaOptions:
    """Binding request for an IAM role scoped to a Kubernetes service account.

    Attributes:
        common: Identity fields; populated from the owning application.
        managed_policies: AWS managed policy names relative to
            ``arn:<partition>:iam::aws:policy/``.
        policy_document: Inline policy as a jinja2 template of JSON text;
            rendered with ``partition``, ``account``, ``region`` and ``cluster``.
    """

    common: CommonOptions = field(default_factory=CommonOptions)
    managed_policies: list[str] = field(default_factory=list)
    policy_document: str = ""

    @property
    def role_name(self) -> str:
        name = f"eksdemo.{self.common.cluster_name}.{self.common.namespace}.{self.common.service_account}"
        return name[:MAX_ROLE_NAME_LENGTH]

    def set_common_options(self, source: CommonOptions) -> None:
        self.common.copy_identity(source)

    def set_name(self, name: str) -> None:
        self.common.service_account = name

    def policy_arns(self) -> list[str]:
        return [f"arn:{self.common.partition}:iam::aws:policy/{policy}" for policy in self.managed_policies]

    def render_policy(self) -> dict[str, Any] | None:
        if not self.policy_document:
            return None
        text = TextTemplate(self.policy_document).render({
            "account": self.common.account,
            "cluster": self.common.cluster_name,
            "partition": self.common.partition,
            "region": self.common.region,
        })
        return json.loads(text)


def new_resource(managed_policies: list[str] | None = None, policy_document: str = "",
                 name: str = IRSA_RESOURCE_NAME) -> Resource:
    return Resource(
        name=name,
        description="IAM Role for Service Account (IRSA)",
        options=IrsaOptions(managed_policies=list(managed_policies or []), policy_document=policy_document),
    )


def render_service_accounts(template: TextTemplate, roles: list[Resource]) -> list[dict[str, Any]]:
    """Render binding requests into eksctl ``iam.serviceAccounts`` entries.

    Args:
        template: Template producing a YAML list with one service account entry.
        roles: IRSA resources populated by cluster pre-create.

    Returns:
        Parsed service account entries, in the order of *roles*.

    Raises:
        ValueError: If a role is missing account, cluster, partition, region,
            or service account.
    """
    entries: list[dict[str, Any]] = []
    for role in roles:
        options: IrsaOptions = role.options
        missing = options.common.missing_identity()
        if missing:
            raise ValueError(f"IRSA role for '{options.common.service_account}' is missing: {', '.join(missing)}")
        rendered = template.render({
            "namespace": options.common.namespace,
            "policy_arns": options.policy_arns(),
            "policy_document": options.render_policy(),
            "role_name": options.role_name,
            "service_account": options.common.service_account,
        })
        entries.extend(yaml.safe_load(rendered))
    return entries

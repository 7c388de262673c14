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

"""Tests for CloudFormation stack lookup and stack descriptors."""

from __future__ import annotations

from eksdemo.cloudformation import CloudformationClient, StackGetter, StackOptions, new_stack_resource
from eksdemo.constants import TAG_STACK_CATEGORY
from eksdemo.options import CommonOptions


def test_describe_stacks_walks_every_page(cfn_client, make_stack):
    cfn_client.get_paginator.return_value.paginate.return_value = [
        {"Stacks": [make_stack("one")]},
        {"Stacks": [make_stack("two"), make_stack("three")]},
        {},
    ]

    stacks = CloudformationClient(cfn_client).describe_stacks()

    cfn_client.get_paginator.assert_called_once_with("describe_stacks")
    assert [s.name for s in stacks] == ["one", "two", "three"]
    assert stacks[0].status == "CREATE_COMPLETE"


def test_get_stacks_by_cluster_filters_on_cluster_tag(cfn_client, make_stack):
    cfn_client.get_paginator.return_value.paginate.return_value = [{"Stacks": [
        make_stack("eksdemo-blue-a"),
        make_stack("eksdemo-green-a", cluster_name="green"),
        {"StackName": "untagged", "StackStatus": "CREATE_COMPLETE"},
        make_stack("eksdemo-blue-b", status="DELETE_COMPLETE"),
        make_stack("eksdemo-blue-c", status="DELETE_FAILED"),
    ]}]

    stacks = StackGetter(CloudformationClient(cfn_client)).get_stacks_by_cluster("blue")

    assert [s.name for s in stacks] == ["eksdemo-blue-a", "eksdemo-blue-c"]


def test_get_stacks_by_cluster_category(cfn_client, make_stack):
    cfn_client.get_paginator.return_value.paginate.return_value = [{"Stacks": [
        make_stack("eksdemo-blue-karpenter", tags={TAG_STACK_CATEGORY: "karpenter"}),
        make_stack("eksdemo-blue-other", tags={TAG_STACK_CATEGORY: "other"}),
        make_stack("eksdemo-blue-none"),
    ]}]
    getter = StackGetter(CloudformationClient(cfn_client))

    assert [s.name for s in getter.get_stacks_by_cluster("blue", "karpenter")] == ["eksdemo-blue-karpenter"]
    assert len(getter.get_stacks_by_cluster("blue", "")) == 3


def test_delete_stack(cfn_client):
    CloudformationClient(cfn_client).delete_stack("eksdemo-blue-a")

    cfn_client.delete_stack.assert_called_once_with(StackName="eksdemo-blue-a")


def test_stack_options_identity_and_name():
    res = new_stack_resource(name="karpenter-node-role", suffix="node-role")
    options: StackOptions = res.options

    options.set_common_options(CommonOptions(cluster_name="blue", account="1", namespace="karpenter"))
    res.set_name("karpenter-node-role")

    assert options.suffix == "karpenter-node-role"
    assert options.common.account == "1"
    assert options.common.cluster_name == "blue"
    assert options.common.namespace == "karpenter"

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

"""Shared fixtures: fake AWS session and CloudFormation client."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from eksdemo import cluster
from eksdemo.constants import TAG_CLUSTER_NAME

ACCOUNT = "123456789012"
PARTITION = "aws"
REGION = "us-west-2"


def stack_dict(name: str, cluster_name: str = "blue", status: str = "CREATE_COMPLETE",
               tags: dict[str, str] | None = None) -> dict:
    all_tags = {TAG_CLUSTER_NAME: cluster_name, **(tags or {})}
    return {
        "StackName": name,
        "StackStatus": status,
        "Tags": [{"Key": k, "Value": v} for k, v in all_tags.items()],
    }


@pytest.fixture
def make_stack():
    return stack_dict


@pytest.fixture
def cfn_client():
    """boto3 CloudFormation client returning a single page of stacks."""
    client = MagicMock()
    client.get_paginator.return_value.paginate.return_value = [{"Stacks": []}]
    return client


@pytest.fixture
def aws(cfn_client):
    session = MagicMock()
    session.account_id.return_value = ACCOUNT
    session.partition.return_value = PARTITION
    session.region.return_value = REGION
    session.client.return_value = cfn_client
    return session


@pytest.fixture
def cluster_resource(aws):
    res = cluster.new_resource()
    res.options.aws = aws
    return res

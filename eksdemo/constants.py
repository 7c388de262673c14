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

"""Defaults, reserved names, and tag keys."""

from __future__ import annotations

from pathlib import Path

PACKAGE_DIR = Path(__file__).resolve().parent
APPLICATIONS_FILE = PACKAGE_DIR / "applications.yaml"

# -- Cluster defaults --
DEFAULT_KUBERNETES_VERSION = "1.26"
KUBERNETES_VERSIONS = ("1.26", "1.25", "1.24", "1.23", "1.22")
DEFAULT_VPC_CIDR = "192.168.0.0/16"

# -- Node group defaults --
DEFAULT_NODEGROUP_NAME = "main"
DEFAULT_DESIRED_CAPACITY = 2
DEFAULT_MIN_SIZE = 0
DEFAULT_MAX_SIZE = 10
DEFAULT_INSTANCE_TYPE = "t3.large"
DEFAULT_VOLUME_SIZE = 80
DEFAULT_OPERATING_SYSTEM = "AmazonLinux2"
OPERATING_SYSTEMS = ("AmazonLinux2", "Bottlerocket", "Ubuntu2004")

# -- Reserved names --
# Only stacks carrying this prefix are ever deleted on cluster teardown.
STACK_NAME_PREFIX = "eksdemo-"
IRSA_RESOURCE_NAME = "irsa"
FARGATE_PROFILE_NAME = "fp-default"
FARGATE_NAMESPACE = "fargate"

# -- Tags --
TAG_CLUSTER_NAME = "alpha.eksctl.io/cluster-name"
TAG_STACK_CATEGORY = "eksdemo.io/stack-category"

# -- eksctl --
EKSCTL_API_VERSION = "eksctl.io/v1alpha5"
EKSCTL_KIND = "ClusterConfig"

# -- AWS client defaults --
DEFAULT_MAX_ATTEMPTS = 10
DEFAULT_RETRY_MODE = "standard"

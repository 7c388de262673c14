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

"""EKS cluster options, flags, and pre-create/pre-delete hooks."""

from __future__ import annotations

from dataclasses import dataclass, field

from eksdemo import console, logger, nodegroup
from eksdemo.application import Application, irsa_candidates
from eksdemo.aws import AwsSession
from eksdemo.cloudformation import CloudformationClient, StackGetter
from eksdemo.constants import (
    DEFAULT_DESIRED_CAPACITY,
    DEFAULT_KUBERNETES_VERSION,
    DEFAULT_NODEGROUP_NAME,
    DEFAULT_VPC_CIDR,
    IRSA_RESOURCE_NAME,
    KUBERNETES_VERSIONS,
    STACK_NAME_PREFIX,
)
from eksdemo.eksctl import EksctlManager
from eksdemo.flags import BoolFlag, FlagValidationError, Flags, StringFlag
from eksdemo.irsa import EKSCTL_TEMPLATE, IrsaOptions
from eksdemo.nodegroup import NodegroupOptions
from eksdemo.options import CommonOptions
from eksdemo.resource import Resource
from eksdemo.template import TextTemplate
from eksdemo.utils import parse_cidr


@dataclass
class ClusterOptions:
    """Options for creating and deleting an EKS cluster.

    Attributes:
        common: Cluster identity; shared by reference with ``nodegroup``.
        nodegroup: Embedded options of the cluster's initial node group.
        fargate: Create a Fargate profile.
        ipv6: Use IPv6 networking.
        no_roles: Skip creating IAM roles for service accounts.
        prefix_assignment: Configure the VPC CNI for prefix assignment.
        private: Private cluster with VPC endpoints.
        vpc_cidr: IPv4 CIDR of the cluster VPC.
        apps_for_irsa: Applications whose IRSA roles are created with the cluster;
            None loads the application registry on first pre-create.
        irsa_template: Template rendering each role into eksctl config.
        irsa_roles: IRSA binding requests, populated by :meth:`pre_create`.
        aws: AWS session used to resolve identity and reach CloudFormation.
    """

    common: CommonOptions = field(default_factory=CommonOptions)
    nodegroup: NodegroupOptions = field(default_factory=NodegroupOptions)

    fargate: bool = False
    ipv6: bool = False
    no_roles: bool = False
    prefix_assignment: bool = False
    private: bool = False
    vpc_cidr: str = DEFAULT_VPC_CIDR

    apps_for_irsa: list[Application] | None = None
    irsa_template: TextTemplate = field(default_factory=lambda: TextTemplate(EKSCTL_TEMPLATE))
    irsa_roles: list[Resource] = field(default_factory=list)

    aws: AwsSession = field(default_factory=AwsSession, repr=False)

    def set_name(self, name: str) -> None:
        self.common.cluster_name = name

    def pre_create(self) -> None:
        """Resolve identity and propagate it to the node group and IRSA roles.

        Raises:
            IdentityError: If the account, partition, or region cannot be resolved.
            ValueError: If the application registry or the node group
                configuration is invalid.
        """
        self.common.account = self.aws.account_id()
        self.common.partition = self.aws.partition()
        self.common.region = self.aws.region()
        self.nodegroup.kubernetes_version = self.common.kubernetes_version

        if self.apps_for_irsa is None:
            self.apps_for_irsa = irsa_candidates()

        # For apps we want to pre-create IRSA for, find the IRSA dependency
        self.irsa_roles = []
        for app in self.apps_for_irsa:
            found = 0
            for res in app.dependencies:
                if res.name != IRSA_RESOURCE_NAME:
                    if isinstance(res.options, IrsaOptions):
                        logger.warning("Skipping %s IAM role dependency named '%s'", app.name, res.name)
                    else:
                        logger.debug("Skipping %s dependency '%s'", app.name, res.name)
                    continue
                app.common.account = self.common.account
                app.common.cluster_name = self.common.cluster_name
                app.common.region = self.common.region
                app.common.partition = self.common.partition
                app.assign_common_resource_options(res)
                res.set_name(app.common.service_account)

                self.irsa_roles.append(res)
                found += 1
            if not found:
                logger.warning(
                    "Application '%s' has no '%s' dependency; its IAM role will not be pre-created",
                    app.name, IRSA_RESOURCE_NAME,
                )

        self.nodegroup.pre_create()

    def pre_delete(self) -> None:
        """Delete tool-managed CloudFormation stacks that belong to the cluster.

        Stacks are deleted one at a time in lookup order. Stacks whose names
        do not start with the reserved prefix are never touched.

        Raises:
            IdentityError: If the region cannot be resolved.
            botocore.exceptions.ClientError: From the first failed lookup or
                deletion; remaining stacks are not attempted.
        """
        self.common.region = self.aws.region()

        cloudformation_client = CloudformationClient(self.aws.client("cloudformation"))
        stacks = StackGetter(cloudformation_client).get_stacks_by_cluster(self.common.cluster_name, "")

        for stack in stacks:
            if not stack.name.startswith(STACK_NAME_PREFIX):
                continue
            console.print(f'Deleting Cloudformation stack "{stack.name}"')
            cloudformation_client.delete_stack(stack.name)


def _validate_vpc_cidr(value: str) -> None:
    try:
        parse_cidr(value)
    except ValueError as err:
        raise FlagValidationError(f"failed parsing --vpc-cidr, {err}") from err


def add_options(res: Resource) -> Resource:
    """Attach cluster options and create flags to a resource.

    Node group flags are registered first, followed by the cluster flags.

    Args:
        res: Resource to configure.

    Returns:
        The same resource, with ``options`` and ``create_flags`` set.

    Raises:
        ValueError: If two flags collide on a name or shorthand.
    """
    ng_options, ng_flags = nodegroup.new_options()

    options = ClusterOptions(
        common=CommonOptions(kubernetes_version=DEFAULT_KUBERNETES_VERSION),
        nodegroup=ng_options,
        no_roles=False,
        vpc_cidr=DEFAULT_VPC_CIDR,
        irsa_template=TextTemplate(EKSCTL_TEMPLATE),
    )

    ng_options.common = options.common
    ng_options.desired_capacity = DEFAULT_DESIRED_CAPACITY
    ng_options.nodegroup_name = DEFAULT_NODEGROUP_NAME

    res.options = options

    flags = Flags([
        StringFlag(
            name="version",
            description="Kubernetes version",
            shorthand="v",
            target=options.common,
            attr="kubernetes_version",
            choices=KUBERNETES_VERSIONS,
        ),
        BoolFlag(
            name="fargate",
            description="create a Fargate profile",
            target=options,
            attr="fargate",
        ),
        BoolFlag(
            name="ipv6",
            description="use IPv6 networking",
            target=options,
            attr="ipv6",
        ),
        BoolFlag(
            name="no-roles",
            description="don't create IAM roles",
            target=options,
            attr="no_roles",
        ),
        BoolFlag(
            name="prefix-assignment",
            description="configure VPC CNI for prefix assignment",
            target=options,
            attr="prefix_assignment",
        ),
        BoolFlag(
            name="private",
            description="private cluster (includes ECR, S3, and other VPC endpoints)",
            target=options,
            attr="private",
        ),
        StringFlag(
            name="vpc-cidr",
            description="CIDR to use for EKS Cluster VPC",
            target=options,
            attr="vpc_cidr",
            validate=_validate_vpc_cidr,
        ),
    ])

    res.create_flags = Flags([*ng_flags, *flags])
    res.create_flags.check_unique()

    return res


def new_resource() -> Resource:
    return add_options(Resource(
        name="cluster",
        description="EKS Cluster",
        manager=EksctlManager(),
    ))

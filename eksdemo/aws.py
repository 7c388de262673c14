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

"""AWS session, client construction, and caller identity."""

from __future__ import annotations

from typing import Any

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError, ProfileNotFound

from eksdemo import logger
from eksdemo.config import AwsSettings


class IdentityError(RuntimeError):
    """Raised when the AWS account, partition, or region cannot be resolved."""


class AwsSession:
    """Lazily created boto3 session with a cached caller identity.

    Nothing touches the network or the credential chain until a client or
    identity value is first requested.
    """

    def __init__(self, settings: AwsSettings | None = None) -> None:
        self._settings = settings
        self._session: boto3.session.Session | None = None
        self._caller_identity: dict[str, Any] | None = None

    @property
    def settings(self) -> AwsSettings:
        if self._settings is None:
            self._settings = AwsSettings()
        return self._settings

    @property
    def session(self) -> boto3.session.Session:
        if self._session is None:
            try:
                self._session = boto3.session.Session(
                    profile_name=self.settings.profile,
                    region_name=self.settings.region,
                )
            except ProfileNotFound as err:
                raise IdentityError(f"AWS profile '{self.settings.profile}' not found") from err
        return self._session

    def client(self, service_name: str) -> Any:
        """Create a boto3 client in the resolved region with the configured retry policy.

        Args:
            service_name: boto3 service name (e.g. ``cloudformation``).

        Returns:
            A boto3 client for the service.
        """
        config = Config(retries={"max_attempts": self.settings.max_attempts, "mode": self.settings.retry_mode})
        return self.session.client(service_name, region_name=self.region(), config=config)

    def region(self) -> str:
        """Return the session region.

        Raises:
            IdentityError: If no region is configured.
        """
        region = self.session.region_name
        if not region:
            raise IdentityError("AWS region is not configured; set AWS_REGION, EKSDEMO_REGION, or --region")
        return region

    def account_id(self) -> str:
        return self._identity()["Account"]

    def partition(self) -> str:
        # arn:<partition>:sts::<account>:assumed-role/...
        return self._identity()["Arn"].split(":")[1]

    def _identity(self) -> dict[str, Any]:
        if self._caller_identity is None:
            try:
                self._caller_identity = self.client("sts").get_caller_identity()
            except (BotoCoreError, ClientError) as err:
                raise IdentityError(f"Failed to resolve AWS caller identity: {err}") from err
            logger.debug("Resolved caller identity %s", self._caller_identity["Arn"])
        return self._caller_identity

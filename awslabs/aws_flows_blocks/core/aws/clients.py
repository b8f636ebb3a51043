# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
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

import boto3
import importlib.metadata
from ..common.models import Credentials
from botocore.config import Config
from typing import Any


# Get package version for user agent
try:
    PACKAGE_VERSION = importlib.metadata.version('awslabs.aws_flows_blocks')
except importlib.metadata.PackageNotFoundError:
    PACKAGE_VERSION = 'unknown'


def build_client(
    service_name: str,
    region: str,
    credentials: Credentials,
    endpoint: str | None = None,
) -> Any:
    """Build a new boto3 client for one invocation.

    Clients are never cached: every call returns a fresh client scoped to the
    given region, credentials and endpoint override. Retries and timeouts are
    left to the botocore defaults.
    """
    config = Config(
        region_name=region,
        user_agent_extra=f'AWSFlowsBlocks/{PACKAGE_VERSION}',
    )

    return boto3.client(
        service_name,
        region_name=region,
        aws_access_key_id=credentials.access_key_id,
        aws_secret_access_key=credentials.secret_access_key,
        aws_session_token=credentials.session_token,
        endpoint_url=endpoint,
        config=config,
    )

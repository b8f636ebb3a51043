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
import threading
import time
from ..common import config
from ..common.errors import IncompleteCredentialsError
from ..common.models import AppConfig, Credentials
from .clients import build_client
from botocore.exceptions import NoCredentialsError
from loguru import logger


SESSION_NAME_PREFIX = 'flows-session-'
ASSUMED_CREDENTIAL_KEYS = ('AccessKeyId', 'SecretAccessKey', 'SessionToken')

_last_session_millis = 0
_session_name_lock = threading.Lock()


def new_session_name() -> str:
    """Return a role session name of the form flows-session-<unix time in milliseconds>.

    Names are strictly increasing within the process, even when two sessions are
    requested within the same millisecond.
    """
    global _last_session_millis

    with _session_name_lock:
        millis = max(int(time.time() * 1000), _last_session_millis + 1)
        _last_session_millis = millis
    return f'{SESSION_NAME_PREFIX}{millis}'


def resolve_credentials(
    assume_role_arn: str | None,
    static_credentials: Credentials,
    region: str,
    endpoint: str | None = None,
) -> Credentials:
    """Resolve the credentials used for one invocation.

    When no role is given (None or empty string) the static credentials are returned
    unchanged and no STS call is made. Otherwise a single AssumeRole call is made with
    the static credentials, in the invocation region and through the endpoint override
    if one is set. STS errors are not caught.
    """
    if not assume_role_arn:
        return static_credentials

    session_name = new_session_name()
    logger.info(
        "Assuming role '{}' with session '{}' in '{}' region", assume_role_arn, session_name, region
    )

    sts_client = build_client('sts', region, static_credentials, endpoint)
    response = sts_client.assume_role(RoleArn=assume_role_arn, RoleSessionName=session_name)

    issued = response.get('Credentials') or {}
    missing = [key for key in ASSUMED_CREDENTIAL_KEYS if not issued.get(key)]
    if missing:
        raise IncompleteCredentialsError(assume_role_arn, missing)

    return Credentials(
        access_key_id=issued['AccessKeyId'],
        secret_access_key=issued['SecretAccessKey'],
        session_token=issued['SessionToken'],
    )


def load_app_config() -> AppConfig:
    """Load the app-level static credentials and endpoint override.

    Credentials come from the default boto3 credential chain.
    """
    aws_creds = boto3.Session().get_credentials()
    if aws_creds is None:
        raise NoCredentialsError()

    frozen = aws_creds.get_frozen_credentials()
    return AppConfig(
        access_key_id=frozen.access_key,
        secret_access_key=frozen.secret_key,
        session_token=frozen.token,
        endpoint=config.ENDPOINT_URL,
    )

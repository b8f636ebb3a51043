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

from ..common.helpers import operation_timer, sanitize_response
from ..common.models import AppConfig, Credentials, InvocationConfig, OperationDescriptor
from .clients import build_client
from .credentials import resolve_credentials
from loguru import logger
from typing import Any, Protocol


class EventSink(Protocol):
    """Receives the single output event of a block invocation."""

    def emit(self, payload: Any) -> None: ...


def invoke_operation(
    descriptor: OperationDescriptor,
    invocation: InvocationConfig,
    credentials: Credentials,
    endpoint: str | None = None,
) -> Any:
    """Build a client for the descriptor's service and call its operation exactly once.

    The invocation parameters are passed through as-is. A missing response is
    normalized to an empty dictionary. Service errors are not caught.
    """
    logger.info(
        "Invoking {} in '{}' region with {} parameter(s)",
        descriptor.block_id,
        invocation.region,
        len(invocation.parameters),
    )

    with operation_timer(descriptor.service, descriptor.operation_python_name):
        client = build_client(descriptor.service, invocation.region, credentials, endpoint)
        operation = getattr(client, descriptor.operation_python_name)
        response = operation(**invocation.parameters)

    if response is None:
        return {}
    return response


def run_invocation(
    descriptor: OperationDescriptor,
    invocation: InvocationConfig,
    app_config: AppConfig,
    sink: EventSink,
) -> Any:
    """Resolve credentials, invoke the operation and emit the sanitized result.

    Returns the emitted payload. Nothing is emitted when credential resolution or
    the operation call fails.
    """
    credentials = resolve_credentials(
        invocation.assume_role_arn,
        app_config.static_credentials,
        invocation.region,
        app_config.endpoint,
    )
    response = invoke_operation(descriptor, invocation, credentials, app_config.endpoint)

    payload = sanitize_response(response)
    if payload is None:
        payload = {}
    sink.emit(payload)
    return payload

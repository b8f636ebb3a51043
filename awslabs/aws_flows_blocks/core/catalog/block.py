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

from ..aws.driver import EventSink, run_invocation
from ..common.errors import InvalidInputError
from ..common.models import AppConfig, InvocationConfig, OperationDescriptor
from .validation import InputValidator
from typing import Any


class CollectingEventSink:
    """Event sink that keeps every emitted payload in order."""

    def __init__(self):
        """Initialize an empty sink."""
        self.events: list[Any] = []

    def emit(self, payload: Any) -> None:
        """Record an emitted payload."""
        self.events.append(payload)


class Block:
    """A catalog block: one operation descriptor and the handler that invokes it."""

    def __init__(self, descriptor: OperationDescriptor):
        """Initialize the block and its input validator."""
        self.descriptor = descriptor
        self._validator = InputValidator(descriptor)

    @property
    def block_id(self) -> str:
        """Return the catalog identifier of the block."""
        return self.descriptor.block_id

    @property
    def input_schema(self) -> dict[str, Any]:
        """Return the JSON schema the block input is validated against."""
        return self._validator.schema

    def validate(self, input_config: dict[str, Any]) -> None:
        """Raise InvalidInputError if the input does not match the declared fields."""
        errors = self._validator.validate(input_config)
        if errors:
            raise InvalidInputError(self.block_id, errors)

    def on_event(
        self, input_config: dict[str, Any], app_config: AppConfig, sink: EventSink
    ) -> Any:
        """Handle one invocation of the block.

        The input is validated before any AWS call; the routing fields are then
        split from the operation parameters and the result is emitted to the sink.
        """
        self.validate(input_config)
        invocation = InvocationConfig.from_input(input_config)
        return run_invocation(self.descriptor, invocation, app_config, sink)

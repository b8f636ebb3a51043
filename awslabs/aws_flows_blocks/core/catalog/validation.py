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

"""Structural validation of block inputs against the block's declared fields."""

import jsonschema
from ..common.models import (
    ASSUME_ROLE_ARN_FIELD,
    REGION_FIELD,
    REGION_KEY,
    OperationDescriptor,
)
from typing import Any


def build_input_schema(descriptor: OperationDescriptor) -> dict[str, Any]:
    """Build the JSON schema of a block input.

    The schema requires a non-empty region, accepts an optional role ARN (null
    meaning no role) and the declared operation fields, and rejects undeclared
    top-level fields.
    """
    properties: dict[str, Any] = {
        REGION_KEY: {'type': 'string', 'minLength': 1},
        ASSUME_ROLE_ARN_FIELD.key: {'type': ['string', 'null']},
    }
    for field in descriptor.fields:
        properties[field.key] = field.schema

    return {
        '$schema': 'https://json-schema.org/draft/2020-12/schema',
        'type': 'object',
        'properties': properties,
        'required': [REGION_FIELD.key, *descriptor.required_fields],
        'additionalProperties': False,
    }


class InputValidator:
    """Validates block inputs against the schema derived from an operation descriptor."""

    def __init__(self, descriptor: OperationDescriptor):
        """Initialize the validator."""
        self.schema = build_input_schema(descriptor)
        self._validator = jsonschema.Draft202012Validator(self.schema)

    def validate(self, input_config: Any) -> list[str]:
        """Validate an input and return the list of violations, empty when valid."""
        error_messages = []
        for error in self._validator.iter_errors(input_config):
            path = ' -> '.join(str(p) for p in error.path)
            error_messages.append(f'{path}: {error.message}' if path else error.message)
        return error_messages

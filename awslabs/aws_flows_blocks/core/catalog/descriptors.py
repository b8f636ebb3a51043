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

from ..aws.shapes import INTEGRAL_TYPES, field_type, shape_to_schema
from ..common.helpers import humanize_name, summarize_documentation
from ..common.models import FieldDescriptor, OperationDescriptor
from botocore.model import OperationModel
from typing import Any


def build_output_schema(operation_model: OperationModel) -> dict[str, Any]:
    """Build the advisory output type of an operation.

    Top-level members carry their documentation summary; the top level stays open
    to extra properties such as ResponseMetadata.
    """
    output_shape = operation_model.output_shape
    properties: dict[str, Any] = {}
    if output_shape is not None:
        for name, member in output_shape.members.items():  # type: ignore[attr-defined]
            schema = shape_to_schema(member, depth=1)
            description = summarize_documentation(member.documentation)
            if description:
                schema['description'] = description
            properties[name] = schema

    return {'type': 'object', 'properties': properties, 'additionalProperties': True}


def build_fields(operation_model: OperationModel) -> tuple[FieldDescriptor, ...]:
    """Build the ordered input field list of an operation."""
    input_shape = operation_model.input_shape
    if input_shape is None:
        return ()

    required = set(input_shape.required_members)  # type: ignore[attr-defined]
    return tuple(
        FieldDescriptor(
            key=name,
            name=humanize_name(name),
            type=field_type(member),
            integral=member.type_name in INTEGRAL_TYPES,
            required=name in required,
            description=summarize_documentation(member.documentation),
        )
        for name, member in input_shape.members.items()  # type: ignore[attr-defined]
    )


def build_operation_descriptor(
    category: str, operation_model: OperationModel
) -> OperationDescriptor:
    """Describe a botocore operation as a catalog block."""
    return OperationDescriptor(
        service=operation_model.service_model.service_name,
        operation=operation_model.name,
        category=category,
        name=humanize_name(operation_model.name),
        description=summarize_documentation(operation_model.documentation),
        fields=build_fields(operation_model),
        output_schema=build_output_schema(operation_model),
    )

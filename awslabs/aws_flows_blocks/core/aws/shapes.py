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

from botocore.model import Shape
from typing import Any


MAX_SCHEMA_DEPTH = 4

SCALAR_TYPES = {
    'string': 'string',
    'character': 'string',
    'timestamp': 'string',
    'blob': 'string',
    'integer': 'number',
    'long': 'number',
    'float': 'number',
    'double': 'number',
    'bigdecimal': 'number',
    'boolean': 'boolean',
}

INTEGRAL_TYPES = frozenset(['integer', 'long'])

# Placeholder for recursive or deeply nested structures
OPAQUE_OBJECT = {'type': 'object', 'additionalProperties': True}


def shape_to_schema(
    shape: Shape | None, depth: int = 0, seen: frozenset[str] = frozenset()
) -> dict[str, Any]:
    """Convert a botocore shape into a JSON-schema-like type tree.

    Structures become closed objects with their required members, lists become
    arrays and maps become objects whose additional properties follow the value
    shape. Integer shapes are numbers constrained to whole values. Recursive
    structures, and structures nested deeper than MAX_SCHEMA_DEPTH, are replaced
    by an open object.
    """
    if shape is None:
        return {}

    type_name = shape.type_name
    if type_name == 'structure':
        if getattr(shape, 'is_document_type', False):
            return {}
        if depth >= MAX_SCHEMA_DEPTH or shape.name in seen:
            return dict(OPAQUE_OBJECT)

        nested_seen = seen | {shape.name}
        schema: dict[str, Any] = {
            'type': 'object',
            'properties': {
                name: shape_to_schema(member, depth + 1, nested_seen)
                for name, member in shape.members.items()  # type: ignore[attr-defined]
            },
            'additionalProperties': False,
        }
        required = list(shape.required_members)  # type: ignore[attr-defined]
        if required:
            schema['required'] = required
        return schema

    if type_name == 'list':
        return {
            'type': 'array',
            'items': shape_to_schema(shape.member, depth + 1, seen),  # type: ignore[attr-defined]
        }

    if type_name == 'map':
        return {
            'type': 'object',
            'additionalProperties': shape_to_schema(
                shape.value,  # type: ignore[attr-defined]
                depth + 1,
                seen,
            ),
        }

    scalar: dict[str, Any] = {'type': SCALAR_TYPES.get(type_name, 'string')}
    if type_name in INTEGRAL_TYPES:
        scalar['multipleOf'] = 1
    return scalar


def field_type(shape: Shape) -> str | dict[str, Any]:
    """Return the declared type of a top-level input field.

    Scalars are declared by their type name, everything else by its type tree.
    """
    if shape.type_name in SCALAR_TYPES:
        return SCALAR_TYPES[shape.type_name]
    return shape_to_schema(shape, depth=1)

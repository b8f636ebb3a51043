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

import dataclasses
from botocore import xform_name
from pydantic import BaseModel, ConfigDict, Field
from typing import Any


REGION_KEY = 'region'
ASSUME_ROLE_ARN_KEY = 'assumeRoleArn'
ROUTING_KEYS = frozenset([REGION_KEY, ASSUME_ROLE_ARN_KEY])


class Credentials(BaseModel):
    """Credentials model.

    See structure in https://sdk.amazonaws.com/java/api/latest/software/amazon/awssdk/auth/credentials/AwsSessionCredentials.html
    """

    model_config = ConfigDict(frozen=True)

    access_key_id: str
    secret_access_key: str
    session_token: str | None = None


class AppConfig(BaseModel):
    """App-level configuration shared by every block invocation."""

    model_config = ConfigDict(frozen=True)

    access_key_id: str
    secret_access_key: str
    session_token: str | None = None

    endpoint: str | None = Field(default=None)
    """Endpoint override applied to every client built within an invocation"""

    @property
    def static_credentials(self) -> Credentials:
        """Return the static app-level credentials."""
        return Credentials(
            access_key_id=self.access_key_id,
            secret_access_key=self.secret_access_key,
            session_token=self.session_token,
        )


class InvocationConfig(BaseModel):
    """The resolved input of a single block invocation."""

    model_config = ConfigDict(frozen=True)

    region: str
    """Region used for the STS client and the target service client"""

    assume_role_arn: str | None = Field(default=None)
    """Optional IAM role to assume before calling the target operation"""

    parameters: dict[str, Any] = Field(default_factory=dict)
    """Operation parameters forwarded as-is to the target operation"""

    @classmethod
    def from_input(cls, input_config: dict[str, Any]) -> 'InvocationConfig':
        """Partition a raw block input into routing fields and operation parameters."""
        parameters = {
            key: value for key, value in input_config.items() if key not in ROUTING_KEYS
        }
        return cls(
            region=input_config[REGION_KEY],
            assume_role_arn=input_config.get(ASSUME_ROLE_ARN_KEY),
            parameters=parameters,
        )


@dataclasses.dataclass(frozen=True)
class FieldDescriptor:
    """A single input field of a block."""

    key: str
    name: str
    type: str | dict[str, Any]
    required: bool = False
    description: str = ''
    integral: bool = False
    """Whether a number field only accepts whole values"""

    @property
    def schema(self) -> dict[str, Any]:
        """Return the JSON schema of the field value."""
        if not isinstance(self.type, str):
            return self.type
        schema: dict[str, Any] = {'type': self.type}
        if self.integral:
            schema['multipleOf'] = 1
        return schema

    def as_config_entry(self) -> dict[str, Any]:
        """Return the field as a block input config entry."""
        return {
            'name': self.name,
            'description': self.description,
            'type': self.type,
            'required': self.required,
        }


REGION_FIELD = FieldDescriptor(
    key=REGION_KEY,
    name='Region',
    type='string',
    required=True,
    description='AWS region for this operation',
)

ASSUME_ROLE_ARN_FIELD = FieldDescriptor(
    key=ASSUME_ROLE_ARN_KEY,
    name='Assume Role ARN',
    type='string',
    required=False,
    description=(
        'Optional IAM role ARN to assume before executing this operation. If provided, '
        'the block will use STS to assume this role and use the temporary credentials.'
    ),
)


@dataclasses.dataclass(frozen=True)
class OperationDescriptor:
    """Static metadata of the AWS operation wrapped by a block."""

    service: str
    operation: str
    category: str
    name: str
    description: str
    fields: tuple[FieldDescriptor, ...]
    output_schema: dict[str, Any]

    @property
    def block_id(self) -> str:
        """Return the catalog identifier of the block."""
        return f'{self.service}.{self.operation}'

    @property
    def operation_python_name(self) -> str:
        """Return the boto3 method name of the operation."""
        return xform_name(self.operation)

    @property
    def required_fields(self) -> list[str]:
        """Return the keys of the required operation fields."""
        return [field.key for field in self.fields if field.required]

    def as_summary(self) -> dict[str, str]:
        """Return a short summary of the block for listings."""
        return {
            'block_id': self.block_id,
            'name': self.name,
            'description': self.description,
            'category': self.category,
        }

    def as_block_definition(self) -> dict[str, Any]:
        """Return the full block definition with its input config and output type."""
        config = {
            field.key: field.as_config_entry()
            for field in (REGION_FIELD, ASSUME_ROLE_ARN_FIELD, *self.fields)
        }
        return {
            'name': self.name,
            'description': self.description,
            'inputs': {'default': {'config': config}},
            'outputs': {
                'default': {
                    'name': f'{self.name} Result',
                    'description': f'Result from {self.operation} operation',
                    'possiblePrimaryParents': ['default'],
                    'type': self.output_schema,
                }
            },
        }

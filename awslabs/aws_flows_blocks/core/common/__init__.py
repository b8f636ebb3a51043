"""Common models, errors and helpers for the AWS Flows blocks catalog."""

from .errors import (
    AwsFlowsBlocksError,
    DuplicateBlockError,
    Failure,
    IncompleteCredentialsError,
    InvalidInputError,
    UnknownBlockError,
)
from .helpers import sanitize_response
from .models import (
    AppConfig,
    Credentials,
    FieldDescriptor,
    InvocationConfig,
    OperationDescriptor,
)

__all__ = [
    'AwsFlowsBlocksError',
    'DuplicateBlockError',
    'Failure',
    'IncompleteCredentialsError',
    'InvalidInputError',
    'UnknownBlockError',
    'sanitize_response',
    'AppConfig',
    'Credentials',
    'FieldDescriptor',
    'InvocationConfig',
    'OperationDescriptor',
]

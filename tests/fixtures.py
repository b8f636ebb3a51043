import botocore.client
import contextlib
import datetime
from awslabs.aws_flows_blocks.core.common.models import (
    AppConfig,
    Credentials,
    FieldDescriptor,
    OperationDescriptor,
)
from botocore.exceptions import ClientError
from botocore.response import StreamingBody
from io import BytesIO
from typing import Any
from unittest.mock import MagicMock, patch


TEST_CREDENTIALS = {'access_key_id': 'test', 'secret_access_key': 'test', 'session_token': 'test'}
TEST_ENDPOINT = 'http://localhost:4566'

TEST_APP_CONFIG = AppConfig(**TEST_CREDENTIALS)
TEST_APP_CONFIG_WITH_ENDPOINT = AppConfig(**TEST_CREDENTIALS, endpoint=TEST_ENDPOINT)
STATIC_CREDENTIALS = Credentials(**TEST_CREDENTIALS)

ROLE_ARN = 'arn:aws:iam::123:role/x'
STREAM_ARN = 'arn:aws:kinesis:eu-west-1:123:stream/s'

ASSUMED_CREDENTIALS = Credentials(
    access_key_id='ASIATEMPORARY',
    secret_access_key='temporary-secret',  # pragma: allowlist secret
    session_token='temporary-token',
)

ASSUME_ROLE_RESPONSE = {
    'Credentials': {
        'AccessKeyId': 'ASIATEMPORARY',
        'SecretAccessKey': 'temporary-secret',  # pragma: allowlist secret
        'SessionToken': 'temporary-token',
        'Expiration': datetime.datetime(2030, 1, 1, tzinfo=datetime.timezone.utc),
    },
    'AssumedRoleUser': {
        'AssumedRoleId': 'AROATEST:flows-session-1',
        'Arn': 'arn:aws:sts::123:assumed-role/x/flows-session-1',
    },
    'ResponseMetadata': {'HTTPStatusCode': 200},
}

KINESIS_DESTINATION_RESPONSE = {
    'TableName': 't',
    'StreamArn': STREAM_ARN,
    'DestinationStatus': 'UPDATING',
    'ResponseMetadata': {'HTTPStatusCode': 200},
}

LIST_FUNCTIONS_RESPONSE = {
    'Functions': [
        {
            'FunctionName': 'foo',
            'Runtime': 'python3.12',
            'MemorySize': 128,
            'LastModified': '2024-01-01T00:00:00.000+0000',
        }
    ],
    'ResponseMetadata': {'HTTPStatusCode': 200},
}

ACCESS_DENIED = ClientError(
    {
        'Error': {'Code': 'AccessDenied', 'Message': 'not authorized to perform sts:AssumeRole'},
        'ResponseMetadata': {'HTTPStatusCode': 403},
    },
    'AssumeRole',
)

FUNCTION_NOT_FOUND = ClientError(
    {
        'Error': {'Code': 'ResourceNotFoundException', 'Message': 'Function not found: foo'},
        'ResponseMetadata': {'HTTPStatusCode': 404},
    },
    'Invoke',
)


def streaming_body(data: bytes) -> StreamingBody:
    """Return a fresh botocore streaming body over the given bytes."""
    return StreamingBody(BytesIO(data), len(data))


def lambda_invoke_response() -> dict[str, Any]:
    """Return a Lambda Invoke response with an unread payload stream."""
    return {
        'StatusCode': 200,
        'ExecutedVersion': '$LATEST',
        'Payload': streaming_body(b'{"ok": true}'),
        'ResponseMetadata': {'HTTPStatusCode': 200},
    }


INVOKE_DESCRIPTOR = OperationDescriptor(
    service='lambda',
    operation='Invoke',
    category='lambda',
    name='Invoke',
    description='Invokes a Lambda function.',
    fields=(
        FieldDescriptor(key='FunctionName', name='Function Name', type='string', required=True),
        FieldDescriptor(key='InvocationType', name='Invocation Type', type='string'),
        FieldDescriptor(key='Payload', name='Payload', type='string'),
    ),
    output_schema={'type': 'object', 'properties': {}, 'additionalProperties': True},
)

KINESIS_DESTINATION_DESCRIPTOR = OperationDescriptor(
    service='dynamodb',
    operation='UpdateKinesisStreamingDestination',
    category='dynamodb',
    name='Update Kinesis Streaming Destination',
    description='The command to update the Kinesis stream destination.',
    fields=(
        FieldDescriptor(key='TableName', name='Table Name', type='string', required=True),
        FieldDescriptor(key='StreamArn', name='Stream Arn', type='string', required=True),
    ),
    output_schema={'type': 'object', 'properties': {}, 'additionalProperties': True},
)

SMALL_CATALOG = {
    'metadata': {'version': 'test'},
    'categories': {
        'lambda': {'service': 'lambda', 'operations': ['Invoke', 'ListFunctions']},
        'dynamodb': {
            'service': 'dynamodb',
            'operations': ['UpdateKinesisStreamingDestination'],
        },
        's3': {'service': 's3', 'operations': ['ListObjectsV2']},
    },
}


class ClientRecorder:
    """Stands in for boto3.client and records every client built and every call made."""

    def __init__(self, responses: dict[tuple[str, str], Any]):
        """Initialize the recorder with responses keyed by (service name, method name)."""
        self._responses = responses
        self.clients: list[tuple[str, dict[str, Any], MagicMock]] = []

    def __call__(self, service_name: str, **kwargs):
        """Build a mock client for the given service."""
        client = MagicMock(name=f'{service_name}-client')
        for (service, method), response in self._responses.items():
            if service != service_name:
                continue
            if isinstance(response, Exception):
                getattr(client, method).side_effect = response
            elif callable(response):
                getattr(client, method).side_effect = lambda *args, _r=response, **kw: _r()
            else:
                getattr(client, method).return_value = response
        self.clients.append((service_name, kwargs, client))
        return client

    def built(self, service_name: str) -> list[tuple[dict[str, Any], MagicMock]]:
        """Return the (kwargs, client) pairs built for a service, in order."""
        return [(kwargs, client) for name, kwargs, client in self.clients if name == service_name]

    @property
    def service_names(self) -> list[str]:
        """Return the service names of the built clients, in order."""
        return [name for name, _, _ in self.clients]


@contextlib.contextmanager
def patch_boto3_clients(responses: dict[tuple[str, str], Any] | None = None):
    """Context manager to replace boto3.client with a recording fake."""
    recorder = ClientRecorder(responses or {})
    with patch('boto3.client', new=recorder):
        yield recorder


@contextlib.contextmanager
def patch_boto3_api_calls(responses: dict[str, Any]):
    """Context manager to patch botocore so real clients never reach the network.

    Yields the list of recorded calls, each a dictionary with the service, operation,
    parameters, region, endpoint and access key of the client that made it.
    """
    calls: list[dict[str, Any]] = []

    def mock_make_api_call(self, operation_name, api_params):
        calls.append(
            {
                'service': self.meta.service_model.service_name,
                'operation': operation_name,
                'params': api_params,
                'region': self.meta.region_name,
                'endpoint': self.meta.endpoint_url,
                'access_key': self._request_signer._credentials.access_key,
            }
        )
        return responses[operation_name]

    with patch.object(botocore.client.BaseClient, '_make_api_call', new=mock_make_api_call):
        yield calls

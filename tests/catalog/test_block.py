import pytest
from awslabs.aws_flows_blocks.core.catalog.block import Block, CollectingEventSink
from awslabs.aws_flows_blocks.core.common.errors import InvalidInputError
from tests.fixtures import (
    ASSUME_ROLE_RESPONSE,
    INVOKE_DESCRIPTOR,
    KINESIS_DESTINATION_DESCRIPTOR,
    KINESIS_DESTINATION_RESPONSE,
    ROLE_ARN,
    STREAM_ARN,
    TEST_APP_CONFIG,
    lambda_invoke_response,
    patch_boto3_clients,
)


def test_block_identity():
    """Test the identifier and input schema of a block."""
    block = Block(INVOKE_DESCRIPTOR)

    assert block.block_id == 'lambda.Invoke'
    assert block.input_schema['required'] == ['region', 'FunctionName']


def test_on_event_emits_result():
    """Test that a valid input is invoked and its result emitted once."""
    block = Block(INVOKE_DESCRIPTOR)
    sink = CollectingEventSink()

    with patch_boto3_clients({('lambda', 'invoke'): lambda_invoke_response}) as recorder:
        result = block.on_event(
            {'region': 'us-east-1', 'assumeRoleArn': '', 'FunctionName': 'foo'},
            TEST_APP_CONFIG,
            sink,
        )

    assert recorder.service_names == ['lambda']
    assert sink.events == [result]
    assert result['Payload'] == '{"ok": true}'


def test_on_event_with_role():
    """Test that routing fields never reach the operation call."""
    block = Block(KINESIS_DESTINATION_DESCRIPTOR)
    sink = CollectingEventSink()
    responses = {
        ('sts', 'assume_role'): ASSUME_ROLE_RESPONSE,
        ('dynamodb', 'update_kinesis_streaming_destination'): KINESIS_DESTINATION_RESPONSE,
    }

    with patch_boto3_clients(responses) as recorder:
        block.on_event(
            {
                'region': 'eu-west-1',
                'assumeRoleArn': ROLE_ARN,
                'TableName': 't',
                'StreamArn': STREAM_ARN,
            },
            TEST_APP_CONFIG,
            sink,
        )

    _, client = recorder.built('dynamodb')[0]
    client.update_kinesis_streaming_destination.assert_called_once_with(
        TableName='t', StreamArn=STREAM_ARN
    )
    assert len(sink.events) == 1


def test_invalid_input_makes_no_call():
    """Test that an invalid input is rejected before any client is built."""
    block = Block(KINESIS_DESTINATION_DESCRIPTOR)
    sink = CollectingEventSink()

    with patch_boto3_clients() as recorder:
        with pytest.raises(InvalidInputError) as exc_info:
            block.on_event(
                {'region': 'eu-west-1', 'assumeRoleArn': ROLE_ARN, 'TableName': 't'},
                TEST_APP_CONFIG,
                sink,
            )

    assert recorder.clients == []
    assert sink.events == []
    failure = exc_info.value.as_failure()
    assert failure.block_id == 'dynamodb.UpdateKinesisStreamingDestination'
    assert failure.details == ["'StreamArn' is a required property"]


def test_on_event_with_null_role():
    """Test that a null role ARN runs with the static credentials."""
    block = Block(INVOKE_DESCRIPTOR)
    sink = CollectingEventSink()

    with patch_boto3_clients({('lambda', 'invoke'): lambda_invoke_response}) as recorder:
        block.on_event(
            {'region': 'us-east-1', 'assumeRoleArn': None, 'FunctionName': 'foo'},
            TEST_APP_CONFIG,
            sink,
        )

    assert recorder.service_names == ['lambda']
    kwargs, client = recorder.built('lambda')[0]
    assert kwargs['aws_access_key_id'] == 'test'
    client.invoke.assert_called_once_with(FunctionName='foo')
    assert len(sink.events) == 1


def test_validate():
    """Test validating an input without running the block."""
    block = Block(INVOKE_DESCRIPTOR)

    block.validate({'region': 'us-east-1', 'FunctionName': 'foo'})
    with pytest.raises(InvalidInputError):
        block.validate({'region': 'us-east-1'})

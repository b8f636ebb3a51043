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

import sys
from .core.aws.credentials import load_app_config
from .core.catalog.block import CollectingEventSink
from .core.catalog.registry import get_block_registry
from .core.common.config import FASTMCP_LOG_LEVEL
from .core.common.errors import AwsFlowsBlocksError
from botocore.exceptions import ClientError, NoCredentialsError
from loguru import logger
from mcp.server import FastMCP
from typing import Any


# Configure Loguru logging
logger.remove()
logger.add(sys.stderr, level=FASTMCP_LOG_LEVEL)

server = FastMCP(name='AWSFlowsBlocks', log_level=FASTMCP_LOG_LEVEL)


@server.tool(
    name='list_blocks',
    description="""List the AWS blocks available in the catalog.

    Each block wraps exactly one AWS API operation. Use this tool to find the identifier
    of the block to run, then 'describe_block' to learn its input fields.

    Tool Args:
        category: Optional catalog category to filter on (for example 'lambda', 's3', 'vpc-core')

    Returns:
        A list of blocks with their identifier, name, description and category
    """,
)
def list_blocks(category: str | None = None) -> dict[str, Any]:
    """List the registered blocks, optionally filtered by category."""
    registry = get_block_registry()
    if category is not None and category not in registry.categories:
        return {
            'error': True,
            'detail': f"Unknown category '{category}'. Known categories: "
            f'{", ".join(registry.categories)}',
        }
    return {'blocks': [descriptor.as_summary() for descriptor in registry.list_blocks(category)]}


@server.tool(
    name='describe_block',
    description="""Describe the input fields and output type of a block.

    Every block accepts 'region' (required) and 'assumeRoleArn' (optional) in addition to
    its operation fields.

    Tool Args:
        block_id: The block identifier, for example 'lambda.ListFunctions'

    Returns:
        The block definition with its input config and output type
    """,
)
def describe_block(block_id: str) -> dict[str, Any]:
    """Return the definition of a block."""
    try:
        block = get_block_registry().get_block(block_id)
    except AwsFlowsBlocksError as e:
        return {'error': True, 'detail': e.as_failure().reason}
    return block.descriptor.as_block_definition()


@server.tool(
    name='run_block',
    description="""Run a block: call its AWS operation once and return the emitted result.

    Key points:
    - 'region' is required in input_config
    - When 'assumeRoleArn' is set, the role is assumed through STS first and the
      temporary credentials are used for the call
    - All other keys of input_config are passed to the AWS operation unchanged and must
      be declared fields of the block

    Tool Args:
        block_id: The block identifier, for example 'lambda.ListFunctions'
        input_config: The block input, for example {"region": "us-east-1", "MaxItems": 10}

    Returns:
        The response of the AWS operation or an error message
    """,
)
def run_block(block_id: str, input_config: dict[str, Any]) -> dict[str, Any]:
    """Run a block with the given input and return its output event."""
    try:
        block = get_block_registry().get_block(block_id)
        block.validate(input_config)
        sink = CollectingEventSink()
        block.on_event(input_config, load_app_config(), sink)
        return {'block_id': block_id, 'output': sink.events[0]}
    except NoCredentialsError:
        return {
            'error': True,
            'detail': 'Error while running the block: No AWS credentials found. '
            "Please configure your AWS credentials using 'aws configure' "
            'or set appropriate environment variables.',
        }
    except ClientError as e:
        return {
            'error': True,
            'detail': f'Error while running the block: {str(e)}',
            'error_code': e.response.get('Error', {}).get('Code'),
            'status_code': e.response.get('ResponseMetadata', {}).get('HTTPStatusCode'),
        }
    except AwsFlowsBlocksError as e:
        return {
            'error': True,
            'detail': f'Error while running the block: {e.as_failure().reason}',
            'failure': e.as_failure().model_dump(exclude_none=True),
        }
    except Exception as e:
        return {'error': True, 'detail': f'Error while running the block: {str(e)}'}


def main():
    """Main entry point for the AWS Flows blocks server."""
    get_block_registry()
    server.run(transport='stdio')

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

import os


def get_env_list(env_key: str) -> list[str] | None:
    """Get a comma-separated list from an environment variable, or None when unset."""
    value = os.getenv(env_key)
    if not value:
        return None
    return [item.strip() for item in value.split(',') if item.strip()]


FASTMCP_LOG_LEVEL = os.getenv('FASTMCP_LOG_LEVEL', 'WARNING')
ENDPOINT_URL = os.getenv('AWS_FLOWS_ENDPOINT_URL') or None
BLOCK_CATEGORIES = get_env_list('AWS_FLOWS_BLOCK_CATEGORIES')

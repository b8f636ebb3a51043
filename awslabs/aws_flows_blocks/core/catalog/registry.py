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

import botocore.session
import importlib.resources
import json
from ..common import config
from ..common.errors import DuplicateBlockError, UnknownBlockError
from ..common.models import OperationDescriptor
from .block import Block
from .descriptors import build_operation_descriptor
from botocore.exceptions import UnknownServiceError
from botocore.model import OperationNotFoundError
from loguru import logger
from typing import Any, Optional


CATALOG_FILE = 'data/catalog.json'


def load_catalog() -> dict[str, Any]:
    """Load the catalog of categories, services and operations shipped with the package."""
    with (
        importlib.resources.files('awslabs.aws_flows_blocks.core')
        .joinpath(CATALOG_FILE)
        .open() as stream
    ):
        return json.load(stream)


class BlockRegistry:
    """Registry of catalog blocks keyed by block identifier (<service>.<Operation>)."""

    def __init__(
        self,
        catalog: dict[str, Any],
        categories: list[str] | None = None,
        session: botocore.session.Session | None = None,
    ):
        """Build every block of the catalog, optionally restricted to some categories."""
        self._blocks: dict[str, Block] = {}
        self._session = session or botocore.session.get_session()
        self._version = catalog.get('metadata', {}).get('version')

        for category, entry in catalog.get('categories', {}).items():
            if categories is not None and category not in categories:
                continue
            self._register_category(category, entry['service'], entry['operations'])

        logger.info('Registered {} blocks from catalog version {}', len(self), self._version)

    @property
    def version(self) -> str | None:
        """Return the version of the catalog the registry was built from."""
        return self._version

    @property
    def categories(self) -> list[str]:
        """Return the sorted categories that have at least one registered block."""
        return sorted({block.descriptor.category for block in self._blocks.values()})

    def register(self, block: Block) -> None:
        """Register a block, refusing duplicate identifiers."""
        if block.block_id in self._blocks:
            raise DuplicateBlockError(block.block_id)
        self._blocks[block.block_id] = block

    def get_block(self, block_id: str) -> Block:
        """Get a block by identifier."""
        if block_id not in self._blocks:
            raise UnknownBlockError(block_id)
        return self._blocks[block_id]

    def list_blocks(self, category: str | None = None) -> list[OperationDescriptor]:
        """List the descriptors of the registered blocks, sorted by identifier."""
        return [
            self._blocks[block_id].descriptor
            for block_id in sorted(self._blocks)
            if category is None or self._blocks[block_id].descriptor.category == category
        ]

    def __contains__(self, block_id: object) -> bool:
        """Return True if a block with the given identifier is registered."""
        return block_id in self._blocks

    def __len__(self) -> int:
        """Return the number of registered blocks."""
        return len(self._blocks)

    def _register_category(self, category: str, service: str, operations: list[str]) -> None:
        try:
            service_model = self._session.get_service_model(service)
        except UnknownServiceError:
            logger.warning(f"Skipping category '{category}': unknown service '{service}'")
            return

        for operation in operations:
            try:
                operation_model = service_model.operation_model(operation)
            except OperationNotFoundError:
                logger.warning(f"Skipping block '{service}.{operation}': unknown operation")
                continue
            self.register(Block(build_operation_descriptor(category, operation_model)))


registry: Optional[BlockRegistry] = None


def get_block_registry() -> BlockRegistry:
    """Get the global registry instance, building it on first use."""
    global registry

    if registry is None:
        registry = BlockRegistry(load_catalog(), categories=config.BLOCK_CATEGORIES)
    return registry

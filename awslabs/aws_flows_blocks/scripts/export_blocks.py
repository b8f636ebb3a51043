#!/usr/bin/env python3
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

import argparse
import json
import sys
from ..core.catalog.registry import BlockRegistry, load_catalog
from ..core.common.models import OperationDescriptor
from loguru import logger
from pathlib import Path


def block_file_name(descriptor: OperationDescriptor) -> str:
    """Return the file name of an exported block, e.g. listObjectsV2.json."""
    operation = descriptor.operation
    return f'{operation[:1].lower()}{operation[1:]}.json'


def export_blocks(output_dir: Path, categories: list[str] | None = None) -> int:
    """Write the definition of every block to <output_dir>/<category>/<operation>.json.

    Returns the number of exported blocks.
    """
    registry = BlockRegistry(load_catalog(), categories=categories)

    count = 0
    for descriptor in registry.list_blocks():
        category_dir = output_dir / descriptor.category
        category_dir.mkdir(parents=True, exist_ok=True)
        with open(category_dir / block_file_name(descriptor), 'w') as fp:
            json.dump(descriptor.as_block_definition(), fp, indent=2)
        count += 1

    logger.info('Exported {} blocks to {}', count, output_dir)
    return count


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and export the block definitions."""
    parser = argparse.ArgumentParser(description='Export the block definitions as JSON files')
    parser.add_argument('--output', '-o', required=True, help='Output directory')
    parser.add_argument(
        '--category',
        '-c',
        action='append',
        dest='categories',
        help='Catalog category to export, can be repeated. Defaults to all categories',
    )
    args = parser.parse_args(argv)

    count = export_blocks(Path(args.output), args.categories)
    print(f'Exported {count} blocks to {args.output}')
    return 0


if __name__ == '__main__':
    # Configure Loguru logging
    logger.remove()
    logger.add(sys.stderr)

    sys.exit(main())

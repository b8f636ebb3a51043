"""Block catalog: descriptors, input validation and the block registry."""

from .block import Block, CollectingEventSink
from .descriptors import build_operation_descriptor
from .registry import BlockRegistry, get_block_registry, load_catalog
from .validation import InputValidator, build_input_schema

__all__ = [
    'Block',
    'CollectingEventSink',
    'build_operation_descriptor',
    'BlockRegistry',
    'get_block_registry',
    'load_catalog',
    'InputValidator',
    'build_input_schema',
]

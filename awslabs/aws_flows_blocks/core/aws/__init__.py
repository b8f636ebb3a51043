"""AWS-specific functionality: credential resolution, client construction and dispatch."""

from .clients import build_client
from .credentials import load_app_config, new_session_name, resolve_credentials
from .driver import EventSink, invoke_operation, run_invocation
from .shapes import field_type, shape_to_schema

__all__ = [
    'build_client',
    'load_app_config',
    'new_session_name',
    'resolve_credentials',
    'EventSink',
    'invoke_operation',
    'run_invocation',
    'field_type',
    'shape_to_schema',
]

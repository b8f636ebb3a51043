import base64
import re
import time
from botocore.response import StreamingBody
from collections.abc import Mapping
from contextlib import contextmanager
from datetime import date, datetime
from decimal import Decimal
from loguru import logger
from lxml import etree, html
from typing import Any


CIRCULAR_REFERENCE = '[Circular]'

_STRIPPED = object()
_WORD_BOUNDARY = re.compile(r'(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])')
_FIRST_SENTENCE = re.compile(r'^(.+?[.!?])(?:\s|$)')


@contextmanager
def operation_timer(service: str, operation: str):
    """Context manager for timing block invocations.

    :param service: The service name.
    :param operation: The operation name.
    """
    start = time.perf_counter()
    logger.info('Starting invoking operation {}.{}', service, operation)
    yield
    end = time.perf_counter()
    elapsed_time = end - start
    logger.info('Operation {}.{} invoked in {} seconds', service, operation, elapsed_time)


def _decode_bytes(data: bytes) -> str:
    try:
        return data.decode('utf-8')
    except UnicodeDecodeError:
        return base64.b64encode(data).decode('ascii')


def _sanitize(value: Any, path: set[int]) -> Any:
    if value is None or isinstance(value, (str, bool, int, float)):
        return value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Decimal):
        if value.is_finite() and value == value.to_integral_value():
            return int(value)
        return float(value)
    if isinstance(value, (bytes, bytearray)):
        return _decode_bytes(bytes(value))
    if isinstance(value, StreamingBody) or callable(getattr(value, 'read', None)):
        return _decode_bytes(value.read())

    if isinstance(value, (Mapping, list, tuple, set, frozenset)):
        if id(value) in path:
            return CIRCULAR_REFERENCE
        path.add(id(value))
        try:
            if isinstance(value, Mapping):
                items = ((key, _sanitize(item, path)) for key, item in value.items())
                return {str(key): item for key, item in items if item is not _STRIPPED}
            items = (_sanitize(item, path) for item in value)
            return [item for item in items if item is not _STRIPPED]
        finally:
            path.discard(id(value))

    logger.debug('Stripping non-serializable value of type {}', type(value).__name__)
    return _STRIPPED


def sanitize_response(response: Any) -> Any:
    """Return a JSON-serializable copy of an SDK response.

    Streams and bytes are materialized, timestamps are converted to ISO-8601 strings,
    circular references are replaced by a marker and any other value that cannot be
    represented as JSON is stripped.
    """
    sanitized = _sanitize(response, set())
    return None if sanitized is _STRIPPED else sanitized


def humanize_name(name: str) -> str:
    """Split an API member or operation name into words, e.g. SSEKMSKeyId -> SSEKMS Key Id."""
    return _WORD_BOUNDARY.sub(' ', name)


def summarize_documentation(documentation: str | None) -> str:
    """Return the first sentence of an HTML documentation string as plain text."""
    if not documentation or not documentation.strip():
        return ''
    try:
        text = html.fromstring(documentation).text_content()
    except etree.ParserError:
        return ''
    text = ' '.join(text.split())
    matched = _FIRST_SENTENCE.match(text)
    return matched.group(1) if matched else text

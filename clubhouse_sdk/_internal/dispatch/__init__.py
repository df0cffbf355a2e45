"""Request dispatch for the Clubhouse API.

WARNING: This is a system-level module used by the resource classes.
Do not call directly from user code.
"""

from clubhouse_sdk._internal.dispatch.client import (
    JSON_HEADERS,
    TEST_MULTIPART_BOUNDARY,
    RequestDispatcher,
)
from clubhouse_sdk._internal.dispatch.redaction import redact_payload, redact_url

__all__ = [
    "JSON_HEADERS",
    "TEST_MULTIPART_BOUNDARY",
    "RequestDispatcher",
    "redact_payload",
    "redact_url",
]

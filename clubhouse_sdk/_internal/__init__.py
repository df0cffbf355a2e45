"""Internal modules for Clubhouse SDK.

WARNING: This package contains system-level modules used by the client.
These are not intended for direct use in application code.

Modules:
    dispatch - Request dispatch, status mapping and redaction
    encoding - JSON encoding of request params
    http - Shared HTTP client configuration
    ratelimit - Blocking rate limiters
"""

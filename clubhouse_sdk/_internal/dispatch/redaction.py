"""Redaction of credentials in URLs and request bodies before they are logged."""

import json
from typing import Any
from urllib.parse import urlencode

import httpx

REDACT_KEYS: frozenset[str] = frozenset({
    "api_key",
    "token",
    "secret",
    "password",
    "access_key",
    "refresh_token",
    "authorization",
    "auth_token",
    "private_key",
    "secret_key",
    "credentials",
})

REDACTED_VALUE = "[REDACTED]"


def redact_url(url: httpx.URL | str) -> str:
    """Replace the values of sensitive query parameters in a URL.

    Args:
        url: The URL to redact.

    Returns:
        The URL as a string, with e.g. ``token=...`` replaced by ``token=[REDACTED]``.
    """
    url = httpx.URL(url)
    if not any(key.lower() in REDACT_KEYS for key in url.params):
        return str(url)
    params = [
        (key, REDACTED_VALUE if key.lower() in REDACT_KEYS else value)
        for key, value in url.params.multi_items()
    ]
    base = str(url).split("?", 1)[0]
    return f"{base}?{urlencode(params, safe='[]')}"


def redact_payload(payload: Any) -> Any:
    """Recursively redact sensitive keys from a JSON-compatible value.

    Creates a deep copy - the original payload is never mutated.

    Args:
        payload: The value to redact sensitive entries from.

    Returns:
        A new value with sensitive values replaced by "[REDACTED]".
    """
    if isinstance(payload, dict):
        result = {}
        for key, value in payload.items():
            key_lower = key.lower() if isinstance(key, str) else key
            if key_lower in REDACT_KEYS:
                result[key] = REDACTED_VALUE
            else:
                result[key] = redact_payload(value)
        return result
    elif isinstance(payload, list):
        return [redact_payload(item) for item in payload]
    else:
        return payload


def redact_body(body: bytes) -> str:
    """Render a request body for logging, redacting it if it is JSON."""
    try:
        data = json.loads(body)
    except (UnicodeDecodeError, ValueError):
        return f"<{len(body)} bytes>"
    return json.dumps(redact_payload(data), separators=(",", ":"))

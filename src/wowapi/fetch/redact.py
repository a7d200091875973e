"""Redaction of credentials in headers and query parameters for logging."""

from collections.abc import Mapping
from typing import Any


# Headers that must never appear in logs
SENSITIVE_HEADERS = frozenset(
    {
        "authorization",
        "cookie",
        "proxy-authorization",
        "set-cookie",
    }
)

# Query or form parameters that must never appear in logs
SENSITIVE_PARAMS = frozenset(
    {
        "apikey",
        "access_token",
        "client_secret",
        "code",
    }
)

REDACTED_VALUE = "[REDACTED]"


def _redact(values: Mapping[str, Any], sensitive: frozenset[str]) -> dict[str, Any]:
    return {
        key: REDACTED_VALUE if key.lower() in sensitive else value
        for key, value in values.items()
    }


def redact_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Replace the values of Authorization and cookie headers.

    Args:
        headers: Original headers.

    Returns:
        New dictionary with sensitive values redacted.
    """
    return _redact(headers, SENSITIVE_HEADERS)


def redact_query(params: Mapping[str, Any]) -> dict[str, Any]:
    """Replace API keys, tokens, secrets and authorization codes.

    Args:
        params: Query or form parameters.

    Returns:
        New dictionary with sensitive values redacted.
    """
    return _redact(params, SENSITIVE_PARAMS)

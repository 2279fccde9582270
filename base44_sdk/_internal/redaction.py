"""Redaction of credentials in debug output."""

from typing import Any

REDACT_KEYS: frozenset[str] = frozenset({
    "authorization",
    "token",
    "access_token",
    "refresh_token",
    "auth_token",
    "api_key",
    "password",
    "secret",
    "secret_key",
    "private_key",
    "credentials",
    "cookie",
})

REDACTED_VALUE = "[REDACTED]"


def redact_payload(payload: Any) -> Any:
    """Recursively redact sensitive keys from headers or a JSON body.

    Creates a new structure - the original payload is never mutated.
    Key matching is case-insensitive so ``Authorization`` headers are caught.

    Args:
        payload: A mapping, list or scalar taken from a request.

    Returns:
        A copy with sensitive values replaced by "[REDACTED]".
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

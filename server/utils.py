"""Helpers that keep provider keys and client credentials out of responses and logs."""

from collections.abc import Mapping

# X-API-Key guards this server; Authorization would carry a provider bearer
# token if a client proxied one through.
SENSITIVE_HEADERS = {"x-api-key", "authorization"}
KEY_HINT_MIN_LENGTH = 8


def api_key_hint(api_key: str) -> str | None:
    """Last four characters of a stored provider key, or None for short keys."""
    if len(api_key) <= KEY_HINT_MIN_LENGTH:
        return None
    return f"...{api_key[-4:]}"


def redact_sensitive_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Copy of ``headers`` with credential-bearing values replaced, for logging."""
    return {
        key: "[REDACTED]" if key.lower() in SENSITIVE_HEADERS and value else value
        for key, value in headers.items()
    }

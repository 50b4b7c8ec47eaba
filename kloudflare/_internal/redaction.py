"""Masking of credential headers before they reach debug output."""

from collections.abc import Mapping

REDACT_HEADERS: frozenset[str] = frozenset({
    "authorization",
    "x-auth-key",
    "x-auth-user-service-key",
    "cookie",
})

REDACTED_VALUE = "[REDACTED]"


def redact_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Return a copy of ``headers`` with credential values replaced.

    Header names are matched case-insensitively. The input is never mutated.
    """
    return {
        name: REDACTED_VALUE if name.lower() in REDACT_HEADERS else value
        for name, value in headers.items()
    }

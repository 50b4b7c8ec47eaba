"""Query-string helpers for building endpoint URLs.

Values are interpolated as-is with ``str()``; callers must pre-encode values
containing reserved characters (``&``, ``=``, ``#``, spaces, ...).
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any


def append_parameter(url: str, name: str, value: Any, *, first: bool = False) -> str:
    """Append ``name=value`` to ``url`` unless ``value`` is None.

    Args:
        url: The URL or path to extend.
        name: Parameter name.
        value: Parameter value. ``None`` leaves the URL unchanged.
        first: Use ``?`` as the separator instead of ``&``.

    Returns:
        The extended URL, or ``url`` unchanged when ``value`` is None.
    """
    if value is None:
        return url
    separator = "?" if first else "&"
    return f"{url}{separator}{name}={_format(value)}"


def append_parameters(url: str, parameters: Mapping[str, Any]) -> str:
    """Append every non-None parameter in insertion order.

    The first emitted parameter gets ``?``, every later one ``&``, no matter
    how many ``None`` values were skipped before it.

    Example:
        >>> append_parameters("/r", {"dimensions": "x", "filters": None, "limit": 5})
        '/r?dimensions=x&limit=5'
    """
    first = True
    for name, value in parameters.items():
        if value is None:
            continue
        url = append_parameter(url, name, value, first=first)
        first = False
    return url


def _format(value: Any) -> str:
    # Enum members render as their wire value, booleans the way the API spells them.
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)

"""Helpers for safe debug logging.

Every Pavlok request carries the account's access token in its query
string. This module masks such values before they reach DEBUG logs.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

_SENSITIVE_KEYS: frozenset[str] = frozenset(
    {
        "access_token",
        "accesstoken",
        "token",
        "authorization",
        "cookie",
    }
)

REDACTED = "<redacted>"


def _is_sensitive(key: object) -> bool:
    return str(key).lower() in _SENSITIVE_KEYS


def redact_for_log(value: Any, *, max_string: int = 512, _depth: int = 0) -> Any:
    """Return a redacted copy of *value* suitable for debug logs.

    Mappings have sensitive keys masked. Sequences of ``(key, value)``
    pairs, the form used for query parameters, are treated the same way.
    """
    if _depth > 20:
        return "<max-depth>"

    if value is None or isinstance(value, (int, float, bool)):
        return value

    if isinstance(value, str):
        if len(value) > max_string:
            return f"{value[:max_string]}…<truncated>"
        return value

    if isinstance(value, (bytes, bytearray)):
        return f"<bytes:{len(value)}b>"

    if isinstance(value, Mapping):
        redacted: dict[str, Any] = {}
        for k, v in value.items():
            if _is_sensitive(k):
                redacted[str(k)] = REDACTED
            else:
                redacted[str(k)] = redact_for_log(v, max_string=max_string, _depth=_depth + 1)
        return redacted

    if isinstance(value, Sequence):
        items: list[Any] = []
        for item in value:
            if isinstance(item, tuple) and len(item) == 2 and isinstance(item[0], str):
                key, inner = item
                if _is_sensitive(key):
                    items.append((key, REDACTED))
                else:
                    items.append((key, redact_for_log(inner, max_string=max_string, _depth=_depth + 1)))
            else:
                items.append(redact_for_log(item, max_string=max_string, _depth=_depth + 1))
        return items

    return repr(value)

"""Helpers for safe debug logging.

Transition payloads can carry the device's network identifiers.  Debug
logs keep only the last segment of an IP or MAC address, which is
enough to tell devices apart on one network.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

# Normalized key -> address segment separator.
_ADDRESS_KEYS: dict[str, str] = {
    "ip": ".",
    "ipaddress": ".",
    "mac": ":",
    "macaddress": ":",
}


def _normalize_key(key: str) -> str:
    return key.replace("_", "").lower()


def mask_address(value: str, separator: str) -> str:
    """``192.168.1.20`` -> ``*.*.*.20``; values without *separator* are fully masked."""
    head, sep, tail = value.rpartition(separator)
    if not sep:
        return "<redacted>"
    return separator.join(["*"] * (head.count(separator) + 1) + [tail])


def redact_for_log(value: Any) -> Any:
    """Return a copy of a transition payload with addresses masked."""
    if isinstance(value, Mapping):
        redacted: dict[str, Any] = {}
        for k, v in value.items():
            key = str(k)
            separator = _ADDRESS_KEYS.get(_normalize_key(key))
            if separator is not None and isinstance(v, str) and v:
                redacted[key] = mask_address(v, separator)
            else:
                redacted[key] = redact_for_log(v)
        return redacted

    if isinstance(value, (list, tuple)):
        return [redact_for_log(v) for v in value]

    return value

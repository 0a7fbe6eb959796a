"""Lenient field access over duck-typed bid objects."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any


def is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def is_container(value: Any) -> bool:
    """True for mappings and non-string sequences."""
    return isinstance(value, Mapping) or is_sequence(value)


def field_value(candidate: Any, key: Any) -> Any:
    """Return ``candidate[key]``, or None when it cannot be resolved.

    Mappings are looked up by key, sequences by integer index and any other
    object by attribute name.
    """
    if candidate is None:
        return None
    if isinstance(candidate, Mapping):
        return candidate.get(key)
    if is_sequence(candidate):
        if isinstance(key, int) and not isinstance(key, bool) and 0 <= key < len(candidate):
            return candidate[key]
        return None
    if isinstance(key, str):
        return getattr(candidate, key, None)
    return None


def path_value(candidate: Any, *keys: Any) -> Any:
    for key in keys:
        candidate = field_value(candidate, key)
        if candidate is None:
            return None
    return candidate

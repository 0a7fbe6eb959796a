"""Checks for values that cannot survive a JSON round trip."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any


def has_non_serializable(value: Any) -> bool:
    """True if ``value`` contains anything JSON cannot represent.

    Callables, compiled patterns, sets, arbitrary objects, non-finite floats,
    non-string mapping keys and self-referencing containers all count.
    """
    return not _serializable(value, frozenset())


def _serializable(value: Any, ancestors: frozenset[int]) -> bool:
    if value is None or isinstance(value, (bool, int, str)):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, (Mapping, list, tuple)):
        if id(value) in ancestors:
            return False
        ancestors = ancestors | {id(value)}
        if isinstance(value, Mapping):
            return all(isinstance(k, str) and _serializable(v, ancestors) for k, v in value.items())
        return all(_serializable(v, ancestors) for v in value)
    return False

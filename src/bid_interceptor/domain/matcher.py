"""Matcher compiler: turns a rule's ``when`` definition into a predicate.

A ``when`` definition is either

- a callable ``(bid, *context) -> bool``, used as-is, or
- a mapping of field name to node, where each node is
    - a compiled ``re.Pattern``: searched in ``str(field)``
    - a callable: called as ``node(field, *context)``, truthiness counts
    - a nested mapping (or sequence): matched recursively against the field
    - anything else: compared with ``==`` (booleans only equal booleans)

Every field of a mapping must match. The node shapes are resolved once, when
the rule is compiled.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Callable

from ..models.rules import Predicate
from ..observability import get_logger, record_definition_error
from .access import field_value, is_container

# (field value, context args) -> bool
_Node = Callable[[Any, tuple], bool]


def never_matches(*args: Any) -> bool:
    return False


def compile_matcher(match_def: Any, rule_no: int, logger: Any = None) -> Predicate:
    """Return a predicate ``(candidate, *context) -> bool`` for ``match_def``.

    Invalid definitions are logged and disable the rule (the predicate is always False).
    """
    if callable(match_def):
        return match_def
    if not is_container(match_def):
        record_definition_error(logger or get_logger(), rule_no, "when")
        return never_matches

    node = _compile_container(match_def)

    def predicate(candidate: Any, *args: Any) -> bool:
        return node(candidate, args)

    return predicate


def _compile_node(node_def: Any) -> _Node:
    if isinstance(node_def, re.Pattern):
        return lambda value, args: node_def.search(_stringify(value)) is not None
    if callable(node_def):
        return lambda value, args: bool(node_def(value, *args))
    if is_container(node_def):
        return _compile_container(node_def)
    return lambda value, args: _equals(value, node_def)


def _compile_container(container_def: Any) -> _Node:
    if isinstance(container_def, Mapping):
        checks = [(key, _compile_node(val)) for key, val in container_def.items()]
    else:
        checks = [(idx, _compile_node(val)) for idx, val in enumerate(container_def)]

    def matches(candidate: Any, args: tuple) -> bool:
        return all(check(field_value(candidate, key), args) for key, check in checks)

    return matches


def _equals(value: Any, expected: Any) -> bool:
    """Equality that keeps booleans apart from numbers (True does not match 1)."""
    if isinstance(value, bool) or isinstance(expected, bool):
        return type(value) is type(expected) and value == expected
    return value == expected


def _stringify(value: Any) -> str:
    return "" if value is None else str(value)

"""Response templates and the structural merge used to apply them."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any, Callable

from .access import is_sequence

# (bid, *context) packed as a tuple -> evaluated value
Template = Callable[[tuple], Any]


def compile_template(template_def: Any) -> Template:
    """Compile a template definition into an evaluator.

    Callables are invoked with ``(bid, *context)``; mappings and sequences are
    rebuilt as dicts and lists with each entry evaluated; everything else is
    returned as a literal.
    """
    if callable(template_def):
        return lambda args: template_def(*args)
    if isinstance(template_def, Mapping):
        fields = [(key, compile_template(val)) for key, val in template_def.items()]
        return lambda args: {key: evaluate(args) for key, evaluate in fields}
    if is_sequence(template_def):
        items = [compile_template(val) for val in template_def]
        return lambda args: [evaluate(args) for evaluate in items]
    return lambda args: template_def


def merge_deep(target: MutableMapping, source: Mapping) -> MutableMapping:
    """Merge ``source`` into ``target`` in place and return ``target``.

    Mapping into mapping merges key by key; any other combination replaces the
    target value. Mappings taken over from ``source`` are copied.
    """
    for key, value in source.items():
        current = target.get(key)
        if isinstance(value, Mapping):
            if isinstance(current, MutableMapping):
                merge_deep(current, value)
            else:
                target[key] = merge_deep({}, value)
        else:
            target[key] = value
    return target

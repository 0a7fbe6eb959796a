"""Rule compilation: matchers, templates, response defaults and PAAPI configs."""

from .matcher import compile_matcher
from .media_types import BANNER, NATIVE, VIDEO
from .paapi import compile_paapi, normalize_paapi_configs
from .replacer import compile_replacer
from .resolvers import DEFAULT_RESOLVERS, ResponseResolver
from .response_defaults import response_defaults
from .serialization import has_non_serializable
from .templates import compile_template, merge_deep

__all__ = [
    "BANNER",
    "NATIVE",
    "VIDEO",
    "DEFAULT_RESOLVERS",
    "ResponseResolver",
    "compile_matcher",
    "compile_paapi",
    "compile_replacer",
    "compile_template",
    "has_non_serializable",
    "merge_deep",
    "normalize_paapi_configs",
    "response_defaults",
]

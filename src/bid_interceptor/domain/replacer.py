"""Replacer compiler: turns a rule's ``then`` definition into a mock response generator."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..config.runtime import InterceptorSettings, get_settings
from ..models.rules import ResponseGenerator
from ..observability import get_logger, record_definition_error
from .access import is_container
from .resolvers import DEFAULT_RESOLVERS, ResponseResolver
from .response_defaults import response_defaults
from .templates import compile_template, merge_deep


def no_response(*args: Any) -> None:
    return None


def _empty_template(args: tuple) -> dict:
    return {}


def compile_replacer(
    repl_def: Any,
    rule_no: int,
    *,
    settings: InterceptorSettings | None = None,
    resolvers: Mapping[str, ResponseResolver] | None = None,
    logger: Any = None,
) -> ResponseGenerator:
    """Return a generator ``(bid, *context) -> response | None``.

    ``None`` means the bid is intercepted without a response. A callable, mapping
    or sequence is evaluated as a template and merged over the response
    defaults. Anything else is logged and treated as an empty template.
    """
    if repl_def is None:
        return no_response

    settings = settings or get_settings()
    resolvers = DEFAULT_RESOLVERS if resolvers is None else resolvers
    logger = logger or get_logger()

    if callable(repl_def) or is_container(repl_def):
        evaluate = compile_template(repl_def)
    else:
        record_definition_error(logger, rule_no, "then")
        evaluate = _empty_template

    def replace(bid: Any, *args: Any) -> dict:
        response = response_defaults(bid, settings)
        try:
            override = evaluate((bid, *args))
        except Exception:
            logger.exception(
                "Bid interceptor rule #%d failed to evaluate its 'then' template; using defaults",
                rule_no,
                extra={"rule_no": rule_no},
            )
            override = None
        if isinstance(override, Mapping):
            merge_deep(response, override)
        elif override is not None:
            logger.warning(
                "Bid interceptor rule #%d: 'then' produced %s instead of a mapping; using defaults",
                rule_no,
                type(override).__name__,
                extra={"rule_no": rule_no},
            )

        media_type = response.get("mediaType")
        resolver = resolvers.get(media_type) if isinstance(media_type, str) else None
        if resolver is not None:
            try:
                resolver(bid, response)
            except Exception:
                logger.exception(
                    "Response resolver for media type %r failed (rule #%d)",
                    response.get("mediaType"),
                    rule_no,
                    extra={"rule_no": rule_no},
                )
        response["isDebug"] = True
        return response

    return replace

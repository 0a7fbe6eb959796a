"""Rule models: author-facing options and compiled rules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field

Predicate = Callable[..., bool]
ResponseGenerator = Callable[..., Optional[dict]]
PaapiGenerator = Callable[..., list]


class RuleOptions(BaseModel):
    """Per-rule options from the ``options`` block of a rule definition."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    delay: float = Field(
        default=0,
        ge=0,
        description="Milliseconds between interception and delivery of the mock response",
    )
    suppress_warnings: bool = Field(
        default=False,
        alias="suppressWarnings",
        description="Do not warn when the rule cannot survive a config round trip",
    )


@dataclass(frozen=True)
class CompiledRule:
    """A rule definition compiled into callables.

    ``no`` is the 1-based position of the definition and is only used for logging.
    ``paapi`` is None when the rule's ``paapi`` definition was invalid.
    """

    no: int
    match: Predicate
    replace: ResponseGenerator
    options: RuleOptions
    paapi: Optional[PaapiGenerator] = None


@dataclass(frozen=True)
class MatchResult:
    """A candidate bid paired with the first rule that matched it."""

    bid: Any
    rule: CompiledRule

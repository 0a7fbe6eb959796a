"""Interceptor data models."""

from .outcome import InterceptOutcome
from .rules import CompiledRule, MatchResult, PaapiGenerator, Predicate, ResponseGenerator, RuleOptions

__all__ = [
    "CompiledRule",
    "InterceptOutcome",
    "MatchResult",
    "PaapiGenerator",
    "Predicate",
    "ResponseGenerator",
    "RuleOptions",
]

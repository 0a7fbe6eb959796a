"""Bid interceptor: rule-based mocking of bid requests for local auction testing."""

from .config import InterceptorSettings, get_settings
from .models import CompiledRule, InterceptOutcome, MatchResult, RuleOptions
from .services import BidderCallbacks, BidInterceptor, CompletionLatch, RuleRegistry, intercept_bidder_call
from .wiring import build_interceptor

__version__ = "0.1.0"
__all__ = [
    "BidInterceptor",
    "BidderCallbacks",
    "CompiledRule",
    "CompletionLatch",
    "InterceptOutcome",
    "InterceptorSettings",
    "MatchResult",
    "RuleOptions",
    "RuleRegistry",
    "build_interceptor",
    "get_settings",
    "intercept_bidder_call",
]

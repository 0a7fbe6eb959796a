"""Application services."""

from .bid_interceptor import BidInterceptor
from .bidder_hook import BidderCallbacks, intercept_bidder_call
from .completion import CompletionLatch
from .rule_registry import RuleRegistry

__all__ = [
    "BidInterceptor",
    "BidderCallbacks",
    "CompletionLatch",
    "RuleRegistry",
    "intercept_bidder_call",
]

"""Wraps an adapter's request path so intercepted bids never reach it."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable, Optional

from ..domain.access import field_value
from ..models.outcome import InterceptOutcome
from .bid_interceptor import BidInterceptor
from .completion import CompletionLatch


@dataclass(frozen=True)
class BidderCallbacks:
    """Callbacks an adapter's request path reports through."""

    on_bid: Callable[[dict, Any], None]
    on_paapi: Callable[[dict], None]
    on_completion: Callable[[], None]
    on_response: Optional[Callable[[dict], None]] = None


CallBids = Callable[[list, dict, BidderCallbacks], None]


def intercept_bidder_call(
    interceptor: BidInterceptor,
    call_bids: CallBids,
    *,
    bids: list[Any],
    bidder_request: dict[str, Any],
    callbacks: BidderCallbacks,
) -> InterceptOutcome:
    """Intercept ``bids`` and pass only the rest on to ``call_bids``.

    ``callbacks.on_completion`` fires once both the mocked deliveries and the
    real request path have completed.
    """
    latch = CompletionLatch(2, callbacks.on_completion)

    def add_paapi_config(config: dict, bid: Any, request: Any) -> None:
        callbacks.on_paapi({"bidId": field_value(bid, "bidId"), **config})

    outcome = interceptor.intercept(
        bids=bids,
        bid_request=bidder_request,
        add_bid=callbacks.on_bid,
        add_paapi_config=add_paapi_config,
        done=latch.count_down,
    )
    if not outcome.bids:
        # nothing left for the network; still report a response so the bidder counts as timely
        if callbacks.on_response is not None:
            callbacks.on_response({})
        latch.count_down()
    else:
        call_bids(outcome.bids, outcome.bid_request, replace(callbacks, on_completion=latch.count_down))
    return outcome

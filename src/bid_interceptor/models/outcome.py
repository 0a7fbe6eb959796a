"""Synchronous result of an interception pass."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class InterceptOutcome:
    """Bids left for the real network path.

    ``bid_request`` is ``bidRequest`` as the caller should continue to use it;
    when something was intercepted it is a deep copy whose ``bids`` is ``bids``.
    """

    bids: list[Any]
    bid_request: dict[str, Any]

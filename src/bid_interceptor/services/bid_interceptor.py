"""BidInterceptor: diverts matching bids to mock responses.

``intercept`` matches a batch of bids against the active rules, synthesizes
responses for the matches right away, and delivers them through the scheduler
after each rule's delay. Bids that no rule matched are handed back for the
real request path.
"""

from __future__ import annotations

import copy
from functools import partial
from typing import Any, Callable, Iterable

from ..config.runtime import InterceptorSettings, get_settings
from ..domain.access import field_value
from ..models.outcome import InterceptOutcome
from ..models.rules import CompiledRule, MatchResult
from ..observability import get_logger, record_interception
from ..ports.scheduler import Scheduler, default_scheduler
from .completion import CompletionLatch
from .rule_registry import RuleRegistry

AddBid = Callable[[dict, Any], None]
AddPaapiConfig = Callable[[Any, Any, Any], None]


class BidInterceptor:
    """Matching engine and interception orchestrator over a RuleRegistry."""

    def __init__(
        self,
        registry: RuleRegistry | None = None,
        scheduler: Scheduler | None = None,
        settings: InterceptorSettings | None = None,
        logger: Any = None,
    ) -> None:
        settings = settings or get_settings()
        self._logger = logger or get_logger(settings.logger_name)
        self._registry = registry or RuleRegistry(settings=settings, logger=self._logger)
        self._scheduler = scheduler or default_scheduler()

    @property
    def registry(self) -> RuleRegistry:
        return self._registry

    @property
    def rules(self) -> tuple[CompiledRule, ...]:
        return self._registry.rules

    def update_config(self, config: Any) -> None:
        self._registry.update_config(config)

    def serialize_config(self, rule_defs: Iterable[Any]) -> list[Any]:
        return self._registry.serialize_config(rule_defs)

    # --- matching ---

    def match(self, candidate: Any, *args: Any) -> CompiledRule | None:
        """Return the first rule matching ``candidate``, or None."""
        return self._first_match(self._registry.rules, candidate, args)

    def match_all(self, bids: Iterable[Any], *args: Any) -> tuple[list[MatchResult], list[Any]]:
        """Split ``bids`` into (matches, remainder), keeping input order in both."""
        rules = self._registry.rules
        matches: list[MatchResult] = []
        remainder: list[Any] = []
        for bid in bids:
            rule = self._first_match(rules, bid, args)
            if rule is not None:
                matches.append(MatchResult(bid=bid, rule=rule))
            else:
                remainder.append(bid)
        return matches, remainder

    def _first_match(self, rules: tuple[CompiledRule, ...], candidate: Any, args: tuple) -> CompiledRule | None:
        for rule in rules:
            try:
                matched = rule.match(candidate, *args)
            except Exception:
                self._logger.exception(
                    "Bid interceptor rule #%d raised while matching; treating as no match",
                    rule.no,
                    extra={"rule_no": rule.no},
                )
                continue
            if matched:
                return rule
        return None

    # --- interception ---

    def intercept(
        self,
        *,
        bid_request: dict[str, Any],
        add_bid: AddBid,
        add_paapi_config: AddPaapiConfig,
        done: Callable[[], None],
        bids: list[Any] | None = None,
    ) -> InterceptOutcome:
        """Intercept the bids that match a rule and schedule their mock responses.

        Args:
            bid_request: umbrella bidder request; its ``bids`` are used when ``bids`` is None
            add_bid: called as ``add_bid(response, bid)`` for each non-null mock response
            add_paapi_config: called as ``add_paapi_config(config, bid, bid_request)`` per PAAPI config
            done: called once, after every scheduled delivery has run
            bids: the candidate bids

        Returns:
            InterceptOutcome with the bids no rule matched. When something was
            intercepted, ``bid_request`` is a deep copy whose ``bids`` are those.
        """
        if bids is None:
            bids = bid_request.get("bids") or []
        matches, remainder = self.match_all(bids, bid_request)

        if not matches:
            self._scheduler.call_later(0, done)
            return InterceptOutcome(bids=bids, bid_request=bid_request)

        mocks = [(match, *self._synthesize(match, bid_request)) for match in matches]
        latch = CompletionLatch(len(mocks), done)
        for match, response, paapi_configs in mocks:
            rule = match.rule
            delay = rule.options.delay
            record_interception(rule.no)
            self._logger.info(
                "Intercepted bid request (matching rule #%d), mocking response in %sms",
                rule.no,
                delay,
                extra={
                    "rule_no": rule.no,
                    "delay_ms": delay,
                    "bid_id": field_value(match.bid, "bidId"),
                    "has_response": response is not None,
                    "paapi_count": len(paapi_configs),
                },
            )
            self._scheduler.call_later(
                delay,
                partial(
                    self._deliver,
                    rule.no,
                    match.bid,
                    response,
                    paapi_configs,
                    bid_request,
                    add_bid,
                    add_paapi_config,
                    latch,
                ),
            )

        residual = copy.deepcopy({key: val for key, val in bid_request.items() if key != "bids"})
        residual["bids"] = remainder
        return InterceptOutcome(bids=remainder, bid_request=residual)

    def _synthesize(self, match: MatchResult, bid_request: dict[str, Any]) -> tuple[dict | None, list[Any]]:
        """Build the mock response and PAAPI configs for one match; failures yield no output."""
        rule = match.rule
        try:
            response = rule.replace(match.bid, bid_request)
            paapi_configs = rule.paapi(match.bid, bid_request) if rule.paapi is not None else []
        except Exception:
            self._logger.exception(
                "Bid interceptor rule #%d failed to synthesize a mock response; delivering nothing",
                rule.no,
                extra={"rule_no": rule.no, "bid_id": field_value(match.bid, "bidId")},
            )
            return None, []
        return response, list(paapi_configs)

    def _deliver(
        self,
        rule_no: int,
        bid: Any,
        response: dict | None,
        paapi_configs: list[Any],
        bid_request: dict[str, Any],
        add_bid: AddBid,
        add_paapi_config: AddPaapiConfig,
        latch: CompletionLatch,
    ) -> None:
        try:
            if response is not None:
                add_bid(response, bid)
            for config in paapi_configs:
                add_paapi_config(config, bid, bid_request)
        except Exception:
            self._logger.exception(
                "Delivering the mock response for rule #%d failed",
                rule_no,
                extra={"rule_no": rule_no, "bid_id": field_value(bid, "bidId")},
            )
        finally:
            latch.count_down()

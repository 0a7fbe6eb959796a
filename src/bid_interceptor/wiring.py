"""Composition root: builds a fully wired BidInterceptor."""

from __future__ import annotations

from typing import Any, Mapping

from .config.runtime import InterceptorSettings, get_settings
from .domain.resolvers import DEFAULT_RESOLVERS, ResponseResolver
from .observability import get_logger
from .ports.scheduler import Scheduler, default_scheduler
from .services.bid_interceptor import BidInterceptor
from .services.rule_registry import RuleRegistry


def build_interceptor(
    settings: InterceptorSettings | None = None,
    scheduler: Scheduler | None = None,
    resolvers: Mapping[str, ResponseResolver] | None = None,
    logger: Any = None,
) -> BidInterceptor:
    """Construct a BidInterceptor with its registry, scheduler and logger."""
    settings = settings or get_settings()
    logger = logger or get_logger(settings.logger_name)
    registry = RuleRegistry(
        settings=settings,
        resolvers=DEFAULT_RESOLVERS if resolvers is None else resolvers,
        logger=logger,
    )
    return BidInterceptor(
        registry=registry,
        scheduler=scheduler or default_scheduler(),
        settings=settings,
        logger=logger,
    )

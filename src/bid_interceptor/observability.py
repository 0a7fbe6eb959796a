"""Observability: package logger plus an in-process counters stub."""

from __future__ import annotations

import logging
from typing import Any

_LOGGER = logging.getLogger("bid_interceptor")

# Counters stub: intercepted[rule_no] = count, definition_errors[rule_no] = count
METRICS: dict[str, dict[int, int]] = {"intercepted": {}, "definition_errors": {}}


def get_logger(name: str | None = None) -> logging.Logger:
    if name is None or name == _LOGGER.name:
        return _LOGGER
    return logging.getLogger(name)


def record_definition_error(
    logger: Any,
    rule_no: int,
    section: str,
    detail: str | None = None,
) -> None:
    """Log an invalid ``when``/``then``/``paapi``/``options`` block and count it."""
    logger.error(
        "Invalid '%s' definition for bid interceptor (in rule #%d)%s",
        section,
        rule_no,
        f": {detail}" if detail else "",
        extra={"rule_no": rule_no, "section": section},
    )
    METRICS["definition_errors"][rule_no] = METRICS["definition_errors"].get(rule_no, 0) + 1


def record_interception(rule_no: int) -> None:
    METRICS["intercepted"][rule_no] = METRICS["intercepted"].get(rule_no, 0) + 1


def metrics_snapshot() -> dict[str, dict[int, int]]:
    """Return current counters."""
    return {k: dict(v) for k, v in METRICS.items()}


def reset_metrics() -> None:
    for counters in METRICS.values():
        counters.clear()

"""Auxiliary auction (PAAPI) config generators."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from ..models.rules import PaapiGenerator
from ..observability import get_logger, record_definition_error
from .access import is_sequence

_CONFIG_KEYS = frozenset({"config", "igb"})


def normalize_paapi_configs(configs: Iterable[Any] | None) -> list[Any]:
    """Wrap bare auction configs as ``{"config": cfg}``.

    Entries whose keys are all among ``config``/``igb`` are kept as they are.
    """
    if configs is None:
        return []
    return [
        cfg if isinstance(cfg, Mapping) and set(cfg) <= _CONFIG_KEYS else {"config": cfg}
        for cfg in configs
    ]


def compile_paapi(paapi_def: Any, rule_no: int, logger: Any = None) -> PaapiGenerator | None:
    """Return a generator ``(bid, *context) -> list`` for ``paapi_def``.

    Returns None (after logging) when the definition is neither a sequence nor a callable.
    """
    logger = logger or get_logger()
    if paapi_def is None:
        paapi_def = []

    if is_sequence(paapi_def):
        configs = normalize_paapi_configs(paapi_def)
        return lambda *args: list(configs)

    if callable(paapi_def):
        def generate(*args: Any) -> list[Any]:
            try:
                raw = paapi_def(*args)
                if isinstance(raw, Mapping):
                    raw = [raw]
                elif raw is not None and not is_sequence(raw):
                    logger.error(
                        "Bid interceptor rule #%d: 'paapi' produced %s instead of a list; ignoring it",
                        rule_no,
                        type(raw).__name__,
                        extra={"rule_no": rule_no},
                    )
                    return []
                return normalize_paapi_configs(raw)
            except Exception:
                logger.exception(
                    "Bid interceptor rule #%d failed to generate PAAPI configs",
                    rule_no,
                    extra={"rule_no": rule_no},
                )
                return []

        return generate

    record_definition_error(logger, rule_no, "paapi")
    return None

"""RuleRegistry: compiles rule definitions and holds the active rule set.

The active rules are an immutable tuple that ``update_config`` swaps in a
single assignment; readers that already fetched ``rules`` keep their snapshot.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable

from pydantic import ValidationError

from ..config.runtime import InterceptorSettings, get_settings
from ..domain.matcher import compile_matcher
from ..domain.paapi import compile_paapi
from ..domain.replacer import compile_replacer
from ..domain.resolvers import DEFAULT_RESOLVERS, ResponseResolver
from ..domain.serialization import has_non_serializable
from ..models.rules import CompiledRule, RuleOptions
from ..observability import get_logger, record_definition_error


class RuleRegistry:
    """Owns the compiled rules; never mutates the definitions it is given."""

    def __init__(
        self,
        settings: InterceptorSettings | None = None,
        resolvers: Mapping[str, ResponseResolver] | None = None,
        logger: Any = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._resolvers = DEFAULT_RESOLVERS if resolvers is None else resolvers
        self._logger = logger or get_logger(self._settings.logger_name)
        self._rules: tuple[CompiledRule, ...] = ()

    @property
    def rules(self) -> tuple[CompiledRule, ...]:
        return self._rules

    def update_config(self, config: Any) -> None:
        """Replace all rules with ones compiled from ``config``.

        ``config`` is a list of rule definitions, or a debugging config mapping
        ``{"enabled": ..., "intercept": [...]}``. None clears the rules.
        """
        rule_defs = _rule_definitions(config)
        self._rules = tuple(self.compile_rule(rule_def, no) for no, rule_def in enumerate(rule_defs, start=1))
        self._logger.info(
            "Bid interceptor rules updated (%d rules)",
            len(self._rules),
            extra={"rule_count": len(self._rules)},
        )

    def compile_rule(self, rule_def: Any, rule_no: int) -> CompiledRule:
        if not isinstance(rule_def, Mapping):
            rule_def = {}
        then = rule_def["then"] if "then" in rule_def else {}
        return CompiledRule(
            no=rule_no,
            match=compile_matcher(rule_def.get("when"), rule_no, self._logger),
            replace=compile_replacer(
                then,
                rule_no,
                settings=self._settings,
                resolvers=self._resolvers,
                logger=self._logger,
            ),
            options=self._options(rule_def.get("options"), rule_no),
            paapi=compile_paapi(rule_def.get("paapi"), rule_no, self._logger),
        )

    def serialize_config(self, rule_defs: Iterable[Any]) -> list[Any]:
        """Return the rule definitions that can be persisted as JSON.

        Each dropped definition is warned about unless its options set
        ``suppressWarnings``. The active rules are not affected.
        """
        serializable = []
        for no, rule_def in enumerate(rule_defs, start=1):
            if not has_non_serializable(rule_def):
                serializable.append(rule_def)
            elif not _warnings_suppressed(rule_def):
                self._logger.warning(
                    "Bid interceptor rule definition #%d contains non-serializable properties "
                    "and will be lost after a refresh. Rule definition: %r",
                    no,
                    rule_def,
                    extra={"rule_no": no},
                )
        return serializable

    def _options(self, raw: Any, rule_no: int) -> RuleOptions:
        defaults = {"delay": self._settings.default_delay_ms}
        if raw is None:
            return RuleOptions.model_validate(defaults)
        if not isinstance(raw, Mapping):
            record_definition_error(self._logger, rule_no, "options", "expected a mapping")
            return RuleOptions.model_validate(defaults)
        try:
            return RuleOptions.model_validate({**defaults, **raw})
        except ValidationError as e:
            record_definition_error(self._logger, rule_no, "options", str(e))
            return RuleOptions.model_validate(defaults)


def _rule_definitions(config: Any) -> list[Any]:
    if config is None:
        return []
    if isinstance(config, Mapping):
        if config.get("enabled", True) is False:
            return []
        return list(config.get("intercept") or [])
    return list(config)


def _warnings_suppressed(rule_def: Any) -> bool:
    options = rule_def.get("options") if isinstance(rule_def, Mapping) else None
    if not isinstance(options, Mapping):
        return False
    return bool(options.get("suppressWarnings", options.get("suppress_warnings", False)))

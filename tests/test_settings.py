"""InterceptorSettings tests."""

import pytest
from pydantic import ValidationError

from bid_interceptor.config.runtime import InterceptorSettings
from bid_interceptor.models.rules import RuleOptions


def test_defaults():
    settings = InterceptorSettings()
    assert settings.default_delay_ms == 0
    assert settings.mock_cpm == 3.5764
    assert settings.mock_currency == "EUR"
    assert settings.mock_ttl == 360
    assert settings.banner_fallback_size == (300, 250)
    assert settings.video_fallback_size == (600, 500)


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("BID_INTERCEPTOR_MOCK_CURRENCY", "USD")
    monkeypatch.setenv("BID_INTERCEPTOR_DEFAULT_DELAY_MS", "40")
    monkeypatch.setenv("BID_INTERCEPTOR_BANNER_FALLBACK_SIZE", "[320, 50]")
    settings = InterceptorSettings()
    assert settings.mock_currency == "USD"
    assert settings.default_delay_ms == 40
    assert settings.banner_fallback_size == (320, 50)


def test_invalid_values_fail_fast():
    with pytest.raises(ValidationError):
        InterceptorSettings(default_delay_ms=-1)
    with pytest.raises(ValidationError):
        InterceptorSettings(video_fallback_size=(0, 480))


def test_rule_options_defaults_and_alias():
    assert RuleOptions().delay == 0
    assert RuleOptions().suppress_warnings is False
    assert RuleOptions.model_validate({"suppressWarnings": True}).suppress_warnings is True
    with pytest.raises(ValidationError):
        RuleOptions(delay=-10)

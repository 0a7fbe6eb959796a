"""Pydantic-based runtime settings for the bid interceptor.

Loads from environment variables (prefix ``BID_INTERCEPTOR_``, optional .env file).
Invalid values fail fast when the settings are constructed.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class InterceptorSettings(BaseSettings):
    """All configuration for the interceptor, validated at startup."""

    model_config = {
        "env_prefix": "BID_INTERCEPTOR_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    # --- Rule defaults ---
    default_delay_ms: float = Field(
        default=0,
        ge=0,
        description="Delivery delay used when a rule does not set options.delay",
    )

    # --- Mock response baseline ---
    mock_cpm: float = Field(default=3.5764, ge=0, description="Baseline price of synthetic responses")
    mock_currency: str = Field(default="EUR", min_length=3, max_length=3, description="Baseline currency code")
    mock_ttl: int = Field(default=360, gt=0, description="Baseline time-to-live (seconds)")
    mock_creative_id: str = Field(default="mock-creative-id", description="Baseline creative identifier")
    banner_fallback_size: tuple[int, int] = Field(
        default=(300, 250),
        description="Banner size used when a bid declares none",
    )
    video_fallback_size: tuple[int, int] = Field(
        default=(600, 500),
        description="Video player size used when a bid declares none",
    )

    # --- Logging ---
    logger_name: str = Field(default="bid_interceptor", description="Logger used when none is injected")

    @field_validator("banner_fallback_size", "video_fallback_size")
    @classmethod
    def _positive_size(cls, v: tuple[int, int]) -> tuple[int, int]:
        if any(d <= 0 for d in v):
            raise ValueError(f"fallback sizes must be positive, got {v}")
        return v


@lru_cache(maxsize=1)
def get_settings() -> InterceptorSettings:
    """Return the singleton InterceptorSettings (cached after first call)."""
    return InterceptorSettings()

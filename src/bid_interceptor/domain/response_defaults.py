"""Baseline fields for mock bid responses."""

from __future__ import annotations

from collections.abc import Mapping
from numbers import Number
from typing import Any

from ..config.runtime import InterceptorSettings, get_settings
from .access import field_value, is_sequence, path_value
from .media_types import BANNER, VIDEO


def response_defaults(bid: Any, settings: InterceptorSettings | None = None) -> dict[str, Any]:
    """Build a structurally valid mock response for ``bid``.

    The media type is the bid's ``mediaType``, or the first declared entry of
    ``mediaTypes``, or banner. Width and height come from the first declared
    banner size / video player size, falling back to the configured sizes.
    """
    settings = settings or get_settings()
    response: dict[str, Any] = {
        "requestId": field_value(bid, "bidId"),
        "cpm": settings.mock_cpm,
        "currency": settings.mock_currency,
        "ttl": settings.mock_ttl,
        "creativeId": settings.mock_creative_id,
        "netRevenue": False,
        "meta": {},
    }

    media_type = field_value(bid, "mediaType")
    if not media_type:
        declared = field_value(bid, "mediaTypes")
        media_type = next(iter(declared), BANNER) if isinstance(declared, Mapping) else BANNER
    response["mediaType"] = media_type

    size = None
    if media_type == BANNER:
        size = _first_size(path_value(bid, "mediaTypes", BANNER, "sizes")) or settings.banner_fallback_size
    elif media_type == VIDEO:
        size = _first_size(path_value(bid, "mediaTypes", VIDEO, "playerSize")) or settings.video_fallback_size
    if size is not None:
        response["width"], response["height"] = size
    return response


def _is_size(value: Any) -> bool:
    return (
        is_sequence(value)
        and len(value) == 2
        and all(isinstance(d, Number) and not isinstance(d, bool) for d in value)
    )


def _first_size(sizes: Any) -> tuple | None:
    """First ``[w, h]`` of a size list; a bare ``[w, h]`` counts as a one-entry list."""
    if _is_size(sizes):
        return tuple(sizes)
    if is_sequence(sizes) and sizes and _is_size(sizes[0]):
        return tuple(sizes[0])
    return None

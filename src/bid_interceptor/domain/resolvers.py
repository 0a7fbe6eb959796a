"""Media-type specific finishing of mock responses.

Each resolver receives ``(bid, response)`` and fills in the creative payload
for its media type unless the rule already provided one.
"""

from __future__ import annotations

import html
from typing import Any, Callable, Mapping

from .media_types import BANNER, NATIVE, VIDEO

ResponseResolver = Callable[[Any, dict], None]

MOCK_IMAGE_URL = "https://via.placeholder.com/{width}x{height}.png?text=mock"
MOCK_VIDEO_URL = "https://example.com/mock/video.mp4"
MOCK_CLICK_URL = "https://example.com/mock/click"

_BANNER_MARKUP = (
    "<html><body style=\"margin: 0\">"
    "<div style=\"{style} display: flex; align-items: center; justify-content: center; "
    "background: #e0e0e0; font-family: sans-serif; color: #555\">{label}</div>"
    "</body></html>"
)

_VAST_XML = (
    "<VAST version=\"3.0\">"
    "<Ad id=\"{ad_id}\"><InLine>"
    "<AdSystem>bid-interceptor</AdSystem>"
    "<AdTitle>{title}</AdTitle>"
    "<Impression></Impression>"
    "<Creatives><Creative><Linear>"
    "<Duration>00:00:15</Duration>"
    "<MediaFiles>"
    "<MediaFile delivery=\"progressive\" type=\"video/mp4\" width=\"{width}\" height=\"{height}\">"
    "<![CDATA[{media_url}]]>"
    "</MediaFile>"
    "</MediaFiles>"
    "</Linear></Creative></Creatives>"
    "</InLine></Ad>"
    "</VAST>"
)


def _label(response: dict) -> str:
    return html.escape(f"Mock {response.get('mediaType', 'ad')} {response.get('cpm')} {response.get('currency')}")


def resolve_banner(bid: Any, response: dict) -> None:
    if "ad" in response or "adUrl" in response:
        return
    width, height = response.get("width"), response.get("height")
    if width and height:
        style = f"width: {width}px; height: {height}px;"
    else:
        style = "width: 100%; height: 100%;"
    response["ad"] = _BANNER_MARKUP.format(style=style, label=_label(response))


def resolve_video(bid: Any, response: dict) -> None:
    if "vastXml" in response or "vastUrl" in response:
        return
    response["vastXml"] = _VAST_XML.format(
        ad_id=html.escape(str(response.get("requestId"))),
        title=_label(response),
        width=response.get("width", 0),
        height=response.get("height", 0),
        media_url=MOCK_VIDEO_URL,
    )


def resolve_native(bid: Any, response: dict) -> None:
    if "native" in response:
        return
    response["native"] = {
        "title": "Mock native ad",
        "body": "This response was synthesized by the bid interceptor.",
        "sponsoredBy": "bid-interceptor",
        "cta": "Learn more",
        "clickUrl": MOCK_CLICK_URL,
        "image": {
            "url": MOCK_IMAGE_URL.format(width=1200, height=627),
            "width": 1200,
            "height": 627,
        },
        "icon": {
            "url": MOCK_IMAGE_URL.format(width=50, height=50),
            "width": 50,
            "height": 50,
        },
    }


DEFAULT_RESOLVERS: Mapping[str, ResponseResolver] = {
    BANNER: resolve_banner,
    VIDEO: resolve_video,
    NATIVE: resolve_native,
}

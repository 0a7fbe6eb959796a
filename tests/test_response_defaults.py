"""Response defaulting tests."""

from bid_interceptor.config.runtime import InterceptorSettings
from bid_interceptor.domain.response_defaults import response_defaults


def _bid(**fields):
    return {"bidId": "bid-1", **fields}


def test_baseline_fields():
    response = response_defaults(_bid(mediaTypes={"banner": {"sizes": [[728, 90]]}}))
    assert response == {
        "requestId": "bid-1",
        "cpm": 3.5764,
        "currency": "EUR",
        "ttl": 360,
        "creativeId": "mock-creative-id",
        "netRevenue": False,
        "meta": {},
        "mediaType": "banner",
        "width": 728,
        "height": 90,
    }


def test_no_media_types_defaults_to_banner_fallback_size():
    response = response_defaults(_bid())
    assert response["mediaType"] == "banner"
    assert (response["width"], response["height"]) == (300, 250)


def test_media_type_inferred_from_first_declared_type():
    response = response_defaults(_bid(mediaTypes={"video": {"playerSize": [[640, 480]]}, "banner": {}}))
    assert response["mediaType"] == "video"
    assert (response["width"], response["height"]) == (640, 480)


def test_flat_player_size_is_accepted():
    response = response_defaults(_bid(mediaTypes={"video": {"playerSize": [640, 360]}}))
    assert (response["width"], response["height"]) == (640, 360)


def test_video_without_player_size_uses_video_fallback():
    response = response_defaults(_bid(mediaTypes={"video": {"context": "outstream"}}))
    assert (response["width"], response["height"]) == (600, 500)


def test_native_has_no_dimensions():
    response = response_defaults(_bid(mediaTypes={"native": {"title": {"required": True}}}))
    assert response["mediaType"] == "native"
    assert "width" not in response
    assert "height" not in response


def test_explicit_media_type_wins_over_declared_types():
    bid = _bid(mediaType="video", mediaTypes={"banner": {"sizes": [[300, 600]]}, "video": {"playerSize": [[400, 300]]}})
    response = response_defaults(bid)
    assert response["mediaType"] == "video"
    assert (response["width"], response["height"]) == (400, 300)


def test_each_call_returns_independent_meta():
    first = response_defaults(_bid())
    second = response_defaults(_bid())
    first["meta"]["brandId"] = 1
    assert second["meta"] == {}


def test_settings_override_baseline():
    settings = InterceptorSettings(mock_cpm=1.0, mock_currency="USD", banner_fallback_size=(320, 50))
    response = response_defaults(_bid(), settings)
    assert response["cpm"] == 1.0
    assert response["currency"] == "USD"
    assert (response["width"], response["height"]) == (320, 50)


def test_media_types_list_falls_back_to_banner():
    response = response_defaults(_bid(mediaTypes=[{"banner": {}}]))
    assert response["mediaType"] == "banner"
    assert (response["width"], response["height"]) == (300, 250)

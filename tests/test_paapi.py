"""PAAPI config generator tests."""

import logging

import pytest

from bid_interceptor.domain.paapi import compile_paapi, normalize_paapi_configs

BID = {"bidId": "bid-1"}
REQUEST = {"auctionId": "auction-1"}


def test_bare_config_is_wrapped():
    assert normalize_paapi_configs([{"seller": "x"}]) == [{"config": {"seller": "x"}}]


def test_shaped_config_passes_through():
    shaped = {"config": {"seller": "x"}, "igb": [{"origin": "https://buyer.example"}]}
    assert normalize_paapi_configs([shaped])[0] is shaped


def test_mixed_keys_are_wrapped():
    mixed = {"config": {"seller": "x"}, "seller": "y"}
    assert normalize_paapi_configs([mixed]) == [{"config": mixed}]


def test_sequence_definition_ignores_arguments():
    generate = compile_paapi([{"seller": "x"}, {"config": {"seller": "y"}}], 1)
    expected = [{"config": {"seller": "x"}}, {"config": {"seller": "y"}}]
    assert generate(BID, REQUEST) == expected
    assert generate() == expected


def test_missing_definition_yields_empty_list():
    assert compile_paapi(None, 1)(BID, REQUEST) == []


def test_callable_definition_is_called_with_arguments():
    def paapi(bid, request):
        return [{"seller": bid["bidId"], "auctionId": request["auctionId"]}]

    assert compile_paapi(paapi, 1)(BID, REQUEST) == [
        {"config": {"seller": "bid-1", "auctionId": "auction-1"}}
    ]


def test_callable_returning_none_yields_empty_list():
    assert compile_paapi(lambda *args: None, 1)(BID, REQUEST) == []


def test_raising_callable_yields_empty_list(caplog):
    def paapi(bid, request):
        raise ValueError("bad config")

    with caplog.at_level(logging.ERROR, logger="bid_interceptor"):
        assert compile_paapi(paapi, 6)(BID, REQUEST) == []
    assert "rule #6" in caplog.text


def test_invalid_definition_has_no_generator(caplog):
    with caplog.at_level(logging.ERROR, logger="bid_interceptor"):
        assert compile_paapi("seller", 2) is None
    assert "Invalid 'paapi' definition" in caplog.text


def test_callable_returning_a_single_mapping_yields_one_config():
    generate = compile_paapi(lambda *args: {"seller": "x", "decisionLogicURL": "https://x/logic.js"}, 1)
    assert generate(BID, REQUEST) == [{"config": {"seller": "x", "decisionLogicURL": "https://x/logic.js"}}]


def test_callable_returning_a_shaped_mapping_passes_it_through():
    shaped = {"config": {"seller": "x"}}
    assert compile_paapi(lambda *args: shaped, 1)(BID, REQUEST) == [shaped]


@pytest.mark.parametrize("raw", [5, "seller", 3.5, object()])
def test_callable_returning_a_non_list_yields_empty_list(raw, caplog):
    with caplog.at_level(logging.ERROR, logger="bid_interceptor"):
        assert compile_paapi(lambda *args: raw, 8)(BID, REQUEST) == []
    assert "rule #8" in caplog.text

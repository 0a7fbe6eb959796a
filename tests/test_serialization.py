"""Non-serializable value detection."""

import re

from bid_interceptor.domain.serialization import has_non_serializable


def test_json_values_are_serializable():
    rule = {
        "when": {"bidder": "mockBidder", "params": {"placementId": 1}},
        "then": {"cpm": 1.5, "meta": {"advertiserDomains": ["a.com"]}, "dealId": None},
        "options": {"delay": 100, "suppressWarnings": False},
        "paapi": [],
    }
    assert has_non_serializable(rule) is False


def test_functions_and_patterns_are_not_serializable():
    assert has_non_serializable({"when": lambda bid: True}) is True
    assert has_non_serializable({"when": {"adUnitCode": re.compile("top")}}) is True
    assert has_non_serializable({"then": {"meta": {"brand": [1, lambda *a: 2]}}}) is True


def test_other_python_values_are_not_serializable():
    assert has_non_serializable({"then": {"sizes": {1, 2}}}) is True
    assert has_non_serializable({"then": {"cpm": float("nan")}}) is True
    assert has_non_serializable({1: "non-string key"}) is True


def test_self_reference_is_not_serializable():
    rule = {"when": {}}
    rule["when"]["self"] = rule
    assert has_non_serializable(rule) is True


def test_shared_subtrees_are_serializable():
    shared = {"seller": "x"}
    assert has_non_serializable({"paapi": [shared, shared]}) is False

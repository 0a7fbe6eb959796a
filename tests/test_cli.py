"""CLI tests using temporary rule and request files."""

import json

import pytest

from bid_interceptor.cli import main


def _write(tmp_path, name, data):
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_check_reports_rules(tmp_path, capsys):
    rules = _write(tmp_path, "rules.json", [{"when": {"bidder": "mockBidder"}, "then": {"cpm": 2}}, {"when": {}}])
    with pytest.raises(SystemExit) as exc:
        main(["check", str(rules)])
    assert exc.value.code == 0
    out = capsys.readouterr().out
    assert "Rules: 2" in out
    assert "Serializable: 2" in out
    assert "Definition errors: 0" in out


def test_check_fails_on_definition_errors(tmp_path, capsys):
    rules = _write(tmp_path, "rules.json", [{"when": "mockBidder"}, {"when": {}, "paapi": "x"}])
    with pytest.raises(SystemExit) as exc:
        main(["check", str(rules)])
    assert exc.value.code == 1
    assert "Definition errors: 2" in capsys.readouterr().out


def test_missing_file_exits_with_error(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["check", str(tmp_path / "absent.json")])
    assert exc.value.code == 1
    assert "not found" in capsys.readouterr().err


def test_simulate_prints_mocks(tmp_path, capsys):
    rules = _write(tmp_path, "rules.json", {
        "intercept": [
            {"when": {"bidId": "b1"}, "then": {"cpm": 7}, "options": {"delay": 5}, "paapi": [{"seller": "s"}]},
        ]
    })
    request = _write(tmp_path, "request.json", {
        "bidderCode": "mockBidder",
        "bids": [
            {"bidId": "b1", "mediaTypes": {"banner": {"sizes": [[728, 90]]}}},
            {"bidId": "b2", "mediaTypes": {"banner": {"sizes": [[300, 250]]}}},
        ],
    })
    with pytest.raises(SystemExit) as exc:
        main(["simulate", str(rules), str(request)])
    assert exc.value.code == 0
    result = json.loads(capsys.readouterr().out)
    assert result["remaining"] == ["b2"]
    assert len(result["responses"]) == 1
    response = result["responses"][0]
    assert response["requestId"] == "b1"
    assert response["cpm"] == 7
    assert (response["width"], response["height"]) == (728, 90)
    assert result["paapi"] == [{"bidId": "b1", "config": {"seller": "s"}}]

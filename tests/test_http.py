# tests/test_http.py
from unittest.mock import MagicMock

import pytest
import requests

import src.api.http as http
from src.api.errors import FetchError


def _resp(status: int = 200, payload=None):
    mock_resp = MagicMock()
    mock_resp.status_code = status
    mock_resp.ok = 200 <= status < 300
    mock_resp.json.return_value = payload
    return mock_resp


def test_http_get_json_success_passes_params(monkeypatch):
    seen = {}

    def fake_get(url, params=None, timeout=None, headers=None):
        seen["url"] = url
        seen["params"] = params
        seen["headers"] = headers
        return _resp(200, {"value": 123})

    monkeypatch.setattr("requests.get", fake_get)

    out = http.http_get_json("https://api.test", params={"a": 1})
    assert out == {"value": 123}
    assert seen["params"] == {"a": 1}
    assert "User-Agent" in seen["headers"]


def test_http_get_json_non_2xx_raises_with_status(monkeypatch):
    monkeypatch.setattr("requests.get", lambda *a, **kw: _resp(503))
    monkeypatch.setattr(http, "report_error", lambda ctx, e: None)

    with pytest.raises(FetchError) as exc:
        http.http_get_json("https://api.test")
    assert exc.value.status_code == 503


def test_http_get_json_does_not_retry(monkeypatch):
    calls = {"n": 0}

    def fake_get(*a, **kw):
        calls["n"] += 1
        return _resp(429)

    monkeypatch.setattr("requests.get", fake_get)
    monkeypatch.setattr(http, "report_error", lambda ctx, e: None)

    with pytest.raises(FetchError):
        http.http_get_json("https://api.test")
    assert calls["n"] == 1


def test_http_get_json_network_error_reports_and_raises(monkeypatch):
    captured = {}

    def fake_report_error(ctx, e):
        captured["ctx"] = ctx
        captured["err"] = str(e)

    def boom(*a, **kw):
        raise requests.exceptions.ConnectionError("boom")

    monkeypatch.setattr(http, "report_error", fake_report_error)
    monkeypatch.setattr("requests.get", boom)

    with pytest.raises(FetchError) as exc:
        http.http_get_json("https://badurl")

    assert exc.value.status_code is None
    assert "http_get_json:" in captured["ctx"]
    assert "boom" in captured["err"]


def test_http_get_json_invalid_json(monkeypatch):
    resp = _resp(200)
    resp.json.side_effect = ValueError("not json")
    monkeypatch.setattr("requests.get", lambda *a, **kw: resp)
    monkeypatch.setattr(http, "report_error", lambda ctx, e: None)

    with pytest.raises(FetchError):
        http.http_get_json("https://api.test")

import pytest

from sankanime.core import http_client as hc
from sankanime.core.errors import ResponseDecodeError, TransportError

from conftest import DummyResponse


def test_http_get_success(monkeypatch):
    calls = {"n": 0}

    def fake_request(method, url, timeout=None, headers=None, **kw):
        calls["n"] += 1
        assert method == "GET"
        assert url == "https://example.com"
        assert headers["User-Agent"] == hc.UA
        assert timeout == hc.DEFAULT_TIMEOUT
        return DummyResponse(200, {"ok": True})

    monkeypatch.setattr(hc.requests, "request", fake_request)

    r = hc.http_get("https://example.com")
    assert isinstance(r, DummyResponse)
    assert r.json()["ok"] is True
    assert calls["n"] == 1


def test_http_error_status_raises_transport_error_without_retry(monkeypatch):
    calls = {"n": 0}

    def fake_request(method, url, timeout=None, headers=None, **kw):
        calls["n"] += 1
        return DummyResponse(503, {})

    monkeypatch.setattr(hc.requests, "request", fake_request)

    with pytest.raises(TransportError) as exc:
        hc.http_get("https://api.service/test")
    assert exc.value.status_code == 503
    assert exc.value.url == "https://api.service/test"
    assert calls["n"] == 1, "no retries at the transport layer"


def test_network_failure_raises_transport_error(monkeypatch):
    class Boom(hc.requests.ConnectionError):
        pass

    def fake_request(method, url, timeout=None, headers=None, **kw):
        raise Boom("network down")

    monkeypatch.setattr(hc.requests, "request", fake_request)

    with pytest.raises(TransportError) as exc:
        hc.http_get("https://down.example")
    assert exc.value.status_code is None
    assert isinstance(exc.value.__cause__, Boom)


def test_get_json_joins_url_and_drops_none_params(monkeypatch):
    seen = {}

    def fake_request(method, url, timeout=None, headers=None, **kw):
        seen["url"] = url
        seen["params"] = kw.get("params")
        return DummyResponse(200, {"results": []})

    monkeypatch.setattr(hc.requests, "request", fake_request)

    data = hc.get_json("https://api.test/anime/", "/stream", {"id": "x", "type": None})
    assert data == {"results": []}
    assert seen["url"] == "https://api.test/anime/stream"
    assert seen["params"] == {"id": "x"}


def test_get_json_invalid_body(monkeypatch):
    monkeypatch.setattr(hc.requests, "request", lambda *a, **kw: DummyResponse(200, bad_json=True))

    with pytest.raises(ResponseDecodeError) as exc:
        hc.get_json("https://api.test", "home")
    assert isinstance(exc.value, TransportError)
    assert exc.value.status_code is None

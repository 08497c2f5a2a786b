import pytest

from sankanime.client import AnimeClient, set_client
from sankanime.config import AppSettings
from sankanime.core import http_client as hc
from sankanime.core.storage import MemoryStorage
from sankanime.tools import anime, browse, cache_tools, home, meta

from conftest import DummyResponse


@pytest.fixture
def respond(monkeypatch, clock):
    """Install a client whose transport answers every GET with `response`."""
    def _install(response):
        monkeypatch.setattr(hc.requests, "request", lambda *a, **kw: response)
        settings = AppSettings(api={"base_url": "https://api.test/anime"})
        set_client(AnimeClient(settings=settings, storage=MemoryStorage(), clock=clock))

    return _install


def test_health_ok():
    h = meta.health()
    assert h.get("schemaVersion") == "1.0.0"
    assert h.get("ok") is True
    assert h.get("sources") == ["sankanime"]


def test_about_reports_limits():
    a = meta.about()
    assert a["name"] == "sankanime"
    assert a["limits"]["homeCacheHours"] > 0


def test_home_info_ok(respond):
    respond(DummyResponse(200, {"results": {"spotlightAnimes": []}, "status": "ok"}))
    out = home.home_info()
    assert out == {"schemaVersion": "1.0.0", "results": {"spotlightAnimes": []}}


def test_home_info_empty(respond):
    respond(DummyResponse(200, {"results": []}))
    out = home.home_info()
    assert out["error"]["code"] == "EMPTY"


def test_upstream_status_becomes_error_payload(respond):
    respond(DummyResponse(502, {}))
    out = anime.episodes("x-1")
    assert out["schemaVersion"] == "1.0.0"
    assert out["error"] == {"code": "UPSTREAM_502", "message": out["error"]["message"], "source": "sankanime"}


def test_timeout_becomes_error_payload(monkeypatch, clock):
    def boom(*a, **kw):
        raise hc.requests.Timeout("read timed out")

    monkeypatch.setattr(hc.requests, "request", boom)
    set_client(AnimeClient(settings=AppSettings(), storage=MemoryStorage(), clock=clock))
    assert browse.search("one piece")["error"]["code"] == "TIMEOUT"


def test_anime_info_without_id_is_bad_request(respond):
    respond(DummyResponse(200, {}))
    assert anime.anime_info()["error"]["code"] == "BAD_REQUEST"


def test_category_strips_slashes(respond):
    respond(DummyResponse(200, {"results": {"animes": []}}))
    out = browse.category("/top-airing/", page=0)
    assert out["category"] == "/top-airing/"
    assert out["page"] == 1
    assert out["results"] == {"animes": []}


def test_cache_tools(respond):
    respond(DummyResponse(200, {"results": {"a": 1}}))
    assert cache_tools.cache_info()["stored"] is False
    home.home_info()
    info = cache_tools.cache_info()
    assert info["stored"] is True
    assert info["key"] == "homeInfoCache_v1.0"
    assert cache_tools.cache_clear() == {"schemaVersion": "1.0.0", "cleared": 1}
    assert cache_tools.cache_info()["stored"] is False


def test_create_app():
    from sankanime.server import create_app

    app = create_app()
    assert app.name == "sankanime"


def test_invalid_json_body_is_bad_response(respond):
    respond(DummyResponse(200, bad_json=True))
    assert anime.qtip("one-piece-100")["error"]["code"] == "BAD_RESPONSE"


def test_voice_actors_clamps_page(monkeypatch, clock):
    seen = {}

    def fake_request(method, url, timeout=None, headers=None, params=None, **kw):
        seen["params"] = params
        return DummyResponse(200, {"results": []})

    monkeypatch.setattr(hc.requests, "request", fake_request)
    set_client(AnimeClient(settings=AppSettings(), storage=MemoryStorage(), clock=clock))

    out = anime.voice_actors("one-piece-100", page=0)
    assert out["page"] == 1
    assert seen["params"] == {"page": 1}

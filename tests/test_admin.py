from fastapi.testclient import TestClient

from cache import ResponseCache
from deps.supply import get_orchestrator
from fakes import FakeClient, batch
from main import app
from pool import InMemoryQuestionPool
from supply import SupplyOrchestrator

client = TestClient(app)


def test_admin_reload_unauthorized(monkeypatch):
    monkeypatch.setenv("ADMIN_TOKEN", "secret")
    r = client.post("/admin/reload")
    assert r.status_code == 401


def test_admin_not_configured(monkeypatch):
    monkeypatch.delenv("ADMIN_TOKEN", raising=False)
    r = client.post("/admin/reload", headers={"x-admin-token": "anything"})
    assert r.status_code == 500


def test_admin_reload_ok(monkeypatch):
    monkeypatch.setenv("ADMIN_TOKEN", "secret")
    r = client.post("/admin/reload", headers={"x-admin-token": "secret"})
    assert r.status_code == 200
    body = r.json()
    assert body["ok"] is True and body["count"] >= 16


def test_admin_pool_status_and_cache_clear(monkeypatch):
    monkeypatch.setenv("ADMIN_TOKEN", "secret")
    o = SupplyOrchestrator(InMemoryQuestionPool(), ResponseCache(), FakeClient())
    o.pool.merge("colors", batch("Pooled", 4))
    o.cache.put("colors", None, batch("Cached", 1))
    app.dependency_overrides[get_orchestrator] = lambda: o
    try:
        h = {"x-admin-token": "secret"}
        r = client.get("/admin/pools/colors", headers=h)
        assert r.json() == {"ok": True, "category": "colors", "size": 4, "refill_pending": False}
        r = client.post("/admin/cache/clear", headers=h)
        assert r.json() == {"ok": True, "cleared": 1}
    finally:
        app.dependency_overrides.clear()

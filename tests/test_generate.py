import pytest
from fastapi.testclient import TestClient

from cache import ResponseCache
from deps.supply import get_orchestrator
from fakes import FakeClient, batch
from generation import ConfigurationError, MalformedResponse, RateLimited
from main import app
from pool import InMemoryQuestionPool
from supply import SupplyOrchestrator

client = TestClient(app)


@pytest.fixture
def orch():
    o = SupplyOrchestrator(InMemoryQuestionPool(), ResponseCache(), FakeClient(), timeout_s=1.0)
    app.dependency_overrides[get_orchestrator] = lambda: o
    yield o
    app.dependency_overrides.clear()


def test_generate_ok(orch):
    orch.client = FakeClient(result=batch("Gen", 7))
    r = client.post("/generate-questions", json={"category": "colors", "topic": "fruit"})
    assert r.status_code == 200
    assert len(r.json()["questions"]) == 7
    assert orch.pool.size("colors") == 7


def test_generate_uses_cache(orch):
    orch.cache.put("colors", "fruit", batch("Cached", 3))
    r = client.post("/generate-questions", json={"category": "colors", "topic": "fruit"})
    assert r.status_code == 200
    assert len(r.json()["questions"]) == 3
    assert orch.client.calls == []


def test_generate_rate_limited(orch):
    orch.client = FakeClient(error=RateLimited("429"))
    r = client.post("/generate-questions", json={"category": "colors"})
    assert r.status_code == 429
    body = r.json()
    assert body["error"] == "Rate limit exceeded"
    assert body["retryAfter"] == 40


def test_generate_without_key(orch):
    orch.client = FakeClient(error=ConfigurationError("no key"))
    r = client.post("/generate-questions", json={"category": "colors"})
    assert r.status_code == 500
    assert r.json() == {"error": "API key not configured"}


def test_generate_malformed(orch):
    orch.client = FakeClient(error=MalformedResponse("invalid JSON"))
    r = client.post("/generate-questions", json={"category": "colors"})
    assert r.status_code == 500
    body = r.json()
    assert body["error"] == "Failed to generate questions"
    assert "invalid JSON" in body["details"]


def test_real_client_without_key_reports_config_error():
    # default wiring: GeminiClient with GEMINI_API_KEY unset
    get_orchestrator.cache_clear()
    r = client.post("/generate-questions", json={"category": "colors", "topic": "unset-key"})
    assert r.status_code == 500
    assert r.json()["error"] == "API key not configured"

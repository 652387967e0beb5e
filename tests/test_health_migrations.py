from fastapi.testclient import TestClient

from main import app

client = TestClient(app)


def test_health_db_sees_pool_table():
    r = client.get("/health/db")
    assert r.status_code == 200
    assert r.json() == {"ok": True, "pool_table": True}


def test_health_migrations_single_head():
    r = client.get("/health/migrations")
    assert r.status_code == 200
    b = r.json()
    assert b["code_heads"] == ["0001_question_pools"]
    # tables come from create_all in tests, so nothing is stamped
    assert b["db_version"] is None
    assert b["ok"] is False

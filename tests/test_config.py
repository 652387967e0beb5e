import logging

import config
from deps.supply import get_orchestrator


def test_env_float_reads_number(monkeypatch):
    monkeypatch.setenv("QUIZ_GENERATION_TIMEOUT_S", "2.5")
    assert config._env_float("QUIZ_GENERATION_TIMEOUT_S", 10.0) == 2.5


def test_env_float_blank_uses_default(monkeypatch):
    monkeypatch.setenv("QUIZ_GENERATION_TIMEOUT_S", "  ")
    assert config._env_float("QUIZ_GENERATION_TIMEOUT_S", 10.0) == 10.0


def test_env_float_malformed_warns_and_uses_default(monkeypatch, caplog):
    monkeypatch.setenv("QUIZ_GENERATION_TIMEOUT_S", "ten")
    with caplog.at_level(logging.WARNING, logger="config"):
        assert config._env_float("QUIZ_GENERATION_TIMEOUT_S", 10.0) == 10.0
    assert "QUIZ_GENERATION_TIMEOUT_S" in caplog.text
    assert "'ten'" in caplog.text


def test_background_refills_use_a_single_attempt_client():
    orch = get_orchestrator()
    assert orch.client.max_retries == config.MAX_RETRIES
    assert orch.scheduler._client.max_retries == 0

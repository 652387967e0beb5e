# Tunables for the content supply pipeline.
# Secrets (GEMINI_API_KEY, ADMIN_TOKEN) are read at call time, not here.
from __future__ import annotations

import logging
import os

log = logging.getLogger(__name__)


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        log.warning("%s=%r is not a number; using %s", name, raw, default)
        return default


# --- Remote generation ------------------------------------------------------------
GEMINI_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
BATCH_SIZE = 7  # questions requested per generation call
MAX_RETRIES = 3  # retries after the first rate-limited attempt
BASE_DELAY_S = 1.0  # 1s, 2s, 4s
DEFAULT_RETRY_AFTER_S = 40
GENERATION_TIMEOUT_S = _env_float("QUIZ_GENERATION_TIMEOUT_S", 10.0)

# --- Caching / pool ---------------------------------------------------------------
CACHE_TTL_S = 3600.0
POOL_CAP = 100
POOL_KEY_PREFIX = "quiz_pool:"

# --- Orchestration ----------------------------------------------------------------
SERVE_COUNT = 7
MIN_POOL_SERVE = 5
LOW_WATER_MARK = 15
REPLENISH_DELAY_S = _env_float("QUIZ_REPLENISH_DELAY_S", 5.0)
TOP_UP_THRESHOLD = 2

# --- HTTP -------------------------------------------------------------------------
CORS_ORIGINS = [
    o.strip()
    for o in os.getenv(
        "CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000"
    ).split(",")
    if o.strip()
]

# deps/supply.py: one orchestrator per process, shared by all requests.
from __future__ import annotations

from functools import lru_cache

from cache import ResponseCache
from generation import GeminiClient
from pool import SqlQuestionPool
from replenish import ReplenishScheduler
from supply import SupplyOrchestrator


@lru_cache(maxsize=1)
def get_orchestrator() -> SupplyOrchestrator:
    pool = SqlQuestionPool()
    client = GeminiClient()
    # background refills make a single attempt and drop failures
    refill_client = GeminiClient(max_retries=0)
    return SupplyOrchestrator(
        pool,
        ResponseCache(),
        client,
        scheduler=ReplenishScheduler(refill_client, pool),
    )

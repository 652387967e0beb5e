"""
Supply orchestrator: decides where a category's next batch comes from.

    IDLE -> CHECKING_POOL -> SERVING                      (pool had enough)
                          -> GENERATING -> SERVING        (cache hit / remote success)
                                        -> FALLBACK_STATIC

The pool and cache are only written from here (and from the background
replenisher). Every path ends in a non-empty, shuffled batch unless a
category has neither static content nor pooled questions.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Protocol, Tuple

import config
from bank import get_static
from cache import ResponseCache
from generation import GenerationError, with_timeout
from pool import QuestionPool, dedup_key
from replenish import ReplenishScheduler
from schemas.questions import Question

log = logging.getLogger(__name__)


class SupplyState(str, Enum):
    IDLE = "idle"
    CHECKING_POOL = "checking_pool"
    GENERATING = "generating"
    SERVING = "serving"
    FALLBACK_STATIC = "fallback_static"


class NoContentError(Exception):
    """Neither static nor pooled questions exist for a category."""


class Generator(Protocol):
    async def generate(self, category: str, topic: Optional[str] = None) -> List[Question]: ...


@dataclass
class SupplyResult:
    questions: List[Question]
    source: str  # pool | cache | remote | static
    states: List[SupplyState] = field(default_factory=list)


class SupplyOrchestrator:
    def __init__(
        self,
        pool: QuestionPool,
        cache: ResponseCache,
        client: Generator,
        *,
        static: Callable[[str], List[Question]] = get_static,
        scheduler: Optional[ReplenishScheduler] = None,
        timeout_s: float = config.GENERATION_TIMEOUT_S,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.pool = pool
        self.cache = cache
        self.client = client
        self.scheduler = scheduler
        self.timeout_s = timeout_s
        self._static = static
        self._rng = rng or random.Random()

    def _shuffled(self, items: List[Question]) -> List[Question]:
        out = list(items)
        self._rng.shuffle(out)
        return out

    async def supply(self, category: str, topic: Optional[str] = None) -> SupplyResult:
        states = [SupplyState.IDLE, SupplyState.CHECKING_POOL]

        sample = self.pool.sample(category, config.SERVE_COUNT)
        if len(sample) >= config.MIN_POOL_SERVE:
            states.append(SupplyState.SERVING)
            if self.scheduler is not None and self.pool.size(category) < config.LOW_WATER_MARK:
                self.scheduler.schedule(category, topic)
            return SupplyResult(sample, "pool", states)

        states.append(SupplyState.GENERATING)
        try:
            batch, source = await self.generate_fresh(category, topic)
        except GenerationError as e:
            log.warning("Generation for %r failed (%s: %s); serving static", category, type(e).__name__, e)
            states.append(SupplyState.FALLBACK_STATIC)
            return SupplyResult(self.fallback(category), "static", states)

        states.append(SupplyState.SERVING)
        return SupplyResult(batch, source, states)

    async def generate_fresh(
        self, category: str, topic: Optional[str] = None
    ) -> Tuple[List[Question], str]:
        """Cache first, then the remote service under the timeout. Raises GenerationError."""
        cached = self.cache.get(category, topic)
        if cached:
            log.info("Using cached questions for %r", category)
            batch = self._shuffled(cached)
            self.pool.merge(category, batch)
            return batch, "cache"

        fresh = await with_timeout(self.client.generate(category, topic), self.timeout_s)
        batch = self._shuffled(fresh)
        self.pool.merge(category, batch)
        self.cache.put(category, topic, batch)
        return batch, "remote"

    def fallback(self, category: str) -> List[Question]:
        static = self._static(category)
        if static:
            return self._shuffled(static)
        # No static list: whatever the pool holds beats an error
        pooled = self.pool.read(category)
        if pooled:
            return self._shuffled(pooled)
        raise NoContentError(f"no questions available for category {category!r}")

    def top_up(self, category: str, remaining: List[Question]) -> List[Question]:
        """Extend a nearly finished batch from the pool (then static). Never calls out."""
        queue = list(remaining)
        if len(queue) > config.TOP_UP_THRESHOLD:
            return queue

        queued = {dedup_key(q) for q in queue}
        extra = [
            q
            for q in self.pool.sample(category, config.SERVE_COUNT + len(queue))
            if dedup_key(q) not in queued
        ]
        if not extra:
            extra = [q for q in self._shuffled(self._static(category)) if dedup_key(q) not in queued]
        if not extra and not queue:
            extra = self.fallback(category)
        return queue + extra[: config.SERVE_COUNT]

# cache.py: process-lifetime cache of generated batches keyed by (category, topic).
from __future__ import annotations

import time
from typing import Callable, Dict, List, Optional, Tuple

import config
from schemas.questions import Question

Key = Tuple[str, str]


def cache_key(category: str, topic: Optional[str]) -> Key:
    return (category, topic or category)


class ResponseCache:
    def __init__(
        self,
        ttl_s: float = config.CACHE_TTL_S,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl_s = ttl_s
        self._clock = clock
        self._entries: Dict[Key, Tuple[List[Question], float]] = {}

    def get(self, category: str, topic: Optional[str] = None) -> Optional[List[Question]]:
        hit = self._entries.get(cache_key(category, topic))
        if hit is None:
            return None
        batch, produced_at = hit
        if self._clock() - produced_at >= self.ttl_s:
            return None  # stale; overwritten by the next put
        return list(batch)

    def put(self, category: str, topic: Optional[str], batch: List[Question]) -> None:
        self._entries[cache_key(category, topic)] = (list(batch), self._clock())

    def clear(self) -> int:
        n = len(self._entries)
        self._entries.clear()
        return n

    def __len__(self) -> int:
        return len(self._entries)

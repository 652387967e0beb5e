"""
Persistent question pool.

Per category: an ordered (oldest first), prompt-deduplicated list of questions
capped at POOL_CAP. Merges drop later duplicates and evict the oldest surplus.
"""

from __future__ import annotations

import logging
import random
from typing import Dict, Iterable, List, Optional, Protocol

from pydantic import ValidationError
from sqlalchemy.orm import Session, sessionmaker

import config
from db import SessionLocal
from models import QuestionPoolRecord
from schemas.questions import Question

log = logging.getLogger(__name__)


def dedup_key(q: Question) -> str:
    # Prompt text only: two questions worded the same collapse into one.
    return q.q


def merge_questions(
    existing: Iterable[Question], new: Iterable[Question], cap: int = config.POOL_CAP
) -> List[Question]:
    seen = set()
    merged: List[Question] = []
    for q in list(existing) + list(new):
        k = dedup_key(q)
        if k in seen:
            continue
        seen.add(k)
        merged.append(q)
    if len(merged) > cap:
        merged = merged[-cap:]
    return merged


def pool_key(category: str) -> str:
    return f"{config.POOL_KEY_PREFIX}{category}"


class QuestionPool(Protocol):
    def read(self, category: str) -> List[Question]: ...

    def merge(self, category: str, new: Iterable[Question]) -> List[Question]: ...

    def sample(self, category: str, count: int) -> List[Question]: ...

    def size(self, category: str) -> int: ...


class _SamplingMixin:
    _rng: random.Random

    def sample(self, category: str, count: int) -> List[Question]:
        items = self.read(category)
        if not items or count <= 0:
            return []
        return self._rng.sample(items, min(count, len(items)))

    def size(self, category: str) -> int:
        return len(self.read(category))


class InMemoryQuestionPool(_SamplingMixin):
    def __init__(self, cap: int = config.POOL_CAP, rng: Optional[random.Random] = None) -> None:
        self.cap = cap
        self._rng = rng or random.Random()
        self._pools: Dict[str, List[Question]] = {}

    def read(self, category: str) -> List[Question]:
        return list(self._pools.get(category, []))

    def merge(self, category: str, new: Iterable[Question]) -> List[Question]:
        merged = merge_questions(self._pools.get(category, []), new, self.cap)
        self._pools[category] = merged
        return list(merged)


class SqlQuestionPool(_SamplingMixin):
    """Pool rows live in question_pools, one JSON list per category."""

    def __init__(
        self,
        session_factory: sessionmaker = SessionLocal,
        cap: int = config.POOL_CAP,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._session_factory = session_factory
        self.cap = cap
        self._rng = rng or random.Random()

    @staticmethod
    def _decode(category: str, items) -> List[Question]:
        if not isinstance(items, list):
            log.warning("pool record for %r is not a list; treating as empty", category)
            return []
        out: List[Question] = []
        for raw in items:
            try:
                out.append(Question.model_validate(raw))
            except ValidationError:
                log.warning("dropping invalid pooled question in %r", category)
                continue
        return out

    def _load(self, db: Session, category: str) -> List[Question]:
        rec = db.get(QuestionPoolRecord, pool_key(category))
        if rec is None:
            return []
        return self._decode(category, rec.items)

    def read(self, category: str) -> List[Question]:
        with self._session_factory() as db:
            return self._load(db, category)

    def merge(self, category: str, new: Iterable[Question]) -> List[Question]:
        key = pool_key(category)
        with self._session_factory() as db:
            merged = merge_questions(self._load(db, category), new, self.cap)
            payload = [q.wire() for q in merged]
            rec = db.get(QuestionPoolRecord, key)
            if rec is None:
                db.add(QuestionPoolRecord(key=key, category=category, items=payload))
            else:
                rec.items = payload
            db.commit()
        log.info("pool %r now holds %d questions", category, len(merged))
        return merged

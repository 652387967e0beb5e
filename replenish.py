# replenish.py: delayed, fire-and-forget pool refills.
from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional, Set

import config
from generation import GenerationError

log = logging.getLogger(__name__)


class ReplenishScheduler:
    """
    Refills one category's pool in the background. At most one refill per
    category is pending at a time; failures are logged and dropped.
    """

    def __init__(
        self,
        client,
        pool,
        *,
        delay_s: float = config.REPLENISH_DELAY_S,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        self._client = client
        self._pool = pool
        self.delay_s = delay_s
        self._sleep = sleep
        self._in_flight: Set[str] = set()
        self._tasks: Set[asyncio.Task] = set()

    def in_flight(self, category: str) -> bool:
        return category in self._in_flight

    def schedule(self, category: str, topic: Optional[str] = None) -> bool:
        if category in self._in_flight:
            log.debug("refill for %r already pending", category)
            return False
        self._in_flight.add(category)
        task = asyncio.get_running_loop().create_task(self._run(category, topic))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        log.info("scheduled background refill for %r in %.1fs", category, self.delay_s)
        return True

    async def _run(self, category: str, topic: Optional[str]) -> None:
        try:
            await self._sleep(self.delay_s)
            batch = await self._client.generate(category, topic)
            self._pool.merge(category, batch)
            log.info("background refill added %d questions to %r", len(batch), category)
        except GenerationError as e:
            log.info("background refill for %r dropped: %s: %s", category, type(e).__name__, e)
        except Exception:
            log.exception("background refill for %r crashed", category)
        finally:
            self._in_flight.discard(category)

    async def drain(self) -> None:
        """Wait for pending refills (tests and shutdown)."""
        if self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

import asyncio

from generation import GenerationError
from schemas.questions import Question


def make_q(prompt, correct="a", a="Yes", b="No"):
    return Question(
        q=prompt,
        a={"txt": a, "icon": "👍"},
        b={"txt": b, "icon": "👎"},
        correct=correct,
    )


def batch(prefix, n):
    return [make_q(f"{prefix} {i}?") for i in range(n)]


async def no_sleep(_delay):
    return None


class FakeClient:
    """Stands in for GeminiClient: returns a batch, raises, or hangs."""

    def __init__(self, result=None, error: GenerationError = None, delay_s: float = 0.0):
        self.result = result if result is not None else batch("Generated", 7)
        self.error = error
        self.delay_s = delay_s
        self.calls = []

    async def generate(self, category, topic=None):
        self.calls.append((category, topic))
        if self.delay_s:
            await asyncio.sleep(self.delay_s)
        if self.error is not None:
            raise self.error
        return list(self.result)


class FakeScheduler:
    def __init__(self):
        self.scheduled = []

    def schedule(self, category, topic=None):
        self.scheduled.append((category, topic))
        return True

    def in_flight(self, category):
        return any(c == category for c, _ in self.scheduled)

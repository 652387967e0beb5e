from cache import ResponseCache
from fakes import batch


class Clock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def test_put_then_get_returns_batch():
    cache = ResponseCache(clock=Clock())
    b = batch("Cached", 3)
    cache.put("colors", "rainbow", b)
    assert [q.q for q in cache.get("colors", "rainbow")] == [q.q for q in b]


def test_entry_expires_after_an_hour():
    clock = Clock()
    cache = ResponseCache(clock=clock)
    cache.put("colors", "rainbow", batch("Old", 2))
    clock.now += 3599
    assert cache.get("colors", "rainbow") is not None
    clock.now += 1
    assert cache.get("colors", "rainbow") is None


def test_keys_are_category_and_topic():
    cache = ResponseCache(clock=Clock())
    cache.put("colors", "fruit", batch("Fruit", 1))
    assert cache.get("colors", "flowers") is None
    assert cache.get("counting", "fruit") is None
    # no topic means the category doubles as topic
    cache.put("counting", None, batch("Count", 1))
    assert cache.get("counting", "counting") is not None


def test_put_replaces_stale_entry():
    clock = Clock()
    cache = ResponseCache(clock=clock)
    cache.put("colors", None, batch("Old", 1))
    clock.now += 7200
    cache.put("colors", None, batch("New", 2))
    assert [q.q for q in cache.get("colors")] == ["New 0?", "New 1?"]
    assert len(cache) == 1
    assert cache.clear() == 1
    assert cache.get("colors") is None

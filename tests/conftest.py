import asyncio
import threading

import pytest

from urlboard.models import ShortenResult, StatsSnapshot, TopEntry
from urlboard.result import Err, Ok


class FakeLogger:
    def __init__(self):
        self.messages = []

    def debug(self, msg, *a, **k):
        self.messages.append(("debug", msg % a if a else msg))

    def info(self, msg, *a, **k):
        self.messages.append(("info", msg % a if a else msg))

    def warning(self, msg, *a, **k):
        self.messages.append(("warning", msg % a if a else msg))

    def error(self, msg, *a, **k):
        self.messages.append(("error", msg % a if a else msg))

    def exception(self, msg, *a, **k):
        self.messages.append(("exception", msg % a if a else msg))

    def has(self, level, fragment):
        return any(lv == level and fragment in m for lv, m in self.messages)


class ManualHandle:
    def __init__(self, when, callback):
        self.when = when
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class ManualScheduler:
    """
    Таймеры на ручном «виртуальном» времени + задачи на настоящем asyncio-цикле.
    advance(dt) срабатывает все созревшие таймеры по порядку.
    """

    def __init__(self):
        self.now = 0.0
        self.handles = []
        self.tasks = []

    def call_later(self, delay, callback):
        h = ManualHandle(self.now + delay, callback)
        self.handles.append(h)
        return h

    @property
    def pending_timers(self):
        return [h for h in self.handles if not h.cancelled]

    def advance(self, dt):
        target = self.now + dt
        while True:
            due = [h for h in self.pending_timers if h.when <= target + 1e-9]
            if not due:
                break
            h = min(due, key=lambda x: x.when)
            self.handles.remove(h)
            self.now = h.when
            h.callback()
        self.now = target

    def spawn(self, coro, *, name=None):
        task = asyncio.get_running_loop().create_task(coro, name=name)
        self.tasks.append(task)
        return task

    async def drain(self):
        # задачи могут порождать новые задачи — крутимся, пока всё не завершится
        while True:
            pending = [t for t in self.tasks if not t.done()]
            if not pending:
                break
            await asyncio.gather(*pending, return_exceptions=True)


def make_result(**over):
    data = {
        "short_url": "https://sho.rt/abc123",
        "short_code": "abc123",
        "original_url": "https://example.com/a/b",
        "attempts": 1,
        "cached": False,
        "collision_detected": False,
        "strategy_used": None,
    }
    data.update(over)
    return ShortenResult.from_payload(data)


STATS_PAYLOAD = {
    "hash_map": {
        "size": 10,
        "capacity": 64,
        "load_factor": 0.15625,
        "collision_count": 2,
        "avg_chain_length": 1.1,
        "max_chain_length": 2,
        "non_empty_buckets": 9,
    },
    "lru_cache": {
        "size": 5,
        "capacity": 100,
        "hit_rate": 75.0,
        "hits": 30,
        "misses": 10,
        "evictions": 0,
        "utilization": 5.0,
    },
    "trie": {"total_urls": 10, "total_nodes": 120, "avg_nodes_per_url": 12.0},
    "collision_detector": {
        "total_collisions": 2,
        "linear_probing_used": 1,
        "linear_probing_percentage": 50.0,
        "regeneration_used": 1,
        "regeneration_percentage": 50.0,
        "max_attempts": 3,
    },
}

TOP_PAYLOAD = {
    "top_urls": [
        {
            "id": 7,
            "short_code": "zzz",
            "original_url": "https://example.com/popular",
            "clicks": 42,
            "created_at": "2025-01-02T10:00:00",
            "collision_resolved": True,
            "resolution_strategy": "linear",
        },
        {
            "id": 3,
            "short_code": "aaa",
            "original_url": "https://example.com/less",
            "clicks": 5,
            "created_at": "2025-01-01T09:00:00Z",
            "collision_resolved": False,
            "resolution_strategy": None,
        },
    ]
}


class FakeApi:
    """Синхронный фейк ApiClient: считает вызовы, отдаёт заранее заданные Result."""

    base_url = "https://sho.rt"

    def __init__(self):
        self.calls = []
        self._lock = threading.Lock()
        self.shorten_result = Ok(make_result())
        self.stats_result = Ok(StatsSnapshot.from_payload(STATS_PAYLOAD))
        self.top_result = Ok(tuple(TopEntry.from_payload(it) for it in TOP_PAYLOAD["top_urls"]))
        self.shorten_exc = None

    def _record(self, *call):
        with self._lock:
            self.calls.append(call)

    def count(self, name):
        return sum(1 for c in self.calls if c[0] == name)

    @property
    def network_calls(self):
        return len(self.calls)

    def short_link(self, short_code):
        return f"{self.base_url}/{short_code}"

    def shorten(self, url, strategy):
        self._record("shorten", url, strategy)
        if self.shorten_exc is not None:
            raise self.shorten_exc
        return self.shorten_result

    def stats(self):
        self._record("stats")
        return self.stats_result

    def top(self):
        self._record("top")
        return self.top_result

    def search(self, prefix, max_results=5):
        self._record("search", prefix, max_results)
        return Ok([])


@pytest.fixture
def logger():
    return FakeLogger()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def api():
    return FakeApi()


@pytest.fixture
def stats_snapshot():
    return StatsSnapshot.from_payload(STATS_PAYLOAD)


@pytest.fixture
def http_500():
    return Err("http", "Internal Server Error", 500)

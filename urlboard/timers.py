"""Scheduling primitives of the client core.

Everything runs on one asyncio loop: callbacks and task continuations never
overlap, so state owned by a component needs no locking. Timers are explicit
cancellable handles; `Timer` keeps at most one of them pending.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Coroutine
from typing import Any, Protocol

__all__ = ["TimerHandle", "Scheduler", "AsyncioScheduler", "Timer", "Lifetime"]


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...

    def spawn(self, coro: Coroutine[Any, Any, Any], *, name: str | None = None) -> Any: ...


class AsyncioScheduler:
    """Scheduler backed by a running asyncio loop (Flet runs one per page session)."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None, logger: logging.Logger | None = None):
        self._loop = loop
        self.logger = logger or logging.getLogger("urlboard.scheduler")
        self._tasks: set[asyncio.Task] = set()

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return self.loop.call_later(delay, callback)

    def spawn(self, coro: Coroutine[Any, Any, Any], *, name: str | None = None) -> asyncio.Task:
        task = self.loop.create_task(coro, name=name)
        # держим ссылку, иначе задачу может собрать GC посреди выполнения
        self._tasks.add(task)
        task.add_done_callback(self._on_done)
        return task

    def _on_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            self.logger.error("task_failed name=%s err=%r", task.get_name(), exc)

    @property
    def pending_tasks(self) -> int:
        return len(self._tasks)


class Timer:
    """
    Single-slot restartable timer.

    `start()` cancels whatever is pending before scheduling, so the owner has
    at most one outstanding handle at any time.
    """

    def __init__(self, scheduler: Scheduler, delay: float, callback: Callable[[], None]):
        self._scheduler = scheduler
        self.delay = delay
        self._callback = callback
        self._handle: TimerHandle | None = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def start(self) -> None:
        self.cancel()
        self._handle = self._scheduler.call_later(self.delay, self._fire)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self) -> None:
        self._handle = None
        self._callback()


class Lifetime:
    """Cancellation token tied to the owning view; continuations check it before applying results."""

    def __init__(self) -> None:
        self._alive = True

    @property
    def alive(self) -> bool:
        return self._alive

    def close(self) -> None:
        self._alive = False

"""The one mutating operation: shorten a URL."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from urlboard.api_client import SHORTEN_FAILED, ApiClient
from urlboard.config import POST_SUBMIT_REFRESH_DELAY
from urlboard.models import CollisionStrategy
from urlboard.normalization import url_fingerprint
from urlboard.result import Err
from urlboard.state import ViewState
from urlboard.stats_cache import StatsCache
from urlboard.timers import Lifetime, Scheduler, Timer


class SubmissionWorkflow:
    """
    Drives a submission end to end: state transitions around the create call,
    projection of the answer into `ViewState`, and the delayed refresh of the
    dashboard snapshots after a success.

    Overlapping calls are not deduplicated here; the caller keeps at most one
    submission in flight (see `ViewController.submit`).
    """

    def __init__(  # noqa: PLR0913
        self,
        api: ApiClient,
        state: ViewState,
        cache: StatsCache,
        scheduler: Scheduler,
        logger: logging.Logger,
        *,
        lifetime: Lifetime | None = None,
        refresh_delay: float = POST_SUBMIT_REFRESH_DELAY,
        on_change: Callable[[], None] | None = None,
    ):
        self.api = api
        self.state = state
        self.cache = cache
        self.scheduler = scheduler
        self.logger = logger
        self.lifetime = lifetime or Lifetime()
        self.on_change = on_change
        self._refresh_timer = Timer(scheduler, refresh_delay, self._start_refresh)

    @property
    def refresh_pending(self) -> bool:
        return self._refresh_timer.pending

    async def submit(self, url: str, strategy: CollisionStrategy | str) -> None:
        if not url or not url.strip():
            raise ValueError("url must be a non-empty string")
        strategy = CollisionStrategy(strategy)

        self.state.begin_submit()
        self._changed()
        self.logger.info("submit_start url=%s strategy=%s", url_fingerprint(url), strategy)

        try:
            result = await asyncio.to_thread(self.api.shorten, url, strategy)
        except Exception:
            # ApiClient сам ничего не бросает; сюда попадаем только на баге
            self.logger.exception("submit_crashed url=%s", url_fingerprint(url))
            result = Err("payload", SHORTEN_FAILED)

        if not self.lifetime.alive:
            self.logger.debug("submit_dropped reason=closed")
            return

        if isinstance(result, Err):
            self.state.submit_failed(result.message)
            self.logger.error("submit_failed kind=%s status=%s msg=%s", result.kind, result.status, result.message)
        else:
            self.state.submit_succeeded(result.value)
            self.logger.info(
                "submit_ok code=%s attempts=%d collision=%s",
                result.value.short_code,
                result.value.attempts,
                result.value.collision_detected,
            )
            self._refresh_timer.start()
        self._changed()

    def _start_refresh(self) -> None:
        if not self.lifetime.alive:
            return
        self.scheduler.spawn(self._refresh_after_submit(), name="post-submit-refresh")

    async def _refresh_after_submit(self) -> None:
        try:
            await self.cache.refresh_all()
        except Exception:
            # fire-and-forget: только в лог
            self.logger.exception("post_submit_refresh_failed")

    def dispose(self) -> None:
        self._refresh_timer.cancel()

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change()

"""Latest known statistics / leaderboard snapshots (stale-but-available)."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from urlboard.api_client import ApiClient
from urlboard.models import StatsSnapshot, TopEntry
from urlboard.result import Err
from urlboard.timers import Lifetime


class StatsCache:
    """
    Holds the two snapshots and refreshes them on request.

    A failed refresh keeps the previous snapshot, logs a warning and records
    the error in `last_errors`; the dashboard goes stale, never blank.
    """

    def __init__(
        self,
        api: ApiClient,
        logger: logging.Logger,
        *,
        lifetime: Lifetime | None = None,
        on_change: Callable[[], None] | None = None,
    ):
        self.api = api
        self.logger = logger
        self.lifetime = lifetime or Lifetime()
        self.on_change = on_change

        self.stats: StatsSnapshot | None = None
        self.top: tuple[TopEntry, ...] = ()
        self.last_errors: dict[str, Err] = {}

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change()

    async def refresh_stats(self) -> bool:
        self.logger.debug("stats_refresh_start")
        result = await asyncio.to_thread(self.api.stats)
        if not self.lifetime.alive:
            self.logger.debug("stats_refresh_dropped reason=closed")
            return False

        if isinstance(result, Err):
            self.last_errors["stats"] = result
            self.logger.warning("stats_refresh_failed kind=%s msg=%s", result.kind, result.message)
            return False

        self.stats = result.value
        self.last_errors.pop("stats", None)
        self.logger.debug("stats_refresh_ok")
        self._changed()
        return True

    async def refresh_top(self) -> bool:
        self.logger.debug("top_refresh_start")
        result = await asyncio.to_thread(self.api.top)
        if not self.lifetime.alive:
            self.logger.debug("top_refresh_dropped reason=closed")
            return False

        if isinstance(result, Err):
            self.last_errors["top"] = result
            self.logger.warning("top_refresh_failed kind=%s msg=%s", result.kind, result.message)
            return False

        self.top = result.value
        self.last_errors.pop("top", None)
        self.logger.debug("top_refresh_ok items=%d", len(self.top))
        self._changed()
        return True

    async def refresh_all(self) -> tuple[bool, bool]:
        """Both refreshes concurrently; neither waits for or depends on the other."""
        stats_ok, top_ok = await asyncio.gather(self.refresh_stats(), self.refresh_top())
        return stats_ok, top_ok

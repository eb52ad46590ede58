"""Top-level state machine of the dashboard.

Owns `ViewState` and composes the snapshot cache, the submission workflow and
the copy feedback into one `RenderModel`. Knows nothing about Flet.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from urlboard.api_client import ApiClient
from urlboard.clipboard import ClipboardFeedback
from urlboard.config import COPY_RESET_DELAY, POST_SUBMIT_REFRESH_DELAY
from urlboard.models import CollisionStrategy, Tab, TopEntry
from urlboard.state import RenderModel, ViewState
from urlboard.stats_cache import StatsCache
from urlboard.submission import SubmissionWorkflow
from urlboard.timers import Lifetime, Scheduler


class ViewController:
    def __init__(  # noqa: PLR0913
        self,
        api: ApiClient,
        scheduler: Scheduler,
        logger: logging.Logger,
        *,
        copy_fn: Callable[[str], None] | None = None,
        refresh_delay: float = POST_SUBMIT_REFRESH_DELAY,
        copy_reset_after: float = COPY_RESET_DELAY,
        on_change: Callable[[RenderModel], None] | None = None,
    ):
        self.api = api
        self.scheduler = scheduler
        self.logger = logger
        self.on_change = on_change

        self.state = ViewState()
        self.lifetime = Lifetime()
        self.cache = StatsCache(api, logger, lifetime=self.lifetime, on_change=self._changed)
        self.clipboard = ClipboardFeedback(
            scheduler,
            logger,
            copy_fn=copy_fn,
            reset_after=copy_reset_after,
            on_change=self._changed,
        )
        self.workflow = SubmissionWorkflow(
            api,
            self.state,
            self.cache,
            scheduler,
            logger,
            lifetime=self.lifetime,
            refresh_delay=refresh_delay,
            on_change=self._changed,
        )
        self._activated = False
        self._submit_task: Any | None = None

    # --- жизненный цикл ---
    def activate(self) -> None:
        """Initial load: one stats fetch and one top fetch, whatever tab is active."""
        if self._activated:
            return
        self._activated = True
        self.logger.info("view_activate tab=%s", self.state.active_tab)
        self.scheduler.spawn(self.cache.refresh_stats(), name="initial-stats")
        self.scheduler.spawn(self.cache.refresh_top(), name="initial-top")

    def close(self) -> None:
        """
        Teardown. Requests already in flight keep running, but their answers
        are dropped; pending timers are cancelled.
        """
        self.lifetime.close()
        self.workflow.dispose()
        self.clipboard.dispose()
        self.logger.info("view_closed")

    # --- переходы ---
    def select_tab(self, tab: Tab | str) -> None:
        self.state.select_tab(tab)
        self._changed()

    def set_url_input(self, text: str | None) -> None:
        self.state.set_url_input(text)
        self._changed()

    def set_strategy(self, strategy: CollisionStrategy | str) -> None:
        self.state.set_strategy(strategy)
        self._changed()

    def submit(self) -> Any | None:
        """Start a submission from the current input; no-op while one is in flight."""
        if self.state.submitting or (self._submit_task is not None and not self._submit_task.done()):
            self.logger.info("submit_reject reason=in_flight")
            return None
        if not self.state.url_input.strip():
            self.logger.info("submit_reject reason=empty_input")
            return None
        if not self.lifetime.alive:
            return None
        self._submit_task = self.scheduler.spawn(
            self.workflow.submit(self.state.url_input, self.state.collision_strategy),
            name="submit",
        )
        return self._submit_task

    def refresh_stats(self) -> Any:
        return self.scheduler.spawn(self.cache.refresh_stats(), name="refresh-stats")

    def refresh_top(self) -> Any:
        return self.scheduler.spawn(self.cache.refresh_top(), name="refresh-top")

    # --- буфер обмена ---
    def short_link_for(self, entry: TopEntry) -> str:
        return self.api.short_link(entry.short_code)

    def copy_short_url(self) -> bool:
        result = self.state.submit_result
        if result is None:
            self.logger.info("copy_to_clipboard skipped reason=no_result")
            return False
        return self.clipboard.mark_copied(result.short_url)

    def copy_top_link(self, entry: TopEntry) -> bool:
        return self.clipboard.mark_copied(self.short_link_for(entry))

    # --- рендер ---
    def render(self) -> RenderModel:
        s = self.state
        return RenderModel(
            active_tab=s.active_tab,
            url_input=s.url_input,
            collision_strategy=s.collision_strategy,
            submitting=s.submitting,
            submit_result=s.submit_result,
            submit_error=s.submit_error,
            stats=self.cache.stats,
            top=self.cache.top,
            copied=self.clipboard.copied,
        )

    def _changed(self) -> None:
        if self.on_change is None or not self.lifetime.alive:
            return
        self.on_change(self.render())

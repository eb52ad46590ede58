"""View state of the dashboard and its named transitions."""

from __future__ import annotations

from dataclasses import dataclass

from urlboard.models import CollisionStrategy, ShortenResult, StatsSnapshot, Tab, TopEntry

__all__ = ["ViewState", "RenderModel"]


@dataclass(slots=True)
class ViewState:
    """
    Single source of truth for the view.

    Fields are written only through the methods below; each one is a complete
    transition and can be tested on its own.
    """

    active_tab: Tab = Tab.SHORTEN
    url_input: str = ""
    collision_strategy: CollisionStrategy = CollisionStrategy.LINEAR
    submitting: bool = False
    submit_result: ShortenResult | None = None
    submit_error: str | None = None

    # --- ввод ---
    def select_tab(self, tab: Tab | str) -> None:
        self.active_tab = Tab(tab)

    def set_url_input(self, text: str | None) -> None:
        self.url_input = text or ""

    def set_strategy(self, strategy: CollisionStrategy | str) -> None:
        self.collision_strategy = CollisionStrategy(strategy)

    # --- жизненный цикл отправки ---
    def begin_submit(self) -> None:
        if self.submitting:
            raise RuntimeError("a submission is already in flight")
        self.submit_error = None
        self.submit_result = None
        self.submitting = True

    def submit_succeeded(self, result: ShortenResult) -> None:
        self.submit_result = result
        self.submit_error = None
        self.url_input = ""
        self.submitting = False

    def submit_failed(self, message: str) -> None:
        self.submit_result = None
        self.submit_error = message
        self.submitting = False


@dataclass(frozen=True, slots=True)
class RenderModel:
    """Everything the shell needs to draw one frame."""

    active_tab: Tab
    url_input: str
    collision_strategy: CollisionStrategy
    submitting: bool
    submit_result: ShortenResult | None
    submit_error: str | None
    stats: StatsSnapshot | None
    top: tuple[TopEntry, ...]
    copied: bool

    @property
    def can_submit(self) -> bool:
        return not self.submitting and bool(self.url_input.strip())

"""Transient "Copied!" indicator, independent of any network state."""

from __future__ import annotations

import logging
from collections.abc import Callable

import pyperclip

from urlboard.config import COPY_RESET_DELAY
from urlboard.timers import Scheduler, Timer


class ClipboardFeedback:
    """
    `mark_copied()` puts text on the host clipboard and raises `copied` for
    `reset_after` seconds. A repeated copy inside the window restarts the
    window instead of letting the older timer clear the flag early.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        logger: logging.Logger,
        *,
        copy_fn: Callable[[str], None] | None = None,
        reset_after: float = COPY_RESET_DELAY,
        on_change: Callable[[], None] | None = None,
    ):
        self.logger = logger
        self.copy_fn = copy_fn or pyperclip.copy
        self.on_change = on_change
        self.copied = False
        self._reset_timer = Timer(scheduler, reset_after, self._reset)

    @property
    def reset_pending(self) -> bool:
        return self._reset_timer.pending

    def mark_copied(self, text: str) -> bool:
        try:
            self.copy_fn(text)
        except Exception as e:
            # буфер обмена хоста недоступен (headless, нет xclip и т.п.)
            self.logger.warning("copy_to_clipboard failed err=%s", e)
            return False

        self.copied = True
        self._reset_timer.start()
        self.logger.info("copy_to_clipboard ok")
        self._notify()
        return True

    def _reset(self) -> None:
        self.copied = False
        self._notify()

    def dispose(self) -> None:
        self._reset_timer.cancel()

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change()

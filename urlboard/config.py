"""Runtime configuration for URL Board (constants + env overrides)."""

from __future__ import annotations

import os

APP_NAME = "URL Board"

__all__ = [
    "APP_NAME",
    "DEFAULT_API_BASE_URL",
    "POST_SUBMIT_REFRESH_DELAY",
    "COPY_RESET_DELAY",
    "DEFAULT_SEARCH_RESULTS",
    "api_base_url",
    "request_timeout",
    "debug_enabled",
]

DEFAULT_API_BASE_URL = "https://tinyurl-backend-02o2.onrender.com"

# ---- Тайминги ----
POST_SUBMIT_REFRESH_DELAY = 0.5  # сек: даём бэкенду «устаканиться» после создания ссылки
COPY_RESET_DELAY = 2.0  # сек: сколько держим «Copied!»
DEFAULT_SEARCH_RESULTS = 5

# ---- Логирование ----
LOG_ENABLED = True
LOG_FILE = "logs/app.log"
LOG_MAX_BYTES = 1_000_000
LOG_BACKUPS = 3


def api_base_url() -> str:
    """
    Base URL of the shortening service, without a trailing slash.

    Override: env URLBOARD_API_BASE_URL.
    """
    base = os.getenv("URLBOARD_API_BASE_URL") or DEFAULT_API_BASE_URL
    return base.strip().rstrip("/")


def request_timeout() -> float | None:
    """
    Per-request timeout in seconds, or None to keep the transport default.

    Override: env URLBOARD_REQUEST_TIMEOUT (empty/invalid/non-positive => None).
    """
    raw = (os.getenv("URLBOARD_REQUEST_TIMEOUT") or "").strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if value > 0 else None


def debug_enabled() -> bool:
    return os.getenv("URLBOARD_DEBUG") == "1"

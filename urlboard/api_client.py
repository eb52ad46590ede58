"""HTTP client of the shortening service.

Four outbound calls (shorten, stats, top, search). Every call returns a
`Result`: either `Ok(parsed payload)` or `Err(kind, message)`; transport
exceptions never leave this module.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from http import HTTPStatus
from typing import Any

import requests

from urlboard.config import DEFAULT_SEARCH_RESULTS
from urlboard.models import CollisionStrategy, ShortenResult, StatsSnapshot, TopEntry, parse_top_list
from urlboard.normalization import url_fingerprint
from urlboard.result import Err, Ok, Result

__all__ = [
    "ApiClient",
    "extract_detail",
    "SHORTEN_FAILED",
    "STATS_FAILED",
    "TOP_FAILED",
    "SEARCH_FAILED",
]

SHORTEN_FAILED = "Failed to shorten URL"
STATS_FAILED = "Failed to fetch statistics"
TOP_FAILED = "Failed to fetch top URLs"
SEARCH_FAILED = "Failed to search URLs"

_MALFORMED = (KeyError, TypeError, ValueError, AttributeError)


def extract_detail(resp: Any) -> str | None:
    """
    Pull a user-facing message out of an error body.

    `{"detail": "..."}` -> the string; FastAPI validation errors
    (`{"detail": [{"msg": ...}, ...]}`) -> messages joined by "; ".
    Anything else -> None.
    """
    try:
        body = resp.json()
    except Exception:
        return None
    if not isinstance(body, Mapping):
        return None

    detail = body.get("detail")
    if isinstance(detail, str) and detail.strip():
        return detail.strip()
    if isinstance(detail, list):
        msgs = [str(it.get("msg")) for it in detail if isinstance(it, Mapping) and it.get("msg")]
        if msgs:
            return "; ".join(msgs)
    return None


class ApiClient:
    def __init__(
        self,
        base_url: str,
        *,
        timeout: float | None = None,
        logger: logging.Logger | None = None,
        _get: Callable[..., Any] | None = None,
        _post: Callable[..., Any] | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.logger = logger or logging.getLogger("urlboard.api")
        self._get = _get or requests.get
        self._post = _post or requests.post

    def short_link(self, short_code: str) -> str:
        return f"{self.base_url}/{short_code}"

    # --- транспорт ---
    def _call(self, method: str, path: str, fallback: str, **kwargs) -> Result[Any]:
        url = f"{self.base_url}{path}"
        send = self._post if method == "POST" else self._get
        try:
            resp = send(url, timeout=self.timeout, **kwargs)
        except Exception as e:
            self.logger.warning("api_error kind=network method=%s path=%s err=%s", method, path, e)
            return Err("network", fallback)

        status = getattr(resp, "status_code", HTTPStatus.OK)
        if not (200 <= status < 300):  # noqa: PLR2004
            message = extract_detail(resp) or fallback
            self.logger.warning("api_error kind=http method=%s path=%s status=%s", method, path, status)
            return Err("http", message, status)

        try:
            return Ok(resp.json())
        except ValueError as e:
            self.logger.warning("api_error kind=payload method=%s path=%s err=%s", method, path, e)
            return Err("payload", fallback, status)

    def _parse(self, raw: Result[Any], parse: Callable[[Any], Any], fallback: str, what: str) -> Result[Any]:
        if isinstance(raw, Err):
            return raw
        try:
            return Ok(parse(raw.value))
        except _MALFORMED as e:
            self.logger.warning("api_error kind=payload what=%s err=%s", what, e)
            return Err("payload", fallback)

    # --- публичные вызовы ---
    def shorten(self, url: str, strategy: CollisionStrategy | str = CollisionStrategy.LINEAR) -> Result[ShortenResult]:
        strategy = CollisionStrategy(strategy)
        self.logger.info("api_shorten url=%s strategy=%s", url_fingerprint(url), strategy)
        raw = self._call(
            "POST",
            "/api/shorten",
            SHORTEN_FAILED,
            json={"url": url, "collision_strategy": strategy.value},
        )
        return self._parse(raw, ShortenResult.from_payload, SHORTEN_FAILED, "shorten")

    def stats(self) -> Result[StatsSnapshot]:
        raw = self._call("GET", "/api/stats", STATS_FAILED)
        return self._parse(raw, StatsSnapshot.from_payload, STATS_FAILED, "stats")

    def top(self) -> Result[tuple[TopEntry, ...]]:
        raw = self._call("GET", "/api/top", TOP_FAILED)
        return self._parse(raw, parse_top_list, TOP_FAILED, "top")

    def search(self, prefix: str, max_results: int = DEFAULT_SEARCH_RESULTS) -> Result[Any]:
        """Prefix search; the result list is service-defined and passed through as-is."""
        return self._call(
            "GET",
            "/api/search",
            SEARCH_FAILED,
            params={"prefix": prefix, "max_results": max_results},
        )

"""Data contracts of the shortening service as seen by the client. No I/O here."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from types import MappingProxyType
from typing import Any

__all__ = [
    "Tab",
    "CollisionStrategy",
    "ShortenResult",
    "StatsSnapshot",
    "TopEntry",
    "parse_top_list",
]


class Tab(StrEnum):
    SHORTEN = "shorten"
    STATS = "stats"
    TOP = "top"


class CollisionStrategy(StrEnum):
    LINEAR = "linear"
    REGENERATE = "regenerate"
    APPEND = "append"


def _frozen_mapping(value: Any) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        return MappingProxyType({})
    return MappingProxyType(dict(value))


def _parse_ts(value: Any) -> datetime | None:
    if not value or not isinstance(value, str):
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None


@dataclass(frozen=True, slots=True)
class ShortenResult:
    """Answer of `POST /api/shorten`. Replaced wholesale by every new submission."""

    short_url: str
    short_code: str
    original_url: str
    attempts: int = 1
    cached: bool = False
    collision_detected: bool = False
    strategy_used: str | None = None

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> ShortenResult:
        """Raises KeyError/TypeError/ValueError on a malformed body."""
        attempts = int(data.get("attempts") or 1)
        if attempts < 1:
            raise ValueError(f"attempts must be >= 1, got {attempts}")
        return cls(
            short_url=str(data["short_url"]),
            short_code=str(data["short_code"]),
            original_url=str(data["original_url"]),
            attempts=attempts,
            cached=bool(data.get("cached", False)),
            collision_detected=bool(data.get("collision_detected", False)),
            strategy_used=data.get("strategy_used") or None,
        )


@dataclass(frozen=True, slots=True)
class StatsSnapshot:
    """
    Aggregate statistics of the remote service.

    Sections are passed through for display; the client never interprets them
    beyond the field names.
    """

    hash_map: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    lru_cache: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    trie: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    collision_detector: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> StatsSnapshot:
        if not isinstance(data, Mapping):
            raise TypeError("stats payload must be an object")
        return cls(
            hash_map=_frozen_mapping(data.get("hash_map")),
            lru_cache=_frozen_mapping(data.get("lru_cache")),
            trie=_frozen_mapping(data.get("trie")),
            collision_detector=_frozen_mapping(data.get("collision_detector")),
        )


@dataclass(frozen=True, slots=True)
class TopEntry:
    id: Any
    short_code: str
    original_url: str
    clicks: int = 0
    created_at: datetime | None = None
    collision_resolved: bool = False
    resolution_strategy: str | None = None

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> TopEntry:
        clicks = int(data.get("clicks") or 0)
        if clicks < 0:
            raise ValueError(f"clicks must be >= 0, got {clicks}")
        return cls(
            id=data.get("id"),
            short_code=str(data["short_code"]),
            original_url=str(data.get("original_url") or ""),
            clicks=clicks,
            created_at=_parse_ts(data.get("created_at")),
            collision_resolved=bool(data.get("collision_resolved", False)),
            resolution_strategy=data.get("resolution_strategy") or None,
        )


def parse_top_list(data: Mapping[str, Any]) -> tuple[TopEntry, ...]:
    """`{"top_urls": [...]}` -> entries in server order (a missing key means an empty list)."""
    if not isinstance(data, Mapping):
        raise TypeError("top payload must be an object")
    items = data.get("top_urls") or []
    return tuple(TopEntry.from_payload(it) for it in items)

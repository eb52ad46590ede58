"""Dashboard screens: result card, statistics, leaderboard.

Layout only. Data arrives as immutable snapshots, callbacks are passed in;
no requests and no state live here.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

import flet as ft

from urlboard.models import CollisionStrategy, ShortenResult, StatsSnapshot, TopEntry

ACCENT = "#6366F1"
MUTED = ft.Colors.GREY_600
PAD = 12
CARD_W = 170

# value, label, example
STRATEGY_CHOICES: tuple[tuple[CollisionStrategy, str, str], ...] = (
    (CollisionStrategy.LINEAR, "Linear Probing", "abc → abd → abe"),
    (CollisionStrategy.REGENERATE, "Regeneration", "abc → x7K9mP"),
    (CollisionStrategy.APPEND, "Append Counter", "abc → abc1 → abc2"),
)

# медали для первых трёх мест
RANK_COLORS = ("#EAB308", "#9CA3AF", "#EA580C")


@dataclass(frozen=True, slots=True)
class StatCard:
    title: str
    value: str
    subtitle: str = ""


@dataclass(frozen=True, slots=True)
class StatSection:
    title: str
    cards: tuple[StatCard, ...]


def _v(section: Mapping[str, Any], key: str) -> str:
    value = section.get(key)
    return "—" if value is None else str(value)


def fmt_ratio_percent(value: Any) -> str:
    """0.4567 -> '45.7%'."""
    try:
        return f"{float(value) * 100:.1f}%"
    except (TypeError, ValueError):
        return "—"


def fmt_percent(value: Any) -> str:
    """Server already sends percents: 12.5 -> '12.5%'."""
    return "—" if value is None else f"{value}%"


def fmt_local_date(dt: datetime | None) -> str:
    if not dt:
        return "—"
    # наивное время от сервера считаем UTC
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone().strftime("%Y-%m-%d")


def rank_label(index: int) -> str:
    return f"#{index + 1}"


def stats_sections(stats: StatsSnapshot) -> list[StatSection]:
    hm, lru, trie, cd = stats.hash_map, stats.lru_cache, stats.trie, stats.collision_detector
    return [
        StatSection(
            "Hash Map",
            (
                StatCard("Total Entries", _v(hm, "size"), f"Capacity: {_v(hm, 'capacity')}"),
                StatCard("Load Factor", fmt_ratio_percent(hm.get("load_factor")), "Optimal: < 75%"),
                StatCard("Collisions", _v(hm, "collision_count"), f"Avg chain: {_v(hm, 'avg_chain_length')}"),
                StatCard(
                    "Max Chain Length",
                    _v(hm, "max_chain_length"),
                    f"{_v(hm, 'non_empty_buckets')} non-empty buckets",
                ),
            ),
        ),
        StatSection(
            "LRU Cache",
            (
                StatCard("Cache Size", _v(lru, "size"), f"Capacity: {_v(lru, 'capacity')}"),
                StatCard(
                    "Hit Rate",
                    fmt_percent(lru.get("hit_rate")),
                    f"{_v(lru, 'hits')} hits, {_v(lru, 'misses')} misses",
                ),
                StatCard("Evictions", _v(lru, "evictions"), "Items removed when full"),
                StatCard("Utilization", fmt_percent(lru.get("utilization")), "Current usage"),
            ),
        ),
        StatSection(
            "Trie",
            (
                StatCard("Total URLs", _v(trie, "total_urls"), "Indexed for search"),
                StatCard("Total Nodes", _v(trie, "total_nodes"), "Tree nodes created"),
                StatCard("Avg Nodes/URL", _v(trie, "avg_nodes_per_url"), "Prefix sharing efficiency"),
            ),
        ),
        StatSection(
            "Collision Detector",
            (
                StatCard("Total Collisions", _v(cd, "total_collisions"), "Detected and resolved"),
                StatCard(
                    "Linear Probing",
                    _v(cd, "linear_probing_used"),
                    fmt_percent(cd.get("linear_probing_percentage")),
                ),
                StatCard(
                    "Regeneration",
                    _v(cd, "regeneration_used"),
                    fmt_percent(cd.get("regeneration_percentage")),
                ),
                StatCard("Max Attempts", _v(cd, "max_attempts"), "Worst case resolution"),
            ),
        ),
    ]


# ---- Flet-разметка ----
def _card(content: ft.Control, *, width: int | None = None) -> ft.Container:
    return ft.Container(
        content=content,
        padding=PAD,
        width=width,
        border_radius=10,
        border=ft.border.all(1, ft.Colors.GREY_300),
    )


def _stat_tile(card: StatCard) -> ft.Container:
    return _card(
        ft.Column(
            controls=[
                ft.Text(card.title, size=12, color=MUTED),
                ft.Text(card.value, size=24, weight=ft.FontWeight.BOLD, color=ACCENT),
                ft.Text(card.subtitle, size=11, color=MUTED),
            ],
            spacing=2,
        ),
        width=CARD_W,
    )


def make_result_card(
    result: ShortenResult,
    *,
    copied: bool,
    on_copy: Callable | None = None,
    on_open: Callable | None = None,
) -> ft.Container:
    rows: list[ft.Control] = [
        ft.Text("Short URL", size=12, color=MUTED),
        ft.Row(
            controls=[
                ft.Text(
                    result.short_url,
                    size=16,
                    weight=ft.FontWeight.BOLD,
                    selectable=True,
                    expand=True,
                    max_lines=1,
                    overflow=ft.TextOverflow.ELLIPSIS,
                ),
                ft.IconButton(ft.Icons.OPEN_IN_NEW, tooltip="Open", on_click=on_open, data=result.short_url),
                ft.ElevatedButton("✓ Copied!" if copied else "Copy", icon=ft.Icons.CONTENT_COPY, on_click=on_copy),
            ],
        ),
        ft.Row(
            controls=[
                ft.Text(f"Code: {result.short_code}", font_family="monospace"),
                ft.Text(f"Attempts: {result.attempts}"),
                ft.Text(f"Cached: {'Yes' if result.cached else 'No'}"),
            ],
            spacing=20,
        ),
    ]
    if result.collision_detected:
        rows.append(
            ft.Text(
                f"Collision detected and resolved. Strategy used: {result.strategy_used or '—'}",
                color=ft.Colors.AMBER_800,
            )
        )
    rows.append(ft.Text(f"Original: {result.original_url}", size=12, color=MUTED, selectable=True))
    return _card(ft.Column(controls=rows, spacing=8))


def make_stats_screen(stats: StatsSnapshot | None, *, on_refresh: Callable | None = None) -> ft.Container:
    if stats is None:
        body: list[ft.Control] = [ft.Text("Loading statistics...", color=MUTED)]
    else:
        body = []
        for section in stats_sections(stats):
            body.append(ft.Text(section.title, size=18, weight=ft.FontWeight.BOLD))
            body.append(ft.Row(controls=[_stat_tile(c) for c in section.cards], wrap=True, spacing=10))

    body.append(
        ft.Row(
            controls=[ft.OutlinedButton("Refresh Statistics", icon=ft.Icons.REFRESH, on_click=on_refresh)],
            alignment=ft.MainAxisAlignment.CENTER,
        )
    )
    return ft.Container(
        ft.Column(controls=body, spacing=12, scroll=ft.ScrollMode.AUTO, expand=True),
        padding=PAD,
        expand=True,
    )


def make_top_row(
    index: int,
    entry: TopEntry,
    *,
    link: str,
    on_copy: Callable | None = None,
    on_open: Callable | None = None,
) -> ft.Container:
    badge_color = RANK_COLORS[index] if index < len(RANK_COLORS) else ft.Colors.GREY_700
    meta: list[ft.Control] = [ft.Text(f"Created: {fmt_local_date(entry.created_at)}", size=11, color=MUTED)]
    if entry.collision_resolved:
        meta.append(
            ft.Text(
                f"Collision Resolved ({entry.resolution_strategy or '—'})",
                size=11,
                color=ft.Colors.AMBER_800,
            )
        )

    return _card(
        ft.Row(
            controls=[
                ft.CircleAvatar(content=ft.Text(rank_label(index)), bgcolor=badge_color, radius=22),
                ft.Column(
                    controls=[
                        ft.Row(
                            controls=[
                                ft.Text(f"/{entry.short_code}", font_family="monospace", weight=ft.FontWeight.BOLD),
                                ft.Text(f"{entry.clicks} clicks", color=ACCENT),
                            ],
                            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                        ),
                        ft.Text(entry.original_url, size=12, max_lines=1, overflow=ft.TextOverflow.ELLIPSIS),
                        ft.Row(controls=meta, spacing=16),
                    ],
                    spacing=4,
                    expand=True,
                ),
                ft.IconButton(ft.Icons.OPEN_IN_NEW, tooltip="Open", on_click=on_open, data=link),
                ft.IconButton(ft.Icons.CONTENT_COPY, tooltip="Copy", on_click=on_copy, data=entry),
            ],
            vertical_alignment=ft.CrossAxisAlignment.CENTER,
        )
    )


def make_top_screen(  # noqa: PLR0913
    entries: tuple[TopEntry, ...],
    *,
    link_for: Callable[[TopEntry], str],
    on_copy: Callable | None = None,
    on_open: Callable | None = None,
    on_refresh: Callable | None = None,
) -> ft.Container:
    header = ft.Column(
        controls=[
            ft.Text("Most Popular URLs", size=22, weight=ft.FontWeight.BOLD),
            ft.Text("Tracked using Min Heap data structure", color=MUTED),
        ],
        horizontal_alignment=ft.CrossAxisAlignment.CENTER,
        spacing=2,
    )

    if not entries:
        rows: list[ft.Control] = [
            _card(
                ft.Column(
                    controls=[
                        ft.Text("No URLs yet", size=16),
                        ft.Text("Start shortening URLs to see analytics here", size=12, color=MUTED),
                    ],
                    horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                )
            )
        ]
    else:
        # порядок — как прислал сервер, без пересортировки
        rows = [
            make_top_row(i, e, link=link_for(e), on_copy=on_copy, on_open=on_open) for i, e in enumerate(entries)
        ]

    refresh = ft.Row(
        controls=[ft.OutlinedButton("Refresh", icon=ft.Icons.REFRESH, on_click=on_refresh)],
        alignment=ft.MainAxisAlignment.CENTER,
    )
    return ft.Container(
        ft.Column(controls=[header, *rows, refresh], spacing=10, scroll=ft.ScrollMode.AUTO, expand=True),
        padding=PAD,
        expand=True,
    )

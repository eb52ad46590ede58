from datetime import UTC, datetime

import flet as ft

from conftest import TOP_PAYLOAD, make_result
from urlboard.models import StatsSnapshot, parse_top_list
from urlboard.ui.dashboard import view


def _flatten(ctrl):
    out = [ctrl]
    for c in getattr(ctrl, "controls", None) or []:
        out.extend(_flatten(c))
    content = getattr(ctrl, "content", None)
    if isinstance(content, ft.Control):
        out.extend(_flatten(content))
    return out


def _texts(ctrl):
    return [c.value for c in _flatten(ctrl) if isinstance(c, ft.Text)]


def test_stats_sections_formatting(stats_snapshot):
    sections = {s.title: s for s in view.stats_sections(stats_snapshot)}
    assert list(sections) == ["Hash Map", "LRU Cache", "Trie", "Collision Detector"]

    hm = {c.title: c for c in sections["Hash Map"].cards}
    assert hm["Load Factor"].value == "15.6%"
    assert hm["Total Entries"].subtitle == "Capacity: 64"
    assert hm["Max Chain Length"].subtitle == "9 non-empty buckets"

    lru = {c.title: c for c in sections["LRU Cache"].cards}
    assert lru["Hit Rate"].value == "75.0%"
    assert lru["Hit Rate"].subtitle == "30 hits, 10 misses"

    cd = {c.title: c for c in sections["Collision Detector"].cards}
    assert cd["Linear Probing"].subtitle == "50.0%"


def test_stats_sections_tolerate_missing_fields():
    sections = view.stats_sections(StatsSnapshot())
    hm = {c.title: c for c in sections[0].cards}
    assert hm["Total Entries"].value == "—"
    assert hm["Load Factor"].value == "—"


def test_rank_and_date_helpers():
    assert view.rank_label(0) == "#1"
    assert view.rank_label(9) == "#10"
    assert view.fmt_local_date(None) == "—"
    assert "2025" in view.fmt_local_date(datetime(2025, 1, 1, 12, tzinfo=UTC))


def test_stats_screen_loading_placeholder():
    c = view.make_stats_screen(None)
    assert "Loading statistics..." in _texts(c)


def test_stats_screen_with_data(stats_snapshot):
    c = view.make_stats_screen(stats_snapshot)
    texts = _texts(c)
    assert "Hash Map" in texts
    assert "15.6%" in texts


def test_top_screen_empty_state():
    c = view.make_top_screen((), link_for=lambda e: "")
    assert "No URLs yet" in _texts(c)


def test_top_screen_keeps_server_order():
    entries = parse_top_list(TOP_PAYLOAD)
    c = view.make_top_screen(entries, link_for=lambda e: f"https://sho.rt/{e.short_code}")
    texts = _texts(c)

    codes = [t for t in texts if t.startswith("/")]
    assert codes == ["/zzz", "/aaa"]
    assert "#1" in texts and "#2" in texts
    assert "Collision Resolved (linear)" in texts

    copy_buttons = [
        b for b in _flatten(c) if isinstance(b, ft.IconButton) and b.icon == ft.Icons.CONTENT_COPY
    ]
    assert [b.data.short_code for b in copy_buttons] == ["zzz", "aaa"]


def test_result_card_collision_notice_and_copied_label():
    card = view.make_result_card(make_result(collision_detected=True, strategy_used="linear"), copied=True)
    texts = _texts(card)
    assert any("Strategy used: linear" in t for t in texts)
    buttons = [b for b in _flatten(card) if isinstance(b, ft.ElevatedButton)]
    assert buttons[0].text == "✓ Copied!"


def test_result_card_without_collision():
    card = view.make_result_card(make_result(), copied=False)
    texts = _texts(card)
    assert not any("Strategy used" in t for t in texts)
    assert "Attempts: 1" in texts
    assert "Cached: No" in texts

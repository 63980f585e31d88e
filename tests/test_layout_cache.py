from __future__ import annotations

import pytest

from loadgrid.exceptions import ValidationError
from loadgrid.services.conflicts import detect_conflicts
from loadgrid.services.layout import ResourceLayoutCache, assign_rows, layout_key


def _scenario(make_item, capacity_b=50):
    return [
        make_item("A", "2026-01-10", "2026-01-15", 60),
        make_item("B", "2026-01-12", "2026-01-20", capacity_b),
    ]


def test_layout_hit_returns_the_cached_result(make_item):
    cache = ResourceLayoutCache()
    items = _scenario(make_item)

    first = cache.layout_for("r1", items)
    second = cache.layout_for("r1", list(items))

    assert second == first
    assert second is not first
    assert (cache.hits, cache.misses) == (1, 1)


def test_changed_dates_miss_the_cache(make_item):
    cache = ResourceLayoutCache()
    items = _scenario(make_item)
    cache.layout_for("r1", items)

    moved = [items[0], make_item("B", "2026-01-16", "2026-01-20", 50)]
    layout = cache.layout_for("r1", moved)

    assert cache.misses == 2
    assert layout.row_count == 1


def test_key_depends_on_row_height(make_item):
    items = _scenario(make_item)

    assert layout_key("r1", items, 51) != layout_key("r1", items, 40)
    assert layout_key("r1", items, 51) == layout_key("r1", list(items), 51)


def test_conflicts_are_cached_and_track_capacity_changes(make_item):
    cache = ResourceLayoutCache()
    items = _scenario(make_item)

    zones = cache.conflicts_for("r1", items)
    again = cache.conflicts_for("r1", items)

    assert zones == again == detect_conflicts(items, "r1")
    assert cache.hits == 1

    lighter = cache.conflicts_for("r1", _scenario(make_item, capacity_b=30))
    assert lighter == []
    assert cache.misses == 2


def test_least_recently_used_entry_is_evicted(make_item):
    cache = ResourceLayoutCache(max_entries=2)
    items = _scenario(make_item)

    cache.layout_for("r1", items)
    cache.layout_for("r2", items)
    cache.layout_for("r1", items)
    cache.layout_for("r3", items)

    assert len(cache) == 2
    cache.layout_for("r1", items)
    assert cache.hits == 2
    cache.layout_for("r2", items)
    assert cache.misses == 4


def test_invalidate_drops_one_resource_and_notifies(make_item):
    cache = ResourceLayoutCache()
    items = _scenario(make_item)
    seen = []
    cache.invalidated.connect(seen.append)

    cache.layout_for("r1", items)
    cache.conflicts_for("r1", items)
    cache.layout_for("r2", items)

    assert cache.invalidate("r1") == 2
    assert len(cache) == 1
    assert seen == ["r1"]

    cache.layout_for("r2", items)
    assert cache.hits == 1


def test_clear_drops_everything_and_notifies_with_none(make_item):
    cache = ResourceLayoutCache()
    items = _scenario(make_item)
    seen = []
    cache.invalidated.connect(seen.append)
    cache.layout_for("r1", items)
    cache.layout_for("r2", items)

    assert cache.invalidate() == 2
    assert len(cache) == 0
    assert seen == [None]

    assert cache.clear() == 0
    assert seen == [None, None]


def test_cache_size_must_be_positive():
    with pytest.raises(ValidationError) as exc:
        ResourceLayoutCache(max_entries=0)
    assert exc.value.code == "LAYOUT_CACHE_INVALID_SIZE"


def test_editing_a_returned_layout_does_not_leak_into_later_hits(make_item):
    cache = ResourceLayoutCache()
    items = _scenario(make_item)

    first = cache.layout_for("r1", items)
    first.row_of["A"] = 7
    first.row_heights.append(999)

    again = cache.layout_for("r1", items)

    assert cache.hits == 1
    assert again == assign_rows(items)
    assert again.total_height == sum(again.row_heights)


def test_renamed_item_refreshes_cached_zones(make_item):
    cache = ResourceLayoutCache()
    items = _scenario(make_item)
    cache.conflicts_for("r1", items)

    renamed = [make_item("A", "2026-01-10", "2026-01-15", 60, name="Kickoff"), items[1]]
    zones = cache.conflicts_for("r1", renamed)

    assert cache.misses == 2
    assert zones[0].tasks[0].name == "Kickoff"

from __future__ import annotations

import random
from datetime import date, timedelta

import pytest

from loadgrid.domain import WorkItem
from loadgrid.exceptions import ValidationError
from loadgrid.services.layout import (
    assign_rows,
    calculate_max_rows,
    layout_for_resource,
    stack_resource_rows,
)
from loadgrid.services.timeline import overlaps


def _random_items(seed: int, count: int) -> list[WorkItem]:
    rng = random.Random(seed)
    items = []
    for index in range(count):
        start = date(2026, 5, 1) + timedelta(days=rng.randint(0, 60))
        end = start + timedelta(days=rng.randint(0, 9))
        items.append(WorkItem(id=index, start_date=start.isoformat(), end_date=end.isoformat()))
    return items


def test_identical_items_stack_into_separate_rows(make_item):
    items = [make_item(i, "2026-01-01", "2026-01-10") for i in range(3)]

    layout = assign_rows(items, base_row_height=51)

    assert sorted(layout.row_of.values()) == [0, 1, 2]
    assert layout.row_heights == [51, 46, 46]
    assert layout.total_height == 143
    assert layout.row_count == 3


def test_first_row_carries_the_extra_top_padding(make_item):
    items = [make_item(i, "2026-01-01", "2026-01-10") for i in range(2)]

    layout = assign_rows(items, base_row_height=30)

    assert layout.row_heights == [5 + 20 + 5, 20 + 5]


def test_adjacent_items_share_a_row(make_item):
    a = make_item("a", "2026-01-01", "2026-01-05")
    b = make_item("b", "2026-01-06", "2026-01-08")

    layout = assign_rows([a, b])

    assert layout.row_of == {"a": 0, "b": 0}
    assert layout.row_heights == [51]


def test_items_sharing_a_day_need_two_rows(make_item):
    a = make_item("a", "2026-01-01", "2026-01-05")
    b = make_item("b", "2026-01-05", "2026-01-08")

    assert assign_rows([a, b]).row_of == {"a": 0, "b": 1}


def test_equal_starts_keep_input_order(make_item):
    a = make_item("a", "2026-01-01", "2026-01-05")
    b = make_item("b", "2026-01-01", "2026-01-03")
    c = make_item("c", "2026-01-04", "2026-01-09")

    layout = assign_rows([a, b, c])

    assert layout.row_of == {"a": 0, "b": 1, "c": 1}


def test_undated_items_land_in_the_first_row(make_item):
    dated = [make_item(i, "2026-01-01", "2026-01-10") for i in range(2)]
    undated = make_item("u", None, None)
    broken = make_item("x", "soon", "2026-01-10")

    layout = assign_rows([*dated, undated, broken])

    assert layout.row_of["u"] == 0
    assert layout.row_of["x"] == 0
    assert layout.row_count == 2


def test_empty_input_keeps_one_base_row():
    layout = assign_rows([], base_row_height=51)

    assert layout.row_of == {}
    assert layout.row_heights == [51]
    assert layout.total_height == 51
    assert layout.to_dict() == {"rowOf": {}, "rowHeights": [51], "totalHeight": 51}


def test_rows_never_hold_overlapping_items():
    items = _random_items(seed=12, count=200)
    by_id = {item.id: item for item in items}

    layout = assign_rows(items)

    rows = layout.rows()
    for row in rows:
        for i, first in enumerate(row):
            for second in row[i + 1:]:
                assert not overlaps(by_id[first], by_id[second])
    assert layout.total_height == sum(layout.row_heights)
    assert len(layout.row_of) == len(items)


def test_items_only_move_down_when_every_row_above_is_blocked():
    items = _random_items(seed=31, count=150)
    by_id = {item.id: item for item in items}

    layout = assign_rows(items)

    rows = layout.rows()
    for item_id, row in layout.row_of.items():
        for above in rows[:row]:
            assert any(overlaps(by_id[item_id], by_id[other]) for other in above)


def test_row_top_offsets(make_item):
    items = [make_item(i, "2026-01-01", "2026-01-10") for i in range(3)]

    layout = assign_rows(items)

    assert [layout.row_top(row) for row in range(3)] == [0, 51, 97]


def test_base_row_height_must_leave_room_for_a_bar():
    with pytest.raises(ValidationError) as exc:
        assign_rows([], base_row_height=10)
    assert exc.value.code == "ROW_PACKING_INVALID_BASE_HEIGHT"


def test_calculate_max_rows(make_item):
    assert calculate_max_rows([]) == 1
    assert calculate_max_rows([make_item(i, "2026-01-01", "2026-01-10") for i in range(4)]) == 4
    assert calculate_max_rows([make_item("u", None, None)]) == 1


def test_layout_for_resource_packs_only_explicit_allocations(make_item):
    items = [
        make_item("a", "2026-01-01", "2026-01-10", 50),
        make_item("b", "2026-01-01", "2026-01-10", 50),
        make_item("c", "2026-01-01", "2026-01-10", 50, resource_id="r2"),
        make_item("d", "2026-01-01", "2026-01-10"),
    ]

    layout = layout_for_resource(items, "r1")

    assert set(layout.row_of) == {"a", "b"}
    assert layout.row_count == 2


def test_stack_resource_rows_accumulates_band_heights(make_item):
    busy = assign_rows([make_item(i, "2026-01-01", "2026-01-10") for i in range(3)])
    empty = assign_rows([])
    single = assign_rows([make_item("s", "2026-01-01", "2026-01-02")])

    offsets = stack_resource_rows({"r1": busy, "r2": empty, "r3": single})

    assert offsets == {"r1": 0, "r2": 143, "r3": 194}

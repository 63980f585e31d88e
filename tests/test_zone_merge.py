from __future__ import annotations

from datetime import datetime

from loadgrid.domain import ConflictLevel
from loadgrid.services.conflicts import ConflictZone, ZoneTask, conflict_level, merge_conflict_zones


def _zone(first_day: int, last_day: int, total: int, *tasks: tuple[str, int]) -> ConflictZone:
    return ConflictZone(
        start_date=datetime(2026, 4, first_day),
        end_date=datetime(2026, 4, last_day),
        total_percent=total,
        level=conflict_level(total),
        tasks=tuple(ZoneTask(id=task_id, name=task_id, capacity=capacity) for task_id, capacity in tasks),
    )


def test_overlapping_zones_merge_and_keep_the_peak():
    first = _zone(1, 5, 110, ("a", 60), ("b", 50))
    second = _zone(4, 8, 160, ("b", 70), ("c", 90))

    merged = merge_conflict_zones([first, second])

    assert len(merged) == 1
    zone = merged[0]
    assert (zone.start_date.day, zone.end_date.day) == (1, 8)
    assert zone.total_percent == 160
    assert zone.level == ConflictLevel.SEVERE
    assert [(t.id, t.capacity) for t in zone.tasks] == [("c", 90), ("b", 70), ("a", 60)]


def test_touching_zones_merge():
    merged = merge_conflict_zones([_zone(1, 3, 110, ("a", 60)), _zone(4, 6, 125, ("b", 65))])

    assert [(z.start_date.day, z.end_date.day, z.total_percent) for z in merged] == [(1, 6, 125)]
    assert merged[0].level == ConflictLevel.MEDIUM


def test_zones_separated_by_a_free_day_stay_apart():
    merged = merge_conflict_zones([_zone(5, 6, 110), _zone(1, 3, 130)])

    assert [(z.start_date.day, z.end_date.day) for z in merged] == [(1, 3), (5, 6)]


def test_contained_zone_does_not_shrink_the_outer_one():
    merged = merge_conflict_zones([_zone(1, 10, 110), _zone(3, 4, 140)])

    assert [(z.start_date.day, z.end_date.day, z.total_percent) for z in merged] == [(1, 10, 140)]


def test_chain_of_zones_collapses_into_one():
    zones = [_zone(1, 2, 110), _zone(3, 4, 110), _zone(4, 7, 115), _zone(8, 8, 101)]

    merged = merge_conflict_zones(zones)

    assert [(z.start_date.day, z.end_date.day) for z in merged] == [(1, 8)]


def test_merge_of_nothing_is_nothing():
    assert merge_conflict_zones([]) == []

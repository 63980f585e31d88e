from __future__ import annotations

from typing import Iterable, Sequence

from loadgrid.services.conflicts.builder import zone_task_sort_key
from loadgrid.services.conflicts.models import ConflictZone, ZoneTask
from loadgrid.services.conflicts.sweep import conflict_level
from loadgrid.services.timeline.instants import DAY


def merge_zone_tasks(first: Iterable[ZoneTask], second: Iterable[ZoneTask]) -> tuple[ZoneTask, ...]:
    by_id: dict[object, ZoneTask] = {}
    for task in (*first, *second):
        existing = by_id.get(task.id)
        if existing is None or task.capacity > existing.capacity:
            by_id[task.id] = task
    return tuple(sorted(by_id.values(), key=zone_task_sort_key))


def _merge_pair(current: ConflictZone, nxt: ConflictZone) -> ConflictZone:
    # Peak load, not the sum: both zones may describe the same overload.
    peak = max(current.total_percent, nxt.total_percent)
    return ConflictZone(
        start_date=current.start_date,
        end_date=max(current.end_date, nxt.end_date),
        total_percent=peak,
        level=conflict_level(peak),
        tasks=merge_zone_tasks(current.tasks, nxt.tasks),
    )


def merge_conflict_zones(zones: Sequence[ConflictZone]) -> list[ConflictZone]:
    """
    Collapse zones sharing or touching a day into one, ascending by start.

    ``end_date`` is inclusive, so a zone starting the day after the current
    one ends continues it.
    """
    if not zones:
        return []

    ordered = sorted(zones, key=lambda z: (z.start_date, z.end_date))
    merged: list[ConflictZone] = []
    current = ordered[0]
    for nxt in ordered[1:]:
        if nxt.start_date <= current.end_date + DAY:
            current = _merge_pair(current, nxt)
        else:
            merged.append(current)
            current = nxt
    merged.append(current)
    return merged


__all__ = ["merge_zone_tasks", "merge_conflict_zones"]

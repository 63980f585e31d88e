from __future__ import annotations

from datetime import datetime
from typing import Iterable, Sequence

from loadgrid.services.conflicts.models import ClusterMember, ConflictZone, OverloadRange, ZoneTask
from loadgrid.services.conflicts.sweep import OVERLOAD_PERCENT, compute_overload_ranges, conflict_level


def zone_task_sort_key(task: ZoneTask) -> tuple[float, str, str]:
    return (-task.capacity, (task.name or "").lower(), str(task.id))


def zone_from_range(overload: OverloadRange) -> ConflictZone:
    tasks: dict[object, ZoneTask] = {}
    for member in overload.members:
        item = member.item
        existing = tasks.get(item.id)
        if existing is None or member.capacity > existing.capacity:
            tasks[item.id] = ZoneTask(id=item.id, name=item.name, capacity=member.capacity)
    return ConflictZone(
        start_date=overload.start,
        end_date=overload.end,
        total_percent=overload.peak_percent,
        level=conflict_level(overload.peak_percent),
        tasks=tuple(sorted(tasks.values(), key=zone_task_sort_key)),
    )


def build_cluster_zones(
    cluster: Sequence[ClusterMember],
    window: tuple[datetime, datetime],
    seen: set[tuple[datetime, datetime]],
) -> list[ConflictZone]:
    """
    Zones for one overlap cluster. ``seen`` holds the ``(start, end)`` of
    every sub-range already emitted during this detection run.
    """
    total_percent = sum(member.capacity for member in cluster if member.capacity > 0)
    if total_percent <= OVERLOAD_PERCENT:
        return []

    zones: list[ConflictZone] = []
    for overload in compute_overload_ranges(cluster, window[0], window[1]):
        key = (overload.start, overload.end)
        if key in seen:
            continue
        seen.add(key)
        zones.append(zone_from_range(overload))
    return zones


def build_zones(clusters: Iterable[tuple[tuple[datetime, datetime], Sequence[ClusterMember]]]) -> list[ConflictZone]:
    seen: set[tuple[datetime, datetime]] = set()
    zones: list[ConflictZone] = []
    for window, cluster in clusters:
        zones.extend(build_cluster_zones(cluster, window, seen))
    return zones


__all__ = ["zone_task_sort_key", "zone_from_range", "build_cluster_zones", "build_zones"]

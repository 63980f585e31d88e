from __future__ import annotations

from datetime import datetime
from typing import Sequence

from loadgrid.domain import ConflictLevel
from loadgrid.services.conflicts.models import ClusterMember, OverloadRange
from loadgrid.services.timeline.instants import DAY

OVERLOAD_PERCENT = 100
LIGHT_MAX_PERCENT = 120
MEDIUM_MAX_PERCENT = 150


def conflict_level(total_percent: float) -> ConflictLevel:
    if total_percent > MEDIUM_MAX_PERCENT:
        return ConflictLevel.SEVERE
    if total_percent > LIGHT_MAX_PERCENT:
        return ConflictLevel.MEDIUM
    return ConflictLevel.LIGHT


def sweep_boundaries(
    members: Sequence[ClusterMember],
    window_start: datetime,
    window_end: datetime,
) -> list[datetime]:
    points = {window_start, window_end}
    for member in members:
        for point in member.bounds:
            if window_start < point < window_end:
                points.add(point)
    return sorted(points)


def compute_overload_ranges(
    members: Sequence[ClusterMember],
    window_start: datetime,
    window_end: datetime,
) -> list[OverloadRange]:
    """
    Exact overload sub-ranges of ``[window_start, window_end)``.

    The window is cut at every member start and exclusive end falling inside
    it. Each resulting segment is loaded with the capacities of the members
    active at its start; a segment is overloaded when that load exceeds 100%
    and at least two members share it. Consecutive overloaded segments form a
    single range whose inclusive end is its exclusive boundary minus one day.

    ``members`` must contain every item active anywhere inside the window,
    otherwise loads are under-counted.
    """
    contributing = [member for member in members if member.capacity > 0]
    if len(contributing) < 2:
        return []

    boundaries = sweep_boundaries(contributing, window_start, window_end)
    ranges: list[OverloadRange] = []

    run_start: datetime | None = None
    run_end: datetime | None = None
    run_peak = 0
    run_members: dict[ClusterMember, None] = {}

    def flush() -> None:
        if run_start is None or run_end is None:
            return
        ranges.append(
            OverloadRange(
                start=run_start,
                end=max(run_start, run_end - DAY),
                peak_percent=run_peak,
                members=tuple(run_members),
            )
        )

    for segment_start, segment_end in zip(boundaries, boundaries[1:]):
        active = [m for m in contributing if m.start <= segment_start < m.end]
        load = sum(m.capacity for m in active)
        if load <= OVERLOAD_PERCENT or len(active) < 2:
            continue

        if run_end != segment_start:
            flush()
            run_start = segment_start
            run_peak = load
            run_members = {}
        else:
            run_peak = max(run_peak, load)
        run_end = segment_end
        for member in active:
            run_members.setdefault(member, None)

    flush()
    return ranges


__all__ = [
    "OVERLOAD_PERCENT",
    "LIGHT_MAX_PERCENT",
    "MEDIUM_MAX_PERCENT",
    "conflict_level",
    "sweep_boundaries",
    "compute_overload_ranges",
]

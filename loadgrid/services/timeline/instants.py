"""
Calendar-day interval helpers shared by conflict detection and row packing.

Work item end dates are inclusive: an item running ``2026-01-10`` to
``2026-01-15`` occupies the 15th entirely. Internally every interval is
handled half-open as ``[start, end + 1 day)`` so two items only intersect
when they genuinely share time, never when one ends the day before the
other starts.
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any, Optional

DAY = timedelta(days=1)

_DATE_ONLY = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_DATE_MINUTE = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}$")


@dataclass(frozen=True)
class TimeIntersection:
    start: datetime
    end: datetime

    @property
    def end_exclusive(self) -> datetime:
        return self.end + DAY


def _naive(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def parse_date(value: Any) -> Optional[datetime]:
    """
    Parse ``YYYY-MM-DD`` / ``YYYY-MM-DD HH:MM`` strings, ``date`` or
    ``datetime`` objects into a naive instant. Anything else is tried as an
    ISO string and yields None when it cannot be read.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return _naive(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None
    try:
        if _DATE_ONLY.match(text):
            return datetime.strptime(text, "%Y-%m-%d")
        if _DATE_MINUTE.match(text):
            return datetime.strptime(text, "%Y-%m-%d %H:%M")
        return _naive(datetime.fromisoformat(text))
    except ValueError:
        return None


def item_bounds(item: Any) -> Optional[tuple[datetime, datetime]]:
    """Return ``(start, exclusive_end)`` or None when the item cannot be placed in time."""
    start = parse_date(getattr(item, "start_date", None))
    end = parse_date(getattr(item, "end_date", None))
    if start is None or end is None:
        return None
    end_exclusive = end + DAY
    if end_exclusive <= start:
        return None
    return start, end_exclusive


def intersect(item1: Any, item2: Any) -> Optional[TimeIntersection]:
    bounds1 = item_bounds(item1)
    bounds2 = item_bounds(item2)
    if bounds1 is None or bounds2 is None:
        return None
    return intersect_bounds(bounds1, bounds2)


def intersect_bounds(
    bounds1: tuple[datetime, datetime],
    bounds2: tuple[datetime, datetime],
) -> Optional[TimeIntersection]:
    start1, end1 = bounds1
    start2, end2 = bounds2
    if start1 >= end2 or start2 >= end1:
        return None
    return TimeIntersection(start=max(start1, start2), end=min(end1, end2) - DAY)


def overlaps(item1: Any, item2: Any) -> bool:
    return intersect(item1, item2) is not None


def days_between(start: datetime, end: datetime) -> int:
    return math.floor((end - start) / DAY)


def is_in_range(instant: datetime, start: datetime, end: datetime) -> bool:
    return start <= instant <= end


__all__ = [
    "DAY",
    "TimeIntersection",
    "parse_date",
    "item_bounds",
    "intersect",
    "intersect_bounds",
    "overlaps",
    "days_between",
    "is_in_range",
]

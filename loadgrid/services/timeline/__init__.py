from .instants import (
    DAY,
    TimeIntersection,
    days_between,
    intersect,
    is_in_range,
    item_bounds,
    overlaps,
    parse_date,
)

__all__ = [
    "DAY",
    "TimeIntersection",
    "days_between",
    "intersect",
    "is_in_range",
    "item_bounds",
    "overlaps",
    "parse_date",
]

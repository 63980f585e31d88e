from .conflicts import (
    ConflictZone,
    ZoneTask,
    conflict_level,
    conflicting_item_ids,
    detect_all_conflicts,
    detect_conflicts,
)
from .layout import (
    ResourceLayoutCache,
    RowAssignment,
    assign_rows,
    calculate_max_rows,
    layout_for_resource,
    stack_resource_rows,
)
from .timeline import intersect, overlaps, parse_date

__all__ = [
    "ConflictZone",
    "ZoneTask",
    "conflict_level",
    "conflicting_item_ids",
    "detect_all_conflicts",
    "detect_conflicts",
    "ResourceLayoutCache",
    "RowAssignment",
    "assign_rows",
    "calculate_max_rows",
    "layout_for_resource",
    "stack_resource_rows",
    "intersect",
    "overlaps",
    "parse_date",
]

"""Resource overload detection and row packing for resource timelines."""
from loadgrid.domain import ConflictLevel, Resource, ResourceAllocation, WorkItem
from loadgrid.exceptions import DomainError, NotFoundError, ValidationError
from loadgrid.services.conflicts import (
    ConflictZone,
    ZoneTask,
    conflict_level,
    conflicting_item_ids,
    detect_all_conflicts,
    detect_conflicts,
)
from loadgrid.services.layout import (
    ResourceLayoutCache,
    RowAssignment,
    assign_rows,
    calculate_max_rows,
    layout_for_resource,
    stack_resource_rows,
)
from loadgrid.services.timeline import intersect, parse_date

__all__ = [
    "ConflictLevel",
    "Resource",
    "ResourceAllocation",
    "WorkItem",
    "DomainError",
    "NotFoundError",
    "ValidationError",
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
    "parse_date",
]

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, Mapping, Optional, Sequence

from loadgrid.domain import ItemId, ResourceId, WorkItem
from loadgrid.exceptions import ValidationError
from loadgrid.services.conflicts.allocation import find_allocation
from loadgrid.services.layout.models import RowAssignment
from loadgrid.services.timeline.instants import intersect_bounds, item_bounds

logger = logging.getLogger(__name__)

DEFAULT_ROW_HEIGHT = 51
ROW_PADDING = 5
BAR_INSET = 10

Bounds = Optional[tuple[datetime, datetime]]


def _validate_base_height(base_row_height: int) -> None:
    if base_row_height <= BAR_INSET:
        raise ValidationError(
            f"base_row_height must be greater than {BAR_INSET}.",
            code="ROW_PACKING_INVALID_BASE_HEIGHT",
        )


def bar_height(base_row_height: int = DEFAULT_ROW_HEIGHT) -> int:
    return base_row_height - BAR_INSET


def row_height(row: int, base_row_height: int = DEFAULT_ROW_HEIGHT) -> int:
    # Every row pads its bottom; only the first one pads its top as well.
    if row == 0:
        return ROW_PADDING + bar_height(base_row_height) + ROW_PADDING
    return bar_height(base_row_height) + ROW_PADDING


def _fits(bounds: Bounds, row: Sequence[Bounds]) -> bool:
    if bounds is None:
        return True
    return all(other is None or intersect_bounds(bounds, other) is None for other in row)


def assign_rows(items: Iterable[WorkItem], base_row_height: int = DEFAULT_ROW_HEIGHT) -> RowAssignment:
    """
    First-fit packing of items into rows where no two members overlap.

    Items are visited by start date (input order on ties, undated items
    first) and each one lands in the topmost row it fits. Items without
    usable dates overlap nothing and therefore always land in row 0.
    """
    _validate_base_height(base_row_height)

    placed = [(item, item_bounds(item)) for item in items]
    if not placed:
        return RowAssignment(row_of={}, row_heights=[base_row_height], total_height=base_row_height)

    placed.sort(key=lambda pair: pair[1][0] if pair[1] is not None else datetime.min)

    rows: list[list[Bounds]] = []
    row_of: dict[ItemId, int] = {}
    for item, bounds in placed:
        for index, row in enumerate(rows):
            if _fits(bounds, row):
                row.append(bounds)
                row_of[item.id] = index
                break
        else:
            rows.append([bounds])
            row_of[item.id] = len(rows) - 1

    heights = [row_height(index, base_row_height) for index in range(len(rows))]
    logger.debug("Packed %d item(s) into %d row(s)", len(placed), len(rows))
    return RowAssignment(row_of=row_of, row_heights=heights, total_height=sum(heights))


def calculate_max_rows(items: Iterable[WorkItem]) -> int:
    assignment = assign_rows(items)
    if not assignment.row_of:
        return 1
    return max(assignment.row_of.values()) + 1


def layout_for_resource(
    items: Iterable[WorkItem],
    resource_id: ResourceId,
    base_row_height: int = DEFAULT_ROW_HEIGHT,
) -> RowAssignment:
    """Pack only the items that explicitly allocate ``resource_id``."""
    owned = [item for item in items if item.resources and find_allocation(item, resource_id) is not None]
    return assign_rows(owned, base_row_height)


def stack_resource_rows(
    layouts: Mapping[ResourceId, RowAssignment],
    base_row_height: int = DEFAULT_ROW_HEIGHT,
) -> dict[ResourceId, int]:
    """Top offset of every resource band when bands are stacked in mapping order."""
    offsets: dict[ResourceId, int] = {}
    top = 0
    for resource_id, layout in layouts.items():
        offsets[resource_id] = top
        top += layout.total_height or base_row_height
    return offsets


__all__ = [
    "DEFAULT_ROW_HEIGHT",
    "ROW_PADDING",
    "BAR_INSET",
    "bar_height",
    "row_height",
    "assign_rows",
    "calculate_max_rows",
    "layout_for_resource",
    "stack_resource_rows",
]

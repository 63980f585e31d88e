from .cache import DEFAULT_MAX_ENTRIES, ResourceLayoutCache, conflicts_key, layout_key
from .models import RowAssignment
from .packing import (
    DEFAULT_ROW_HEIGHT,
    assign_rows,
    bar_height,
    calculate_max_rows,
    layout_for_resource,
    row_height,
    stack_resource_rows,
)

__all__ = [
    "DEFAULT_MAX_ENTRIES",
    "DEFAULT_ROW_HEIGHT",
    "ResourceLayoutCache",
    "RowAssignment",
    "assign_rows",
    "bar_height",
    "calculate_max_rows",
    "conflicts_key",
    "layout_for_resource",
    "layout_key",
    "row_height",
    "stack_resource_rows",
]

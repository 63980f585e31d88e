"""Reporting API wrappers around renderer classes."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from loadgrid.domain import Resource, ResourceId
from loadgrid.exceptions import NotFoundError, ValidationError
from loadgrid.reporting.contexts import ConflictReportContext
from loadgrid.reporting.renderers.excel import ConflictReportExcelRenderer
from loadgrid.services.conflicts.discovery import DEFAULT_TREE_THRESHOLD
from loadgrid.services.conflicts.service import detect_conflicts
from loadgrid.services.layout.packing import DEFAULT_ROW_HEIGHT, assign_rows
from loadgrid.services.timeline.instants import item_bounds

logger = logging.getLogger(__name__)


def _ensure_parent(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def find_resource(resources: Iterable[Resource], resource_id: ResourceId) -> Resource:
    wanted = str(resource_id)
    for resource in resources:
        if str(resource.id) == wanted:
            return resource
    raise NotFoundError("Resource not found.", code="RESOURCE_NOT_FOUND")


def build_conflict_report_context(
    resource: Resource,
    *,
    base_row_height: int = DEFAULT_ROW_HEIGHT,
    tree_threshold: int = DEFAULT_TREE_THRESHOLD,
) -> ConflictReportContext:
    items = list(resource.items)
    if not any(item_bounds(item) is not None for item in items):
        raise ValidationError(
            "No work items with dates available for the conflict report.",
            code="REPORT_EMPTY",
        )
    return ConflictReportContext(
        resource_id=resource.id,
        resource_name=resource.name,
        items=items,
        zones=detect_conflicts(items, resource.id, tree_threshold=tree_threshold),
        layout=assign_rows(items, base_row_height),
    )


def export_conflict_report(
    resources: Iterable[Resource],
    resource_id: ResourceId,
    output_path: str | Path,
    *,
    base_row_height: int = DEFAULT_ROW_HEIGHT,
    tree_threshold: int = DEFAULT_TREE_THRESHOLD,
) -> Path:
    resource = find_resource(resources, resource_id)
    ctx = build_conflict_report_context(
        resource,
        base_row_height=base_row_height,
        tree_threshold=tree_threshold,
    )
    path = ConflictReportExcelRenderer().render(ctx, _ensure_parent(Path(output_path)))
    logger.info("Exported conflict report for resource %s to %s", resource.id, path)
    return path


__all__ = ["find_resource", "build_conflict_report_context", "export_conflict_report"]

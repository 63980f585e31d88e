from __future__ import annotations

import logging
from typing import Iterable, Optional

from loadgrid.domain import DiscoveryMode, ItemId, Resource, ResourceId, WorkItem
from loadgrid.exceptions import ValidationError
from loadgrid.services.conflicts.builder import build_zones
from loadgrid.services.conflicts.discovery import (
    DEFAULT_TREE_THRESHOLD,
    discover_clusters,
    qualifying_members,
    select_discovery_mode,
)
from loadgrid.services.conflicts.merge import merge_conflict_zones
from loadgrid.services.conflicts.models import ConflictZone

logger = logging.getLogger(__name__)


def _validate_threshold(tree_threshold: int) -> None:
    if tree_threshold < 1:
        raise ValidationError(
            "tree_threshold must be at least 1.",
            code="CONFLICT_INVALID_THRESHOLD",
        )


def detect_conflicts(
    items: Iterable[WorkItem],
    resource_id: ResourceId,
    *,
    tree_threshold: int = DEFAULT_TREE_THRESHOLD,
    mode: Optional[DiscoveryMode] = None,
) -> list[ConflictZone]:
    """
    Over-capacity zones of ``resource_id`` across ``items``, merged and
    sorted by start.

    Overlap discovery switches from all-pairs search to the interval tree once
    more than ``tree_threshold`` items qualify; ``mode`` forces either one.
    Both produce the same zones.
    """
    _validate_threshold(tree_threshold)

    members = qualifying_members(items, resource_id)
    if len(members) < 2:
        return []

    chosen = mode or select_discovery_mode(len(members), tree_threshold)
    candidates = build_zones(discover_clusters(members, chosen))
    zones = merge_conflict_zones(candidates)
    logger.debug(
        "Resource %s: %d item(s), %s discovery, %d candidate zone(s), %d merged",
        resource_id,
        len(members),
        chosen.value,
        len(candidates),
        len(zones),
    )
    return zones


def detect_all_conflicts(
    resources: Iterable[Resource],
    *,
    tree_threshold: int = DEFAULT_TREE_THRESHOLD,
) -> dict[ResourceId, list[ConflictZone]]:
    """Zones per resource, leaving out resources without any conflict."""
    _validate_threshold(tree_threshold)
    conflicts: dict[ResourceId, list[ConflictZone]] = {}
    for resource in resources:
        zones = detect_conflicts(resource.items, resource.id, tree_threshold=tree_threshold)
        if zones:
            conflicts[resource.id] = zones
    return conflicts


def conflicting_item_ids(
    items: Iterable[WorkItem],
    resource_id: ResourceId,
    *,
    tree_threshold: int = DEFAULT_TREE_THRESHOLD,
) -> set[ItemId]:
    zones = detect_conflicts(items, resource_id, tree_threshold=tree_threshold)
    return {task.id for zone in zones for task in zone.tasks}


__all__ = ["detect_conflicts", "detect_all_conflicts", "conflicting_item_ids"]

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Iterator, Sequence

from loadgrid.domain import DiscoveryMode, ResourceId, WorkItem
from loadgrid.services.conflicts.allocation import belongs_to_resource, effective_capacity
from loadgrid.services.conflicts.interval_tree import IntervalTree
from loadgrid.services.conflicts.models import ClusterMember
from loadgrid.services.timeline.instants import intersect_bounds, item_bounds

Window = tuple[datetime, datetime]
Cluster = tuple[Window, list[ClusterMember]]

DEFAULT_TREE_THRESHOLD = 100


def qualifying_members(items: Iterable[WorkItem], resource_id: ResourceId) -> list[ClusterMember]:
    members: list[ClusterMember] = []
    for item in items:
        if not belongs_to_resource(item, resource_id):
            continue
        bounds = item_bounds(item)
        if bounds is None:
            continue
        members.append(
            ClusterMember(
                index=len(members),
                item=item,
                start=bounds[0],
                end=bounds[1],
                capacity=effective_capacity(item, resource_id),
            )
        )
    return members


def select_discovery_mode(member_count: int, tree_threshold: int = DEFAULT_TREE_THRESHOLD) -> DiscoveryMode:
    if member_count > tree_threshold:
        return DiscoveryMode.INTERVAL_TREE
    return DiscoveryMode.BRUTE_FORCE


def discover_brute_force(members: Sequence[ClusterMember]) -> Iterator[Cluster]:
    """
    Every pairwise intersection becomes a window, paired with all members
    overlapping that window. Windows already handed out are not repeated.
    """
    seen_windows: set[Window] = set()
    for i, first in enumerate(members):
        for second in members[i + 1:]:
            intersection = intersect_bounds(first.bounds, second.bounds)
            if intersection is None:
                continue
            window = (intersection.start, intersection.end_exclusive)
            if window in seen_windows:
                continue
            seen_windows.add(window)
            cluster = [m for m in members if intersect_bounds(m.bounds, window) is not None]
            yield window, cluster


def discover_with_interval_tree(members: Sequence[ClusterMember]) -> Iterator[Cluster]:
    """Each member's own interval becomes a window, paired with the tree's overlap hits."""
    tree = IntervalTree.build(members)
    for member in members:
        cluster = tree.query(member.start, member.end)
        if len(cluster) < 2:
            continue
        cluster.sort(key=lambda m: m.index)
        yield member.bounds, cluster


def discover_clusters(members: Sequence[ClusterMember], mode: DiscoveryMode) -> Iterator[Cluster]:
    if mode is DiscoveryMode.INTERVAL_TREE:
        return discover_with_interval_tree(members)
    return discover_brute_force(members)


__all__ = [
    "Cluster",
    "Window",
    "DEFAULT_TREE_THRESHOLD",
    "qualifying_members",
    "select_discovery_mode",
    "discover_brute_force",
    "discover_with_interval_tree",
    "discover_clusters",
]

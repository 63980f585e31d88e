from __future__ import annotations

from typing import Optional

from loadgrid.domain import ResourceAllocation, ResourceId, WorkItem

DEFAULT_CAPACITY = 100


def find_allocation(item: WorkItem, resource_id: ResourceId) -> Optional[ResourceAllocation]:
    # Identifiers arrive as ints from some producers and strings from others.
    wanted = str(resource_id)
    for allocation in item.resources or ():
        if str(allocation.id) == wanted:
            return allocation
    return None


def belongs_to_resource(item: WorkItem, resource_id: ResourceId) -> bool:
    if not item.resources:
        return True
    return find_allocation(item, resource_id) is not None


def effective_capacity(item: WorkItem, resource_id: ResourceId) -> int:
    """
    Percent of the resource the item consumes.

    An item without any allocation list takes the whole resource. An item
    whose list does not mention the resource takes nothing.
    """
    if not item.resources:
        return DEFAULT_CAPACITY
    allocation = find_allocation(item, resource_id)
    if allocation is None:
        return 0
    if allocation.capacity is None:
        return DEFAULT_CAPACITY
    return allocation.capacity


__all__ = ["DEFAULT_CAPACITY", "find_allocation", "belongs_to_resource", "effective_capacity"]

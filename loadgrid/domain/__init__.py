from loadgrid.domain.enums import ConflictLevel, DiscoveryMode
from loadgrid.domain.identifiers import generate_id
from loadgrid.domain.resource import Resource
from loadgrid.domain.work_item import (
    DateLike,
    ItemId,
    ResourceAllocation,
    ResourceId,
    WorkItem,
)

__all__ = [
    "generate_id",
    "ConflictLevel",
    "DiscoveryMode",
    "DateLike",
    "ItemId",
    "ResourceId",
    "ResourceAllocation",
    "WorkItem",
    "Resource",
]

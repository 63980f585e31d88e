from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, Optional, Union

from loadgrid.domain.identifiers import generate_id

ItemId = Union[int, str]
ResourceId = Union[int, str]
DateLike = Union[str, date, datetime]


@dataclass(frozen=True)
class ResourceAllocation:
    id: ResourceId
    capacity: Optional[int] = None


@dataclass(frozen=True)
class WorkItem:
    id: ItemId
    name: str = ""
    start_date: Optional[DateLike] = None
    end_date: Optional[DateLike] = None
    resources: Optional[tuple[ResourceAllocation, ...]] = None

    def __post_init__(self) -> None:
        # Callers often hand over lists; keep the item hashable.
        if self.resources is not None and not isinstance(self.resources, tuple):
            object.__setattr__(self, "resources", tuple(self.resources))

    @property
    def has_allocations(self) -> bool:
        return bool(self.resources)

    @staticmethod
    def create(
        name: str,
        start_date: Optional[DateLike] = None,
        end_date: Optional[DateLike] = None,
        resources: Optional[Iterable[ResourceAllocation]] = None,
    ) -> "WorkItem":
        return WorkItem(
            id=generate_id(),
            name=name,
            start_date=start_date,
            end_date=end_date,
            resources=tuple(resources) if resources is not None else None,
        )


__all__ = ["DateLike", "ItemId", "ResourceAllocation", "ResourceId", "WorkItem"]

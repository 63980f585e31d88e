from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from loadgrid.domain.identifiers import generate_id
from loadgrid.domain.work_item import ResourceId, WorkItem


@dataclass(frozen=True)
class Resource:
    id: ResourceId
    name: str
    items: tuple[WorkItem, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    @staticmethod
    def create(name: str, items: Iterable[WorkItem] = ()) -> "Resource":
        return Resource(id=generate_id(), name=name, items=tuple(items))


__all__ = ["Resource"]

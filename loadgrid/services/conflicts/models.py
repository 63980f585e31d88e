from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from loadgrid.domain import ConflictLevel, ItemId, WorkItem


@dataclass(frozen=True)
class ClusterMember:
    index: int
    item: WorkItem
    start: datetime
    end: datetime  # exclusive, i.e. inclusive end date + 1 day
    capacity: int

    @property
    def bounds(self) -> tuple[datetime, datetime]:
        return self.start, self.end


@dataclass(frozen=True)
class OverloadRange:
    start: datetime
    end: datetime  # inclusive
    peak_percent: int
    members: tuple[ClusterMember, ...]


@dataclass(frozen=True)
class ZoneTask:
    id: ItemId
    name: str
    capacity: int


@dataclass(frozen=True)
class ConflictZone:
    start_date: datetime
    end_date: datetime
    total_percent: int
    level: ConflictLevel
    tasks: tuple[ZoneTask, ...]

    @property
    def task_ids(self) -> list[ItemId]:
        return [task.id for task in self.tasks]

    def to_dict(self) -> dict[str, Any]:
        return {
            "startDate": self.start_date.isoformat(),
            "endDate": self.end_date.isoformat(),
            "totalPercent": self.total_percent,
            "level": self.level.value,
            "tasks": [
                {"id": task.id, "name": task.name, "capacity": task.capacity}
                for task in self.tasks
            ],
        }


__all__ = ["ClusterMember", "OverloadRange", "ZoneTask", "ConflictZone"]

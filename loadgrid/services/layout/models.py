from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from loadgrid.domain import ItemId


@dataclass(frozen=True)
class RowAssignment:
    row_of: dict[ItemId, int] = field(default_factory=dict)
    row_heights: list[int] = field(default_factory=list)
    total_height: int = 0

    @property
    def row_count(self) -> int:
        return len(self.row_heights)

    def rows(self) -> list[list[ItemId]]:
        grouped: list[list[ItemId]] = [[] for _ in range(self.row_count)]
        for item_id, row in self.row_of.items():
            grouped[row].append(item_id)
        return grouped

    def row_top(self, row: int) -> int:
        return sum(self.row_heights[:row])

    def copy(self) -> "RowAssignment":
        return RowAssignment(
            row_of=dict(self.row_of),
            row_heights=list(self.row_heights),
            total_height=self.total_height,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "rowOf": dict(self.row_of),
            "rowHeights": list(self.row_heights),
            "totalHeight": self.total_height,
        }


__all__ = ["RowAssignment"]

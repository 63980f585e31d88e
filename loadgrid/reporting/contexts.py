from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from loadgrid.domain import ResourceId, WorkItem
from loadgrid.services.conflicts.models import ConflictZone
from loadgrid.services.layout.models import RowAssignment


@dataclass
class ConflictReportContext:
    resource_id: ResourceId
    resource_name: str
    items: list[WorkItem]
    zones: list[ConflictZone]
    layout: Optional[RowAssignment] = None
    as_of: date = field(default_factory=date.today)

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from infra.settings import EngineSettings, load_engine_settings
from loadgrid.domain import Resource, ResourceId
from loadgrid.services.conflicts.models import ConflictZone
from loadgrid.services.layout import ResourceLayoutCache, RowAssignment, stack_resource_rows


@dataclass(frozen=True)
class EngineServices:
    settings: EngineSettings
    layout_cache: ResourceLayoutCache

    def conflicts_for(self, resource: Resource) -> list[ConflictZone]:
        return self.layout_cache.conflicts_for(
            resource.id,
            resource.items,
            tree_threshold=self.settings.tree_threshold,
        )

    def layout_for(self, resource: Resource) -> RowAssignment:
        return self.layout_cache.layout_for(
            resource.id,
            resource.items,
            base_row_height=self.settings.base_row_height,
        )

    def resource_offsets(self, resources: Iterable[Resource]) -> dict[ResourceId, int]:
        layouts = {resource.id: self.layout_for(resource) for resource in resources}
        return stack_resource_rows(layouts, base_row_height=self.settings.base_row_height)


def build_services(settings: EngineSettings | None = None) -> EngineServices:
    resolved = settings or load_engine_settings()
    return EngineServices(
        settings=resolved,
        layout_cache=ResourceLayoutCache(max_entries=resolved.cache_max_entries),
    )


__all__ = ["EngineServices", "build_services"]

from __future__ import annotations

import hashlib
import logging
from collections import OrderedDict
from threading import RLock
from typing import Callable, Optional, Sequence, TypeVar

from loadgrid.domain import ResourceId, WorkItem
from loadgrid.events.signal import Signal
from loadgrid.exceptions import ValidationError
from loadgrid.services.conflicts.discovery import DEFAULT_TREE_THRESHOLD
from loadgrid.services.conflicts.models import ConflictZone
from loadgrid.services.conflicts.service import detect_conflicts
from loadgrid.services.layout.models import RowAssignment
from loadgrid.services.layout.packing import DEFAULT_ROW_HEIGHT, assign_rows

logger = logging.getLogger(__name__)

T = TypeVar("T")
CacheKey = tuple[str, str, int, str, int]

DEFAULT_MAX_ENTRIES = 100


def _digest(parts: Sequence[str]) -> str:
    return hashlib.sha1("|".join(parts).encode("utf-8")).hexdigest()


def _timing_part(item: WorkItem) -> str:
    return f"{item.id}-{item.start_date or ''}-{item.end_date or ''}"


def _allocation_part(item: WorkItem) -> str:
    if not item.resources:
        return "*"
    return ",".join(f"{a.id}:{a.capacity}" for a in item.resources)


def layout_key(resource_id: ResourceId, items: Sequence[WorkItem], base_row_height: int) -> CacheKey:
    parts = [_timing_part(item) for item in items]
    return ("layout", str(resource_id), len(items), _digest(parts), base_row_height)


def conflicts_key(resource_id: ResourceId, items: Sequence[WorkItem], tree_threshold: int) -> CacheKey:
    # Names and capacities change zones but not rows, so they only enter this key.
    parts = [f"{_timing_part(item)}-{item.name}-{_allocation_part(item)}" for item in items]
    return ("conflicts", str(resource_id), len(items), _digest(parts), tree_threshold)


class ResourceLayoutCache:
    """
    Caller-owned memo for packing and conflict results.

    Entries are keyed on the content of the item list, so a changed date,
    identifier, item count or (for zones) name misses on its own. Layout
    hits hand out a fresh copy of the stored result. ``invalidate`` is for
    callers that mutate items behind the engine's back. The least recently used
    entry is evicted once ``max_entries`` is exceeded. Safe to share between
    threads.
    """

    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES) -> None:
        if max_entries < 1:
            raise ValidationError(
                "max_entries must be at least 1.",
                code="LAYOUT_CACHE_INVALID_SIZE",
            )
        self._max_entries = max_entries
        self._entries: OrderedDict[CacheKey, object] = OrderedDict()
        self._lock = RLock()
        self.hits = 0
        self.misses = 0
        # payload: the invalidated resource id, None when everything was dropped
        self.invalidated: Signal[Optional[ResourceId]] = Signal()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    @property
    def max_entries(self) -> int:
        return self._max_entries

    def get_or_compute(self, key: CacheKey, compute: Callable[[], T]) -> T:
        with self._lock:
            if key in self._entries:
                self._entries.move_to_end(key)
                self.hits += 1
                return self._entries[key]  # type: ignore[return-value]
            self.misses += 1

        value = compute()

        with self._lock:
            self._entries[key] = value
            self._entries.move_to_end(key)
            while len(self._entries) > self._max_entries:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("Evicted %s cache entry for resource %s", evicted[0], evicted[1])
        return value

    def layout_for(
        self,
        resource_id: ResourceId,
        items: Sequence[WorkItem],
        base_row_height: int = DEFAULT_ROW_HEIGHT,
    ) -> RowAssignment:
        items = list(items)
        key = layout_key(resource_id, items, base_row_height)
        # stored layout stays private; callers get their own copy
        return self.get_or_compute(key, lambda: assign_rows(items, base_row_height)).copy()

    def conflicts_for(
        self,
        resource_id: ResourceId,
        items: Sequence[WorkItem],
        tree_threshold: int = DEFAULT_TREE_THRESHOLD,
    ) -> list[ConflictZone]:
        items = list(items)
        key = conflicts_key(resource_id, items, tree_threshold)
        zones = self.get_or_compute(
            key,
            lambda: tuple(detect_conflicts(items, resource_id, tree_threshold=tree_threshold)),
        )
        return list(zones)

    def invalidate(self, resource_id: Optional[ResourceId] = None) -> int:
        """Drop the entries of one resource, or all of them when no id is given."""
        if resource_id is None:
            return self.clear()
        wanted = str(resource_id)
        with self._lock:
            stale = [key for key in self._entries if key[1] == wanted]
            for key in stale:
                del self._entries[key]
        logger.debug("Invalidated %d cache entr(ies) for resource %s", len(stale), resource_id)
        self.invalidated.emit(resource_id)
        return len(stale)

    def clear(self) -> int:
        with self._lock:
            dropped = len(self._entries)
            self._entries.clear()
        self.invalidated.emit(None)
        return dropped


__all__ = [
    "DEFAULT_MAX_ENTRIES",
    "CacheKey",
    "ResourceLayoutCache",
    "conflicts_key",
    "layout_key",
]

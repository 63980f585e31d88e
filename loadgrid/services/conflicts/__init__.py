from .allocation import DEFAULT_CAPACITY, belongs_to_resource, effective_capacity, find_allocation
from .discovery import DEFAULT_TREE_THRESHOLD, select_discovery_mode
from .interval_tree import IntervalTree
from .merge import merge_conflict_zones
from .models import ClusterMember, ConflictZone, OverloadRange, ZoneTask
from .service import conflicting_item_ids, detect_all_conflicts, detect_conflicts
from .sweep import compute_overload_ranges, conflict_level

__all__ = [
    "DEFAULT_CAPACITY",
    "DEFAULT_TREE_THRESHOLD",
    "ClusterMember",
    "ConflictZone",
    "IntervalTree",
    "OverloadRange",
    "ZoneTask",
    "belongs_to_resource",
    "compute_overload_ranges",
    "conflict_level",
    "conflicting_item_ids",
    "detect_all_conflicts",
    "detect_conflicts",
    "effective_capacity",
    "find_allocation",
    "merge_conflict_zones",
    "select_discovery_mode",
]

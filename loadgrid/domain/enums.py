from __future__ import annotations

from enum import Enum


class ConflictLevel(str, Enum):
    LIGHT = "light"
    MEDIUM = "medium"
    SEVERE = "severe"


class DiscoveryMode(str, Enum):
    BRUTE_FORCE = "brute_force"
    INTERVAL_TREE = "interval_tree"


__all__ = ["ConflictLevel", "DiscoveryMode"]

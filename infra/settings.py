# infra/settings.py
from __future__ import annotations

import os
from dataclasses import dataclass

from loadgrid.exceptions import ValidationError
from loadgrid.services.conflicts.discovery import DEFAULT_TREE_THRESHOLD
from loadgrid.services.layout.cache import DEFAULT_MAX_ENTRIES
from loadgrid.services.layout.packing import BAR_INSET, DEFAULT_ROW_HEIGHT


@dataclass(frozen=True)
class EngineSettings:
    tree_threshold: int = DEFAULT_TREE_THRESHOLD
    base_row_height: int = DEFAULT_ROW_HEIGHT
    cache_max_entries: int = DEFAULT_MAX_ENTRIES


def _env_int(name: str, default: int, minimum: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValidationError(
            f"{name} must be an integer, got {raw!r}.",
            code="SETTINGS_INVALID_VALUE",
        ) from None
    if value < minimum:
        raise ValidationError(
            f"{name} must be at least {minimum}, got {value}.",
            code="SETTINGS_INVALID_VALUE",
        )
    return value


def load_engine_settings() -> EngineSettings:
    return EngineSettings(
        tree_threshold=_env_int("LOADGRID_TREE_THRESHOLD", DEFAULT_TREE_THRESHOLD, 1),
        base_row_height=_env_int("LOADGRID_BASE_ROW_HEIGHT", DEFAULT_ROW_HEIGHT, BAR_INSET + 1),
        cache_max_entries=_env_int("LOADGRID_CACHE_MAX_ENTRIES", DEFAULT_MAX_ENTRIES, 1),
    )


__all__ = ["EngineSettings", "load_engine_settings"]

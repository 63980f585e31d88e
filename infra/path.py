# infra/path.py
from __future__ import annotations
import os
import sys
from pathlib import Path

APP_NAME = "loadgrid"


def user_data_dir() -> Path:
    """
    Per-user data directory, e.g.:

    Windows:
        C:\\Users\\<User>\\AppData\\Roaming\\loadgrid

    macOS:
        ~/Library/Application Support/loadgrid

    Linux:
        ~/.local/share/loadgrid

    ``LOADGRID_DATA_DIR`` overrides the platform default.
    """
    override = (os.getenv("LOADGRID_DATA_DIR") or "").strip()
    try:
        if override:
            path = Path(override)
        else:
            if sys.platform.startswith("win"):
                base = Path(os.getenv("APPDATA", Path.home() / "AppData" / "Roaming"))
            elif sys.platform == "darwin":
                base = Path.home() / "Library" / "Application Support"
            else:
                base = Path(os.getenv("XDG_DATA_HOME", Path.home() / ".local" / "share"))
            path = base / APP_NAME
        path.mkdir(parents=True, exist_ok=True)
        return path
    except OSError:
        # Last-resort fallback: use home directory
        fallback = Path.home() / f".{APP_NAME}"
        fallback.mkdir(parents=True, exist_ok=True)
        return fallback


def default_log_dir() -> Path:
    return user_data_dir() / "logs"

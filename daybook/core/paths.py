#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants and configuration for the Daybook project.

All locations hang off a single home directory:

    DAYBOOK_HOME/
    ├── journal/       # One Markdown file per day
    └── logs/          # Application logs
        └── operations/

DAYBOOK_HOME defaults to ``~/daybook`` and can be moved with the
``DAYBOOK_HOME`` environment variable. ``DAYBOOK_JOURNAL_DIR`` points the
journal somewhere else entirely (e.g. a synced folder). Paths are resolved
at import time; nothing is created until a command needs it.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
from pathlib import Path


def _env_path(name: str, default: Path) -> Path:
    """Read a path from the environment, expanding ``~``."""
    value = os.environ.get(name)
    if not value:
        return default
    return Path(value).expanduser()


# ----- Home -----
DAYBOOK_HOME: Path = _env_path("DAYBOOK_HOME", Path.home() / "daybook")

# ---- Journal ----
JOURNAL_DIR: Path = _env_path("DAYBOOK_JOURNAL_DIR", DAYBOOK_HOME / "journal")

# ---- Logs ----
LOG_DIR: Path = DAYBOOK_HOME / "logs"

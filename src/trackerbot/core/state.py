# src/trackerbot/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Settings object (config.Settings in the app, SimpleNamespace in tests).
    settings: Any
    store: TaskStore
    tasks: TaskList = field(default_factory=TaskList)

    # Mutations since the last successful save; the shutdown save is skipped when False.
    dirty: bool = False

    # Set when the save file could not be loaded and was left in place:
    # saving would overwrite data we never read.
    save_blocked: bool = False

    # Where an unreadable save file was moved at startup.
    quarantined_to: Path | None = None

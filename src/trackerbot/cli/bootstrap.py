# src/trackerbot/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires the TaskStore and an empty TaskList into AppState,
- applies the load/save error policy.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..errors import CorruptSaveFileError, StorageReadError, StorageWriteError
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    return AppState(settings=settings, store=TaskStore(settings.save_path))


def load_tasks(state: AppState) -> CorruptSaveFileError | StorageReadError | None:
    """
    Fill state.tasks from the save file.

    On a corrupt file the whole load is abandoned: the session starts with
    an empty list and the file is moved aside (state.quarantined_to).
    If the file cannot be moved, or cannot be read at all, it stays where
    it is and saving is blocked for the session (state.save_blocked).
    Returns the error so the caller can show it.
    """
    try:
        loaded = state.store.load()
    except CorruptSaveFileError as e:
        logger.error("Failed to load tasks: %s", e)
        state.tasks = TaskList()
        state.quarantined_to = state.store.quarantine()
        if state.quarantined_to is None:
            state.save_blocked = True
        return e
    except StorageReadError as e:
        logger.error("Failed to read tasks: %s", e)
        state.tasks = TaskList()
        state.save_blocked = True
        return e

    state.tasks = TaskList.from_tasks(loaded)
    state.dirty = False
    return None


def save_tasks(state: AppState) -> StorageWriteError | None:
    """Write state.tasks out; on failure the in-memory list stays authoritative."""
    if state.save_blocked:
        logger.warning("Save skipped: %s was not loaded and is kept as is.", state.store.path)
        return StorageWriteError(
            f"Saving is disabled this session to avoid overwriting {state.store.path}."
        )
    try:
        state.store.save(state.tasks)
    except StorageWriteError as e:
        logger.error("Failed to save tasks: %s", e)
        return e
    state.dirty = False
    return None

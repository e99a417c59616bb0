# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from trackerbot.core.state import AppState
from trackerbot.tasks.task_list import TaskList
from trackerbot.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the console loop.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    data_dir = tmp_path / "trackerbot"
    return SimpleNamespace(
        app_name="TrackerBot",
        log_level="WARNING",
        log_to_file=False,
        data_dir=data_dir,
        save_path=data_dir / "data.txt",
        autosave=False,
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.save_path)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    return AppState(settings=settings, store=store, tasks=TaskList())

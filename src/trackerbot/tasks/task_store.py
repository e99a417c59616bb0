# src/trackerbot/tasks/task_store.py

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from ..errors import (
    CorruptDateError,
    CorruptSaveFileError,
    MalformedSaveRecordError,
    StorageReadError,
    StorageWriteError,
)
from .task_models import Task, deserialize, serialize

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Plain-text task store.

    File format: one task per line, pipe-delimited
    (see task_models.serialize). Blank lines are ignored on load.

    Load policy: a single bad record fails the whole load with
    CorruptSaveFileError; nothing is skipped silently.
    """

    def __init__(self, path: str | Path = "data.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Task]:
        if not self._path.exists():
            logger.info("No save file at %s, starting empty.", self._path)
            return []

        try:
            text = self._path.read_text("utf-8")
        except UnicodeDecodeError as e:
            raise CorruptSaveFileError(str(self._path), 0, str(e)) from e
        except OSError as e:
            raise StorageReadError(f"Could not read tasks from {self._path}: {e}") from e

        tasks: list[Task] = []
        for line_no, raw in enumerate(text.split("\n"), start=1):
            line = raw.rstrip("\r")
            if not line.strip():
                continue
            try:
                tasks.append(deserialize(line))
            except (MalformedSaveRecordError, CorruptDateError) as e:
                raise CorruptSaveFileError(str(self._path), line_no, str(e)) from e

        logger.info("Loaded %d task(s) from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        body = "".join(serialize(t) + "\n" for t in tasks)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(body, "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            raise StorageWriteError(f"Could not save tasks to {self._path}: {e}") from e
        logger.info("Saved %d task(s) to %s", body.count("\n"), self._path)

    def quarantine(self) -> Path | None:
        """
        Move an unreadable save file aside so the next save keeps it intact.

        Targets <name>.corrupt, then <name>.corrupt.1, .2, ... so earlier
        backups are never replaced. Returns None if nothing was moved.
        """
        if not self._path.exists():
            return None
        base = self._path.name + ".corrupt"
        target = self._path.with_name(base)
        n = 0
        while target.exists():
            n += 1
            target = self._path.with_name(f"{base}.{n}")
        try:
            os.replace(self._path, target)
        except OSError:
            logger.exception("Failed to move corrupt save file %s aside", self._path)
            return None
        logger.warning("Moved corrupt save file to %s", target)
        return target

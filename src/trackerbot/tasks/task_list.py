# src/trackerbot/tasks/task_list.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from ..errors import IndexOutOfRangeError
from .task_models import Task, mark_done, mark_undone, matches, render

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Added:
    task_text: str
    count: int


@dataclass(frozen=True, slots=True)
class Toggled:
    done: bool
    task_text: str


@dataclass(frozen=True, slots=True)
class Deleted:
    task_text: str
    remaining: int


class TaskList:
    """
    Ordered task collection for the session.

    All external indices are 1-based. Tasks are immutable values, so
    handing them out through find_all/list_all never aliases list state.
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []

    @classmethod
    def from_tasks(cls, tasks: Iterable[Task]) -> TaskList:
        out = cls()
        out._tasks.extend(tasks)
        return out

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    def _check_index(self, index: int) -> int:
        if index < 1 or index > len(self._tasks):
            raise IndexOutOfRangeError(index, len(self._tasks))
        return index - 1

    def get(self, index: int) -> Task:
        return self._tasks[self._check_index(index)]

    def add(self, task: Task) -> Added:
        self._tasks.append(task)
        logger.debug("Added task #%d: %r", len(self._tasks), task)
        return Added(task_text=render(task), count=len(self._tasks))

    def mark_task(self, index: int) -> Toggled:
        pos = self._check_index(index)
        self._tasks[pos] = mark_done(self._tasks[pos])
        return Toggled(done=True, task_text=render(self._tasks[pos]))

    def unmark_task(self, index: int) -> Toggled:
        pos = self._check_index(index)
        self._tasks[pos] = mark_undone(self._tasks[pos])
        return Toggled(done=False, task_text=render(self._tasks[pos]))

    def delete(self, index: int) -> Deleted:
        pos = self._check_index(index)
        removed = self._tasks.pop(pos)
        logger.debug("Deleted task #%d: %r", index, removed)
        return Deleted(task_text=render(removed), remaining=len(self._tasks))

    def find_all(self, substring: str) -> Iterator[tuple[int, Task]]:
        for i, task in enumerate(self._tasks, start=1):
            if matches(task, substring):
                yield i, task

    def list_all(self) -> list[tuple[int, Task]]:
        return list(enumerate(self._tasks, start=1))

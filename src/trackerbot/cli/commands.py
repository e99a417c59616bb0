# src/trackerbot/cli/commands.py

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from ..errors import (
    InvalidIndexError,
    TooManyArgumentsError,
    TrackerError,
    UnrecognizedCommandError,
)
from ..tasks.task_list import Added, Deleted, TaskList, Toggled
from ..tasks.task_models import Task
from .command_models import (
    AddCommand,
    Command,
    DeleteCommand,
    ExitCommand,
    FindCommand,
    ListCommand,
    ToggleCommand,
    UnknownCommand,
)
from .parser import parse_task_from_text

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"[+-]?\d+")


@dataclass(frozen=True, slots=True)
class Found:
    query: str
    matches: list[tuple[int, Task]]


@dataclass(frozen=True, slots=True)
class Listed:
    entries: list[tuple[int, Task]]


@dataclass(frozen=True, slots=True)
class Exited:
    pass


Outcome = Added | Toggled | Deleted | Found | Listed | Exited


@dataclass(frozen=True, slots=True)
class CommandResult:
    command: Command
    outcome: Outcome | None = None
    error: TrackerError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def mutated(self) -> bool:
        return isinstance(self.outcome, Added | Toggled | Deleted)


def parse_index(raw: str, usage: str) -> int:
    """Accept exactly one integer token, e.g. "3"."""
    tokens = raw.split()
    if not tokens or not _INT_RE.fullmatch(tokens[0]):
        raise InvalidIndexError(f"Invalid format: {usage} [number in list range]")
    if len(tokens) > 1:
        raise TooManyArgumentsError(f"Too many fields: {usage} [number in list range]")
    return int(tokens[0])


def _run(tasks: TaskList, command: Command) -> Outcome:
    match command:
        case AddCommand(kind=kind, text=text):
            return tasks.add(parse_task_from_text(kind, text))
        case ToggleCommand(mark=True, raw_index=raw):
            return tasks.mark_task(parse_index(raw, "mark/unmark"))
        case ToggleCommand(mark=False, raw_index=raw):
            return tasks.unmark_task(parse_index(raw, "mark/unmark"))
        case DeleteCommand(raw_index=raw):
            return tasks.delete(parse_index(raw, "delete"))
        case FindCommand(query=query):
            # Empty query: every description contains "", so all tasks match.
            return Found(query=query, matches=list(tasks.find_all(query)))
        case ListCommand():
            return Listed(entries=tasks.list_all())
        case ExitCommand():
            return Exited()
        case UnknownCommand(keyword=keyword):
            raise UnrecognizedCommandError(keyword)
    raise TypeError(f"Unhandled command: {command!r}")


def execute_command(tasks: TaskList, command: Command) -> CommandResult:
    """
    Run one command against the task list.

    Expected failures come back as CommandResult.error; the list is only
    changed when the command succeeds.
    """
    try:
        outcome = _run(tasks, command)
    except TrackerError as e:
        logger.debug("Command %r failed (%s): %s", command, e.kind, e)
        return CommandResult(command=command, error=e)
    logger.debug("Command %r -> %r", command, outcome)
    return CommandResult(command=command, outcome=outcome)

# src/trackerbot/cli/parser.py

"""
Input parsing.

A raw console line is split into a keyword and the remainder, the keyword
is looked up in the fixed keyword table, and "add" style commands get their
free text turned into a concrete task.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from ..errors import DeadlineFormatError, EmptyDescriptionError, EventFormatError
from ..tasks.task_models import Deadline, Event, Task, TaskKind, Todo, check_description
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

DEADLINE_USAGE = "deadline [description] /by [end-date]"
EVENT_USAGE = "event [description] /from [start-date] /to [end-date]"

# Markers only count as standalone tokens ("a/by" is plain text).
_BY_RE = re.compile(r"(?<!\S)/by(?!\S)")
_EVENT_RE = re.compile(r"(?<!\S)(/from|/to)(?!\S)")

KEYWORDS: dict[str, Callable[[str], Command]] = {
    "todo": lambda rest: AddCommand(TaskKind.TODO, rest),
    "deadline": lambda rest: AddCommand(TaskKind.DEADLINE, rest),
    "event": lambda rest: AddCommand(TaskKind.EVENT, rest),
    "mark": lambda rest: ToggleCommand(True, rest),
    "unmark": lambda rest: ToggleCommand(False, rest),
    "delete": DeleteCommand,
    "find": FindCommand,
    "list": lambda rest: ListCommand(),
    "bye": lambda rest: ExitCommand(),
}


def parse_command_line(line: str) -> tuple[str, str]:
    parts = line.strip().split(maxsplit=1)
    if not parts:
        return "", ""
    keyword = parts[0]
    remainder = parts[1].strip() if len(parts) > 1 else ""
    return keyword, remainder


def resolve_command(keyword: str, remainder: str) -> Command:
    factory = KEYWORDS.get(keyword)
    if factory is None:
        return UnknownCommand(keyword)
    return factory(remainder)


def parse_command(line: str) -> Command:
    return resolve_command(*parse_command_line(line))


def parse_task_from_text(kind: TaskKind, text: str) -> Task:
    """
    Build a task from the free text of todo/deadline/event.

    Marker checks run before the description check, so
    "deadline /by 2024-01-01" is an EmptyDescriptionError while
    "deadline report" is a DeadlineFormatError.
    """
    match kind:
        case TaskKind.TODO:
            return Todo(check_description(text.strip()))
        case TaskKind.DEADLINE:
            return _parse_deadline(text)
        case TaskKind.EVENT:
            return _parse_event(text)
    raise ValueError(f"Unknown task kind: {kind!r}")


def _parse_deadline(text: str) -> Deadline:
    segments = _BY_RE.split(text)
    if len(segments) < 2:
        raise DeadlineFormatError(f"Improper format: {DEADLINE_USAGE}")
    if len(segments) > 2:
        raise DeadlineFormatError(f"Too many flags: {DEADLINE_USAGE}")

    description, by = (s.strip() for s in segments)
    if not description:
        raise EmptyDescriptionError()
    if not by:
        raise DeadlineFormatError("Empty /by flag.")
    return Deadline.from_user(description, by)


def _parse_event(text: str) -> Event:
    tokens = _EVENT_RE.split(text)
    markers = tokens[1::2]
    if len(markers) > 2:
        raise EventFormatError(f"Too many flags: {EVENT_USAGE}")
    if markers != ["/from", "/to"]:
        raise EventFormatError(f"Improper format: {EVENT_USAGE}")

    description, start, end = (s.strip() for s in tokens[0::2])
    if not description:
        raise EmptyDescriptionError()
    if not start:
        raise EventFormatError("Empty /from flag.")
    if not end:
        raise EventFormatError("Empty /to flag.")
    return Event.from_user(description, start, end)

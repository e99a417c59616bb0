# src/trackerbot/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import StrEnum

from ..errors import (
    AlreadyDoneError,
    EmptyDescriptionError,
    EventOrderError,
    MalformedSaveRecordError,
    NotDoneError,
    ReservedCharacterError,
)
from .dates import format_for_display, format_for_storage, parse_stored_date, parse_user_date

FIELD_SEPARATOR = "|"


class TaskKind(StrEnum):
    """
    Task variant.

    The value doubles as the user keyword that creates the task;
    `tag` is the one-letter marker used in the save file and in render().
    """

    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"

    @property
    def tag(self) -> str:
        return _TAGS[self]

    @classmethod
    def from_tag(cls, raw: str) -> TaskKind:
        for kind, tag in _TAGS.items():
            if tag == raw:
                return kind
        raise MalformedSaveRecordError(f"Unknown task type: {raw!r}")


_TAGS = {TaskKind.TODO: "T", TaskKind.DEADLINE: "D", TaskKind.EVENT: "E"}

# Number of save fields after the type tag.
_FIELD_COUNTS = {TaskKind.TODO: 2, TaskKind.DEADLINE: 3, TaskKind.EVENT: 4}


def check_description(description: str) -> str:
    if not description or not description.strip():
        raise EmptyDescriptionError()
    if FIELD_SEPARATOR in description:
        raise ReservedCharacterError()
    return description


@dataclass(frozen=True, slots=True)
class Todo:
    description: str
    done: bool = False


@dataclass(frozen=True, slots=True)
class Deadline:
    description: str
    by: datetime
    done: bool = False

    @classmethod
    def from_user(cls, description: str, by: str) -> Deadline:
        return cls(check_description(description), parse_user_date(by))


@dataclass(frozen=True, slots=True)
class Event:
    description: str
    start: datetime
    end: datetime
    done: bool = False

    def __post_init__(self) -> None:
        if self.end <= self.start:
            raise EventOrderError()

    @classmethod
    def from_user(cls, description: str, start: str, end: str) -> Event:
        return cls(check_description(description), parse_user_date(start), parse_user_date(end))


Task = Todo | Deadline | Event


def kind_of(task: Task) -> TaskKind:
    match task:
        case Todo():
            return TaskKind.TODO
        case Deadline():
            return TaskKind.DEADLINE
        case Event():
            return TaskKind.EVENT
    raise TypeError(f"not a task: {task!r}")


def mark_done(task: Task) -> Task:
    if task.done:
        raise AlreadyDoneError()
    return replace(task, done=True)


def mark_undone(task: Task) -> Task:
    if not task.done:
        raise NotDoneError()
    return replace(task, done=False)


def matches(task: Task, substring: str) -> bool:
    return substring in task.description


def render(task: Task) -> str:
    """
    Human-readable line, e.g.:
    [T][ ] buy milk
    [D][X] submit report (by: Dec 01 2024, 00:00)
    [E][ ] trip (from: Jan 01 2024, 00:00 | to: Jan 05 2024, 00:00)
    """
    box = "[X]" if task.done else "[ ]"
    head = f"[{kind_of(task).tag}]{box} {task.description}"
    match task:
        case Todo():
            return head
        case Deadline(by=by):
            return f"{head} (by: {format_for_display(by)})"
        case Event(start=start, end=end):
            return f"{head} (from: {format_for_display(start)} | to: {format_for_display(end)})"
    raise TypeError(f"not a task: {task!r}")


def serialize(task: Task) -> str:
    fields = [kind_of(task).tag, "1" if task.done else "0", task.description]
    match task:
        case Todo():
            pass
        case Deadline(by=by):
            fields.append(format_for_storage(by))
        case Event(start=start, end=end):
            fields.extend([format_for_storage(start), format_for_storage(end)])
    return FIELD_SEPARATOR.join(fields)


def from_save_fields(tag: str, fields: list[str]) -> Task:
    """
    Build a task from one split save record: `tag` is the first field,
    `fields` the rest (done flag, description, dates...).

    Raises MalformedSaveRecordError / CorruptDateError.
    """
    kind = TaskKind.from_tag(tag)
    expected = _FIELD_COUNTS[kind]
    if len(fields) != expected:
        raise MalformedSaveRecordError(
            f"{kind.value} records need exactly {expected} fields, got {len(fields)}"
        )

    flag, description = fields[0], fields[1]
    if flag not in ("0", "1"):
        raise MalformedSaveRecordError(f"Done flag must be 0 or 1, got {flag!r}")
    if not description.strip():
        raise MalformedSaveRecordError("Empty description")
    done = flag == "1"

    match kind:
        case TaskKind.TODO:
            return Todo(description, done=done)
        case TaskKind.DEADLINE:
            return Deadline(description, parse_stored_date(fields[2]), done=done)
        case TaskKind.EVENT:
            try:
                return Event(
                    description,
                    parse_stored_date(fields[2]),
                    parse_stored_date(fields[3]),
                    done=done,
                )
            except EventOrderError as e:
                raise MalformedSaveRecordError("Event ends before it starts") from e
    raise MalformedSaveRecordError(f"Unknown task type: {tag!r}")


def deserialize(line: str) -> Task:
    tag, *fields = line.split(FIELD_SEPARATOR)
    return from_save_fields(tag, fields)

# src/trackerbot/cli/command_models.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_models import TaskKind


@dataclass(frozen=True, slots=True)
class AddCommand:
    kind: TaskKind
    text: str


@dataclass(frozen=True, slots=True)
class ToggleCommand:
    mark: bool
    raw_index: str


@dataclass(frozen=True, slots=True)
class DeleteCommand:
    raw_index: str


@dataclass(frozen=True, slots=True)
class FindCommand:
    query: str


@dataclass(frozen=True, slots=True)
class ListCommand:
    pass


@dataclass(frozen=True, slots=True)
class ExitCommand:
    pass


@dataclass(frozen=True, slots=True)
class UnknownCommand:
    keyword: str


Command = (
    AddCommand
    | ToggleCommand
    | DeleteCommand
    | FindCommand
    | ListCommand
    | ExitCommand
    | UnknownCommand
)


def is_exit(command: Command) -> bool:
    return isinstance(command, ExitCommand)

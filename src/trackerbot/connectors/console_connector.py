# src/trackerbot/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.bootstrap import save_tasks
from ..cli.command_models import is_exit
from ..cli.commands import CommandResult, Exited, Found, Listed, execute_command
from ..cli.parser import parse_command
from ..core.state import AppState
from ..errors import ErrorKind, TrackerError
from ..tasks.task_list import Added, Deleted, Toggled
from ..tasks.task_models import Task, render

logger = logging.getLogger(__name__)

SEPARATOR = "~" * 80
PROMPT = "Format :: [keyword] [parse string] | "

Reader = Callable[[str], str]
Writer = Callable[[str], None]


def _numbered(entries: list[tuple[int, Task]]) -> str:
    return "\n".join(f"{i}. {render(task)}" for i, task in entries)


_ERROR_HEADERS = {
    ErrorKind.INPUT: "I got some trouble with that input...",
    ErrorKind.DATA: "My saved task list is damaged...",
    ErrorKind.IO: "I could not access my save file...",
}


def format_error(error: TrackerError) -> str:
    return f"{_ERROR_HEADERS[error.kind]}\n  {error}"


def format_result(result: CommandResult, app_name: str = "TrackerBot") -> str:
    if result.error is not None:
        return format_error(result.error)

    match result.outcome:
        case Added(task_text=text, count=count):
            return f"Got it. I am now tracking this task:\n  {text}\n{count} task(s) on my list."
        case Toggled(done=True, task_text=text):
            return f"This task has been marked as completed.\n  {text}"
        case Toggled(done=False, task_text=text):
            return f"The task has been marked as incomplete.\n  {text}"
        case Deleted(task_text=text, remaining=remaining):
            return f"I have removed this task off of my list.\n  {text}\n{remaining} task(s) remain on my list."
        case Listed(entries=[]):
            return "No tasks have been added to the list yet."
        case Listed(entries=entries):
            return "I am tracking these tasks:\n" + _numbered(entries)
        case Found(query=query, matches=[]):
            return f"No tasks match '{query}'."
        case Found(matches=matches):
            return "These tasks match your search:\n" + _numbered(matches)
        case Exited():
            return f"Thank you for using {app_name}. Goodbye."
    raise TypeError(f"Unhandled result: {result!r}")


def run_console_loop(state: AppState, read: Reader = input, write: Writer = print) -> None:
    """
    Read-eval-print loop: one command per line until `bye`, EOF or Ctrl+C.

    With settings.autosave the list is saved after every mutating command;
    otherwise the caller saves once on shutdown.
    """
    app_name = str(getattr(state.settings, "app_name", "TrackerBot"))
    autosave = bool(getattr(state.settings, "autosave", False))
    logger.info("Console started (tasks=%d autosave=%s).", len(state.tasks), autosave)

    write(SEPARATOR)
    write(f"Greetings from {app_name}!\nHow may I assist?")
    write(SEPARATOR)

    while True:
        try:
            line = read(PROMPT)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        command = parse_command(line)
        result = execute_command(state.tasks, command)

        write(SEPARATOR)
        write(format_result(result, app_name))

        if result.mutated:
            state.dirty = True
            if autosave:
                err = save_tasks(state)
                if err is not None:
                    write(format_error(err))

        write(SEPARATOR)

        if is_exit(command):
            break

    logger.info("Console finished.")

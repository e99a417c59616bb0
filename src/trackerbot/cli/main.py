# src/trackerbot/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, loads the save file, runs the console
REPL and saves the task list on the way out.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..connectors.console_connector import format_error, run_console_loop
from ..core.state import AppState
from ..logging_setup import setup_logging
from .bootstrap import create_initial_state, load_tasks, save_tasks

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    log_dir = settings.data_dir if settings.log_to_file else None
    setup_logging(log_dir=log_dir, console_level=console_level)

    logger.info("Starting %s (save file %s)...", settings.app_name, settings.save_path)

    state = create_initial_state(settings=settings)
    load_error = load_tasks(state)
    if load_error is not None:
        print(format_error(load_error))
        print(startup_notice(state))

    try:
        run_console_loop(state)
    finally:
        if state.dirty:
            save_error = save_tasks(state)
            if save_error is not None:
                print(format_error(save_error))
        logger.info("Bye.")


def startup_notice(state: AppState) -> str:
    if state.quarantined_to is not None:
        return f"Starting with an empty list; the old file was moved to {state.quarantined_to}."
    return f"Starting with an empty list; {state.store.path} is left untouched and saving is disabled."


if __name__ == "__main__":
    main()

# src/taskflow/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..cli.views import render_active
from ..core.actions import SetSearch
from ..core.state import AppState, dispatch

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def run_console_loop(
    state: AppState,
    *,
    read: InputFn = input,
    write: OutputFn = print,
) -> None:
    """
    Read slash commands until /exit, EOF or Ctrl+C.

    Plain text (no leading slash) is treated as a search query, which is the
    quickest way to narrow the board.
    """
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "taskflow"))
    logger.info("Console connector started.")
    write(f"[{_ts_local()}] [{app_name}] Use /help for commands. Use /exit to quit.\n")
    write(render_active(state))

    def emit(text: str) -> None:
        write(f"[{_ts_local()}] {text}")

    while True:
        try:
            user_input = read(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        if not user_input.startswith("/"):
            # Taken verbatim: quotes and inner whitespace are part of the query.
            dispatch(state, SetSearch(user_input))
            write(f"Searching for {user_input!r}: {len(state.visible_tasks())} match(es).")
            continue

        try:
            response = command_registry.handle(state, user_input, emit=emit)
        except Exception:
            logger.exception("Command handler crashed.")
            response = "Internal error while handling a command."

        if response is not None:
            write(response)

    logger.info("Console connector finished.")

# src/taskflow/cli/commands.py

from __future__ import annotations

import inspect
import logging
import shlex
from collections.abc import Callable
from typing import cast

from ..core.actions import (
    AddTask,
    DeleteTask,
    SetFilter,
    SetSearch,
    SetView,
    ToggleComplete,
    UpdateTask,
)
from ..core.state import AppState, dispatch
from ..tasks.task_api import draft_from_args, parse_fields, parse_task_id
from ..tasks.task_models import FilterMode, Task, View
from .views import format_task_card, render_active

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like '/command args "quoted arg"'.
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        try:
            parts = shlex.split(line[1:])
        except ValueError:
            # Unbalanced quotes (e.g. an apostrophe in a title): plain split.
            parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    search = state.search_query or "(none)"
    return (
        "Status:\n"
        f"  View: {state.view.value}\n"
        f"  Filter: {state.filter_mode.value}\n"
        f"  Search: {search}\n"
        f"  Today: {state.today().isoformat()}\n"
        f"  Tasks: {state.task_store.count_tasks()}"
    )


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <title words> [description=... priority=... category=... assignee=... due=YYYY-MM-DD]
    """
    if not args:
        return "Usage: /add <title> [priority=low|medium|high] [category=...] [due=YYYY-MM-DD] ..."
    try:
        draft = draft_from_args(args)
    except ValueError as e:
        return f"Cannot add task: {e}."

    task = dispatch(state, AddTask(draft))
    if not isinstance(task, Task):
        return "Title is required; nothing added."
    logger.info("Added task #%s", task.id)
    return f"Added:\n{format_task_card(task, state.today())}"


def cmd_edit(state: AppState, args: list[str]) -> str:
    """
    /edit <id> key=value ...
    """
    if len(args) < 2:
        return "Usage: /edit <id> title=... priority=... due=YYYY-MM-DD ..."
    try:
        task_id = parse_task_id(args[0])
        updates = parse_fields(args[1:])
    except ValueError as e:
        return f"Cannot edit task: {e}."

    task = dispatch(state, UpdateTask(task_id, updates))
    if not isinstance(task, Task):
        if state.task_store.get(task_id) is None:
            return f"No task #{task_id}."
        return "Title cannot be empty; task unchanged."
    return f"Updated:\n{format_task_card(task, state.today())}"


def cmd_delete(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /del <id>"
    try:
        task_id = parse_task_id(args[0])
    except ValueError as e:
        return f"Cannot delete task: {e}."
    if dispatch(state, DeleteTask(task_id)):
        return f"Deleted task #{task_id}."
    return f"No task #{task_id}."


def cmd_done(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /done <id>"
    try:
        task_id = parse_task_id(args[0])
    except ValueError as e:
        return f"Cannot toggle task: {e}."

    task = dispatch(state, ToggleComplete(task_id))
    if not isinstance(task, Task):
        return f"No task #{task_id}."
    word = "completed" if task.completed else "reopened"
    return f"Task #{task_id} {word}."


def cmd_search(state: AppState, args: list[str]) -> str:
    """
    /search <text>  -> set query
    /search         -> clear query
    """
    query = " ".join(args).strip()
    dispatch(state, SetSearch(query))
    if not query:
        return "Search cleared."
    return f"Searching for {query!r}: {len(state.visible_tasks())} match(es)."


def cmd_filter(state: AppState, args: list[str]) -> str:
    if not args:
        modes = "|".join(m.value for m in FilterMode)
        return f"Filter is {state.filter_mode.value}. Use /filter {modes}."
    try:
        mode = FilterMode.parse(args[0])
    except ValueError as e:
        return f"Cannot set filter: {e}."
    dispatch(state, SetFilter(mode))
    return f"Filter set to {mode.value}: {len(state.visible_tasks())} task(s)."


def cmd_view(
    state: AppState,
    args: list[str],
    emit: CommandEmitter | None = None,
) -> str:
    """
    /view             -> show active view name
    /view board       -> switch to the card board
    /view analytics   -> switch to the analytics summary
    """
    if not args:
        return f"View is {state.view.value}. Use /view board or /view analytics."
    try:
        view = View.parse(args[0])
    except ValueError as e:
        return f"Cannot switch view: {e}."

    dispatch(state, SetView(view))
    if emit:
        emit(f"[VIEW] {view.value}")
    return render_active(state)


def cmd_show(state: AppState, args: list[str]) -> str:
    return render_active(state)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show view/filter/search/today.")
registry.register(
    "add",
    cmd_add,
    help_text='Add a task: /add "Title" priority=high category=Design due=2025-09-01.',
    aliases=["new"],
)
registry.register("edit", cmd_edit, help_text="Edit a task: /edit <id> key=value ...")
registry.register("del", cmd_delete, help_text="Delete a task: /del <id>.", aliases=["rm"])
registry.register("done", cmd_done, help_text="Toggle completion: /done <id>.", aliases=["toggle"])
registry.register("search", cmd_search, help_text="Search title/description (empty clears).")
registry.register(
    "filter", cmd_filter, help_text="Filter: /filter all|pending|completed|high|overdue."
)
registry.register("view", cmd_view, help_text="Switch view: /view board | /view analytics.")
registry.register("show", cmd_show, help_text="Render the active view.", aliases=["ls"])

# src/taskflow/core/state.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date

from ..tasks.task_analytics import DEFAULT_RECENT_LIMIT, Analytics, compute_analytics
from ..tasks.task_models import FilterMode, Task, View
from ..tasks.task_selector import select_tasks
from .actions import (
    Action,
    AddTask,
    DeleteTask,
    LoadTasks,
    SetFilter,
    SetSearch,
    SetView,
    ToggleComplete,
    UpdateTask,
)
from .ports import TaskRepo

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    # Settings are kept on the state for easy access from commands/views.
    settings: object
    task_store: TaskRepo

    filter_mode: FilterMode = FilterMode.ALL
    search_query: str = ""
    view: View = View.BOARD

    # "today" is evaluated at render time unless settings pin it.
    today_provider: Callable[[], date] = field(default=date.today)

    def today(self) -> date:
        pinned = getattr(self.settings, "today", None)
        if isinstance(pinned, date):
            return pinned
        return self.today_provider()

    def visible_tasks(self) -> list[Task]:
        return select_tasks(
            self.task_store.list_tasks(),
            query=self.search_query,
            mode=self.filter_mode,
            today=self.today(),
        )

    def analytics(self) -> Analytics:
        limit = int(getattr(self.settings, "recent_limit", DEFAULT_RECENT_LIMIT))
        return compute_analytics(
            self.task_store.list_tasks(),
            today=self.today(),
            recent_limit=limit,
        )


def dispatch(state: AppState, action: Action) -> Task | bool | None:
    """
    Apply one action to `state` synchronously.

    Returns whatever the store returned for task mutations (the affected Task,
    a bool for delete, or None for a skipped operation); view-state actions
    return None.
    """
    store = state.task_store

    if isinstance(action, AddTask):
        return store.add(action.draft)

    if isinstance(action, UpdateTask):
        return store.update(action.task_id, **action.updates)

    if isinstance(action, DeleteTask):
        return store.delete(action.task_id)

    if isinstance(action, ToggleComplete):
        return store.toggle_complete(action.task_id)

    if isinstance(action, LoadTasks):
        store.load(action.tasks)
        return None

    if isinstance(action, SetFilter):
        state.filter_mode = action.mode
        logger.debug("Filter set to %s", action.mode.value)
        return None

    if isinstance(action, SetSearch):
        state.search_query = action.query
        logger.debug("Search query set to %r", action.query)
        return None

    if isinstance(action, SetView):
        state.view = action.view
        logger.debug("View set to %s", action.view.value)
        return None

    raise TypeError(f"unknown action: {action!r}")

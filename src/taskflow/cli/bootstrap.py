# src/taskflow/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it takes settings, builds the store,
seeds the demo board (optional) and applies the initial view/filter.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.actions import LoadTasks, SetFilter, SetView
from ..core.state import AppState, dispatch
from ..tasks.task_api import demo_tasks
from ..tasks.task_models import FilterMode, View
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, store: TaskStore | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    state = AppState(settings=settings, task_store=store or TaskStore())

    if getattr(settings, "seed_demo", False):
        dispatch(state, LoadTasks(tuple(demo_tasks())))

    dispatch(state, SetView(View.parse(getattr(settings, "default_view", "board"))))
    dispatch(state, SetFilter(FilterMode.parse(getattr(settings, "default_filter", "all"))))

    logger.info(
        "State ready tasks=%s view=%s filter=%s",
        state.task_store.count_tasks(),
        state.view.value,
        state.filter_mode.value,
    )
    return state

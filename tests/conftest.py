# tests/conftest.py

from __future__ import annotations

from datetime import date
from types import SimpleNamespace

import pytest

from taskflow.core.state import AppState
from taskflow.tasks.task_models import Category, Priority, TaskDraft
from taskflow.tasks.task_store import TaskStore

from .fakes import FakeClock

TODAY = date(2025, 9, 1)


@pytest.fixture()
def settings() -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="TaskFlow Test",
        log_level="INFO",
        seed_demo=False,
        today=TODAY,
        recent_limit=5,
        default_view="board",
        default_filter="all",
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(clock: FakeClock) -> TaskStore:
    return TaskStore(clock=clock)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """AppState wired with a real in-memory store and a pinned "today"."""
    return AppState(settings=settings, task_store=store)


@pytest.fixture()
def sample_store(store: TaskStore) -> TaskStore:
    """
    Three tasks added out of due-date order:
      #1 due 2025-09-05 pending, #2 due 2025-08-30 completed, #3 due 2025-08-29 pending.
    """
    store.add(
        TaskDraft(
            title="Complete Dashboard",
            description="Build the board",
            priority=Priority.HIGH,
            due_date=date(2025, 9, 5),
        )
    )
    store.add(
        TaskDraft(
            title="Code Review",
            description="Review pull requests",
            due_date=date(2025, 8, 30),
        )
    )
    store.add(
        TaskDraft(
            title="Client Meeting Preparation",
            description="Prepare slides",
            priority=Priority.HIGH,
            category=Category.BUSINESS,
            due_date=date(2025, 8, 29),
        )
    )
    store.toggle_complete(2)
    return store

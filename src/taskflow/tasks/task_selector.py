# src/taskflow/tasks/task_selector.py

"""
Search + filter + sort over a task list.

Everything here is pure: the caller passes `today` explicitly, so results do
not depend on the wall clock.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from .task_models import FilterMode, Priority, Task


def is_overdue(task: Task, today: date) -> bool:
    """Due strictly before `today` (date-only) and not completed."""
    if task.completed or task.due_date is None:
        return False
    return task.due_date < today


def _due_key(task: Task) -> tuple[bool, date]:
    # Undated tasks sort after every dated one.
    return (task.due_date is None, task.due_date or date.min)


def sort_by_due_date(tasks: Iterable[Task]) -> list[Task]:
    """Stable ascending sort by due date; ties keep their relative order."""
    return sorted(tasks, key=_due_key)


def matches_query(task: Task, query: str) -> bool:
    needle = (query or "").lower()
    if not needle:
        return True
    return needle in task.title.lower() or needle in task.description.lower()


def matches_mode(task: Task, mode: FilterMode, today: date) -> bool:
    if mode is FilterMode.ALL:
        return True
    if mode is FilterMode.PENDING:
        return not task.completed
    if mode is FilterMode.COMPLETED:
        return task.completed
    if mode is FilterMode.HIGH:
        return task.priority is Priority.HIGH
    if mode is FilterMode.OVERDUE:
        return is_overdue(task, today)
    raise ValueError(f"unsupported filter mode: {mode!r}")


def select_tasks(
    tasks: Iterable[Task],
    *,
    query: str = "",
    mode: FilterMode = FilterMode.ALL,
    today: date,
) -> list[Task]:
    return [
        t
        for t in sort_by_due_date(tasks)
        if matches_query(t, query) and matches_mode(t, mode, today)
    ]

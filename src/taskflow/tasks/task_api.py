# src/taskflow/tasks/task_api.py

"""
High-level helpers used by the console commands.

Parsing helpers raise ValueError with a user-readable message; callers at the
console boundary turn that into a usage reply.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime
from typing import Any

from .task_models import Category, Priority, Task, TaskDraft

# Console key -> TaskDraft / update() field name.
FIELD_ALIASES: dict[str, str] = {
    "title": "title",
    "desc": "description",
    "description": "description",
    "priority": "priority",
    "prio": "priority",
    "category": "category",
    "cat": "category",
    "assignee": "assignee",
    "who": "assignee",
    "due": "due_date",
    "due_date": "due_date",
}


def parse_task_id(raw: str) -> int:
    try:
        task_id = int(raw)
    except (TypeError, ValueError):
        raise ValueError(f"invalid task id {raw!r}") from None
    if task_id <= 0:
        raise ValueError(f"invalid task id {raw!r}")
    return task_id


def parse_due_date(raw: str | None) -> date | None:
    """ISO `YYYY-MM-DD`; blank or `none` clears the date."""
    if raw is None:
        return None
    s = raw.strip()
    if not s or s.lower() == "none":
        return None
    try:
        return date.fromisoformat(s)
    except ValueError:
        raise ValueError(f"invalid date {raw!r} (expected YYYY-MM-DD)") from None


def parse_fields(pairs: Iterable[str]) -> dict[str, Any]:
    """
    Turn ["priority=high", "due=2025-09-01"] into typed update() kwargs.
    """
    out: dict[str, Any] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep:
            raise ValueError(f"expected key=value, got {pair!r}")
        name = FIELD_ALIASES.get(key.strip().lower())
        if name is None:
            allowed = ", ".join(sorted(set(FIELD_ALIASES)))
            raise ValueError(f"unknown field {key!r} (allowed: {allowed})")

        if name == "priority":
            out[name] = Priority.parse(value)
        elif name == "category":
            out[name] = Category.parse(value)
        elif name == "due_date":
            out[name] = parse_due_date(value)
        else:
            out[name] = value
    return out


def draft_from_args(args: list[str]) -> TaskDraft:
    """
    Build a draft from console args.

    Leading words without "=" form the title; the rest are key=value fields.
    An explicit title=... wins over the leading words.
    """
    words: list[str] = []
    rest: list[str] = []
    for arg in args:
        if rest or "=" in arg:
            rest.append(arg)
        else:
            words.append(arg)

    fields = parse_fields(rest)
    fields.setdefault("title", " ".join(words))
    return TaskDraft(**fields)


def demo_tasks() -> list[Task]:
    """The dashboard's starter board."""
    return [
        Task(
            id=1,
            title="Complete React Dashboard",
            description="Build a comprehensive task management system with advanced features",
            priority=Priority.HIGH,
            category=Category.DEVELOPMENT,
            assignee="John Doe",
            due_date=date(2025, 9, 5),
            created_at=datetime(2025, 8, 20).astimezone(),
        ),
        Task(
            id=2,
            title="Code Review",
            description="Review pull requests for the authentication module",
            priority=Priority.MEDIUM,
            category=Category.DEVELOPMENT,
            assignee="Jane Smith",
            due_date=date(2025, 8, 30),
            created_at=datetime(2025, 8, 25).astimezone(),
            completed=True,
            completed_at=datetime(2025, 8, 28).astimezone(),
        ),
        Task(
            id=3,
            title="Client Meeting Preparation",
            description="Prepare presentation slides for upcoming client meeting",
            priority=Priority.HIGH,
            category=Category.BUSINESS,
            assignee="Mike Johnson",
            due_date=date(2025, 8, 29),
            created_at=datetime(2025, 8, 26).astimezone(),
        ),
    ]

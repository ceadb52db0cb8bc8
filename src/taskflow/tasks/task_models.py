# src/taskflow/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum


class _ParsableEnum(StrEnum):
    @classmethod
    def parse(cls, raw: str):
        """Case-insensitive lookup by value. Raises ValueError on unknown input."""
        needle = (raw or "").strip().lower()
        for member in cls:
            if member.value.lower() == needle:
                return member
        allowed = "|".join(m.value for m in cls)
        raise ValueError(f"invalid {cls.__name__.lower()} {raw!r} (expected {allowed})")


class Priority(_ParsableEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Category(_ParsableEnum):
    DEVELOPMENT = "Development"
    DESIGN = "Design"
    BUSINESS = "Business"
    MARKETING = "Marketing"
    OTHER = "Other"


class FilterMode(_ParsableEnum):
    ALL = "all"
    PENDING = "pending"
    COMPLETED = "completed"
    HIGH = "high"
    OVERDUE = "overdue"


class View(_ParsableEnum):
    BOARD = "board"
    ANALYTICS = "analytics"


@dataclass(slots=True)
class TaskDraft:
    """
    Form payload for creating or editing a task.

    Only `title` is required; the rest mirror the dashboard form defaults.
    """

    title: str
    description: str = ""
    priority: Priority = Priority.MEDIUM
    category: Category = Category.DEVELOPMENT
    assignee: str = ""
    due_date: date | None = None


@dataclass(slots=True)
class Task:
    id: int
    title: str
    description: str
    priority: Priority
    category: Category
    assignee: str
    due_date: date | None
    created_at: datetime

    completed: bool = False
    completed_at: datetime | None = None


# Fields that update() may touch. id/created_at/completion are owned by the store.
EDITABLE_FIELDS: frozenset[str] = frozenset(
    {"title", "description", "priority", "category", "assignee", "due_date"}
)


def draft_from_task(task: Task) -> TaskDraft:
    """Pre-fill an edit form from an existing task."""
    return TaskDraft(
        title=task.title,
        description=task.description,
        priority=task.priority,
        category=task.category,
        assignee=task.assignee,
        due_date=task.due_date,
    )

# src/taskflow/tasks/task_analytics.py

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date

from .task_models import Category, Task
from .task_selector import is_overdue

DEFAULT_RECENT_LIMIT = 5


def _percent_half_up(part: int, whole: int) -> int:
    """Integer percentage rounded half-up; 0 when `whole` is 0."""
    if whole <= 0:
        return 0
    return (part * 200 + whole) // (2 * whole)


@dataclass(frozen=True, slots=True)
class Analytics:
    total: int
    completed: int
    pending: int
    overdue: int
    completion_rate: int
    # Insertion order = first appearance in the task list.
    by_category: dict[Category, int] = field(default_factory=dict)
    recent_activity: list[Task] = field(default_factory=list)

    @property
    def active_categories(self) -> int:
        return len(self.by_category)

    def category_share(self, category: Category) -> float:
        """Share of all tasks in `category`, as a percentage (0.0 on empty)."""
        if self.total == 0:
            return 0.0
        return self.by_category.get(category, 0) * 100.0 / self.total


def recent_activity(tasks: Iterable[Task], limit: int = DEFAULT_RECENT_LIMIT) -> list[Task]:
    """Completed tasks, most recently completed first."""
    done = [t for t in tasks if t.completed_at is not None]
    done.sort(key=lambda t: t.completed_at, reverse=True)  # type: ignore[arg-type, return-value]
    return done[: max(0, int(limit))]


def compute_analytics(
    tasks: Iterable[Task],
    *,
    today: date,
    recent_limit: int = DEFAULT_RECENT_LIMIT,
) -> Analytics:
    items = list(tasks)
    total = len(items)
    completed = sum(1 for t in items if t.completed)
    by_category = Counter(t.category for t in items)

    return Analytics(
        total=total,
        completed=completed,
        pending=total - completed,
        overdue=sum(1 for t in items if is_overdue(t, today)),
        completion_rate=_percent_half_up(completed, total),
        by_category=dict(by_category),
        recent_activity=recent_activity(items, recent_limit),
    )

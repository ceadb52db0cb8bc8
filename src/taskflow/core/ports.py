# src/taskflow/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The reducer depends on this Protocol rather than on TaskStore directly, which
keeps tests free to pass a fake repo.
"""

from collections.abc import Iterable
from typing import Any, Protocol

from ..tasks.task_models import Task, TaskDraft


class TaskRepo(Protocol):
    def count_tasks(self) -> int: ...

    def list_tasks(self) -> list[Task]: ...

    def get(self, task_id: int) -> Task | None: ...

    def add(self, draft: TaskDraft) -> Task | None: ...

    def update(self, task_id: int, **fields: Any) -> Task | None: ...

    def delete(self, task_id: int) -> bool: ...

    def toggle_complete(self, task_id: int) -> Task | None: ...

    def load(self, tasks: Iterable[Task]) -> None: ...

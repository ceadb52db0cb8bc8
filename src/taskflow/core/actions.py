# src/taskflow/core/actions.py

"""
Commands understood by `core.state.dispatch`.

Each UI event maps to exactly one of these; `Action` is the closed union.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..tasks.task_models import FilterMode, Task, TaskDraft, View


@dataclass(frozen=True, slots=True)
class AddTask:
    draft: TaskDraft


@dataclass(frozen=True, slots=True)
class UpdateTask:
    task_id: int
    updates: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class DeleteTask:
    task_id: int


@dataclass(frozen=True, slots=True)
class ToggleComplete:
    task_id: int


@dataclass(frozen=True, slots=True)
class LoadTasks:
    tasks: tuple[Task, ...]


@dataclass(frozen=True, slots=True)
class SetFilter:
    mode: FilterMode


@dataclass(frozen=True, slots=True)
class SetSearch:
    query: str


@dataclass(frozen=True, slots=True)
class SetView:
    view: View


Action = (
    AddTask
    | UpdateTask
    | DeleteTask
    | ToggleComplete
    | LoadTasks
    | SetFilter
    | SetSearch
    | SetView
)

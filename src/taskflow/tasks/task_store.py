# src/taskflow/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import replace
from datetime import datetime
from typing import Any

from .task_models import EDITABLE_FIELDS, Category, Priority, Task, TaskDraft

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _local_now() -> datetime:
    return datetime.now().astimezone()


class TaskStore:
    """
    In-memory task store.

    The list keeps insertion order; any display order is derived elsewhere.

    Tolerance rules:
    - add/update with an empty (or whitespace-only) title are skipped
    - update/delete/toggle on an unknown id are no-ops

    Ids are monotonic: the next id is always above every id the store has held,
    so a deleted id is never handed out again.
    """

    def __init__(self, *, clock: Clock | None = None) -> None:
        self._clock: Clock = clock or _local_now
        self._tasks: list[Task] = []
        self._next_id = 1

    # ---- low-level helpers ----

    def _allocate_id(self) -> int:
        nid = self._next_id
        self._next_id += 1
        return nid

    def _index_of(self, task_id: int) -> int | None:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None

    @staticmethod
    def _coerce_field(name: str, value: Any) -> Any:
        if name == "priority" and not isinstance(value, Priority):
            return Priority.parse(str(value))
        if name == "category" and not isinstance(value, Category):
            return Category.parse(str(value))
        if name in ("title", "description", "assignee"):
            return "" if value is None else str(value).strip()
        return value

    @staticmethod
    def _with_aware_timestamps(task: Task) -> Task:
        # Naive values are read as local time so they compare with the clock's.
        changes: dict[str, datetime] = {}
        if task.created_at.tzinfo is None:
            changes["created_at"] = task.created_at.astimezone()
        if task.completed_at is not None and task.completed_at.tzinfo is None:
            changes["completed_at"] = task.completed_at.astimezone()
        return replace(task, **changes) if changes else task

    # ---- queries ----

    def count_tasks(self) -> int:
        return len(self._tasks)

    def list_tasks(self) -> list[Task]:
        """Snapshot of the task list in insertion order."""
        return list(self._tasks)

    def get(self, task_id: int) -> Task | None:
        idx = self._index_of(task_id)
        return self._tasks[idx] if idx is not None else None

    # ---- mutations ----

    def add(self, draft: TaskDraft) -> Task | None:
        title = (draft.title or "").strip()
        if not title:
            logger.debug("Skipping add: empty title.")
            return None

        task = Task(
            id=self._allocate_id(),
            title=title,
            description=(draft.description or "").strip(),
            priority=self._coerce_field("priority", draft.priority),
            category=self._coerce_field("category", draft.category),
            assignee=(draft.assignee or "").strip(),
            due_date=draft.due_date,
            created_at=self._clock(),
        )
        self._tasks.append(task)
        logger.debug(
            "Task added id=%s priority=%s category=%s due=%s",
            task.id,
            task.priority.value,
            task.category.value,
            task.due_date,
        )
        return task

    def update(self, task_id: int, **fields: Any) -> Task | None:
        """
        Merge editable fields into the task with `task_id`.

        Returns the updated task, or None when the id is unknown or the new
        title is blank. Non-editable or unknown field names raise ValueError.
        """
        bad = sorted(set(fields) - EDITABLE_FIELDS)
        if bad:
            raise ValueError(f"cannot update field(s): {', '.join(bad)}")

        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("Skipping update: task id=%s not found.", task_id)
            return None

        changes = {name: self._coerce_field(name, value) for name, value in fields.items()}
        if "title" in changes and not changes["title"]:
            logger.debug("Skipping update of id=%s: empty title.", task_id)
            return None

        updated = replace(self._tasks[idx], **changes)
        self._tasks[idx] = updated
        logger.debug("Task updated id=%s fields=%s", task_id, ",".join(sorted(changes)))
        return updated

    def delete(self, task_id: int) -> bool:
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("Skipping delete: task id=%s not found.", task_id)
            return False
        del self._tasks[idx]
        logger.debug("Task deleted id=%s", task_id)
        return True

    def toggle_complete(self, task_id: int) -> Task | None:
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("Skipping toggle: task id=%s not found.", task_id)
            return None

        task = self._tasks[idx]
        completed = not task.completed
        updated = replace(
            task,
            completed=completed,
            completed_at=self._clock() if completed else None,
        )
        self._tasks[idx] = updated
        logger.debug("Task id=%s completed=%s", task_id, completed)
        return updated

    def load(self, tasks: Iterable[Task]) -> None:
        """
        Replace the whole list.

        Duplicate ids raise ValueError. completed_at is normalised so that it is
        set iff the task is completed; naive timestamps become local-aware.
        """
        loaded: list[Task] = []
        seen: set[int] = set()
        for task in tasks:
            if task.id in seen:
                raise ValueError(f"duplicate task id {task.id}")
            seen.add(task.id)
            if task.completed and task.completed_at is None:
                task = replace(task, completed_at=self._clock())
            elif not task.completed and task.completed_at is not None:
                task = replace(task, completed_at=None)
            task = self._with_aware_timestamps(task)
            loaded.append(task)

        self._tasks = loaded
        if loaded:
            self._next_id = max(self._next_id, max(t.id for t in loaded) + 1)
        logger.info("Loaded %d task(s); next id=%s", len(loaded), self._next_id)

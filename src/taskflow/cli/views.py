# src/taskflow/cli/views.py

"""Plain-text renderings of the board and analytics views."""

from __future__ import annotations

from datetime import date

from ..core.state import AppState
from ..tasks.task_models import Task, View
from ..tasks.task_selector import is_overdue

BAR_WIDTH = 20


def _fmt_date(d: date | None) -> str:
    return d.isoformat() if d is not None else "no due date"


def format_task_card(task: Task, today: date) -> str:
    mark = "[x]" if task.completed else "[ ]"
    overdue = is_overdue(task, today)
    head = f"{mark} #{task.id} {task.title} ({task.priority.value})"
    if overdue:
        head += "  ! OVERDUE"
    lines = [head]
    if task.description:
        lines.append(f"      {task.description}")
    who = task.assignee or "unassigned"
    lines.append(f"      {task.category.value} | {who} | due {_fmt_date(task.due_date)}")
    return "\n".join(lines)


def render_board(state: AppState) -> str:
    today = state.today()
    stats = state.analytics()
    tasks = state.visible_tasks()

    header = (
        f"Total {stats.total} | Completed {stats.completed} | "
        f"Pending {stats.pending} | Overdue {stats.overdue}"
    )
    scope = f"filter={state.filter_mode.value}"
    if state.search_query:
        scope += f" search={state.search_query!r}"

    lines = [header, scope, "-" * len(header)]
    if not tasks:
        lines.append("No tasks found. Try adjusting your search or filter.")
    for task in tasks:
        lines.append(format_task_card(task, today))
    return "\n".join(lines)


def render_analytics(state: AppState) -> str:
    stats = state.analytics()
    lines = [
        "Analytics Dashboard",
        f"  Completion rate:  {stats.completion_rate}%",
        f"  Tasks completed:  {stats.completed}",
        f"  Active projects:  {stats.active_categories}",
        "",
        "Tasks by category:",
    ]
    for category, count in stats.by_category.items():
        share = stats.category_share(category)
        filled = round(share * BAR_WIDTH / 100)
        bar = "#" * filled + "." * (BAR_WIDTH - filled)
        lines.append(f"  {category.value:<12} {bar} {count}")
    if not stats.by_category:
        lines.append("  (no tasks)")

    lines.append("")
    lines.append("Recent activity:")
    for task in stats.recent_activity:
        done_on = task.completed_at.date().isoformat() if task.completed_at else ""
        lines.append(f"  {task.title} - completed {done_on}")
    if not stats.recent_activity:
        lines.append("  (nothing completed yet)")
    return "\n".join(lines)


def render_active(state: AppState) -> str:
    if state.view is View.ANALYTICS:
        return render_analytics(state)
    return render_board(state)

# tests/test_views.py

from __future__ import annotations

from taskflow.cli.views import render_active, render_analytics, render_board
from taskflow.core.actions import SetFilter, SetSearch, SetView
from taskflow.core.state import dispatch
from taskflow.tasks.task_models import FilterMode, View


def test_board_lists_visible_tasks_in_due_order(state, sample_store) -> None:
    out = render_board(state)
    assert "Total 3 | Completed 1 | Pending 2 | Overdue 1" in out
    assert out.index("#3 Client Meeting Preparation") < out.index("#2 Code Review")
    assert out.index("#2 Code Review") < out.index("#1 Complete Dashboard")
    assert "[x] #2 Code Review" in out
    assert "#3 Client Meeting Preparation (high)  ! OVERDUE" in out


def test_board_empty_message(state, sample_store) -> None:
    dispatch(state, SetSearch("nothing like this"))
    dispatch(state, SetFilter(FilterMode.HIGH))
    out = render_board(state)
    assert "No tasks found" in out
    assert "search='nothing like this'" in out


def test_analytics_view(state, sample_store) -> None:
    out = render_analytics(state)
    assert "Completion rate:  33%" in out
    assert "Active projects:  2" in out
    assert "Development" in out and "Business" in out
    assert "Code Review - completed 2025-09-01" in out


def test_render_active_follows_view(state) -> None:
    assert render_active(state).startswith("Total 0")
    dispatch(state, SetView(View.ANALYTICS))
    out = render_active(state)
    assert out.startswith("Analytics Dashboard")
    assert "(no tasks)" in out
    assert "(nothing completed yet)" in out

# tests/test_config.py

from __future__ import annotations

from datetime import date
from pathlib import Path

from taskflow.config import Settings


def test_defaults(monkeypatch) -> None:
    for name in (
        "TASKFLOW_APP_NAME",
        "TASKFLOW_LOG_LEVEL",
        "TASKFLOW_DATA_DIR",
        "TASKFLOW_LOG_TO_FILE",
        "TASKFLOW_SEED_DEMO",
        "TASKFLOW_TODAY",
        "TASKFLOW_RECENT_LIMIT",
        "TASKFLOW_DEFAULT_VIEW",
        "TASKFLOW_DEFAULT_FILTER",
    ):
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env()
    assert s.app_name == "TaskFlow Pro"
    assert s.log_level == "INFO"
    assert s.data_dir == Path(".local/taskflow")
    assert s.log_to_file is True
    assert s.seed_demo is True
    assert s.today is None
    assert s.recent_limit == 5
    assert s.default_view == "board"
    assert s.default_filter == "all"


def test_overrides(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKFLOW_APP_NAME", "Board")
    monkeypatch.setenv("TASKFLOW_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TASKFLOW_SEED_DEMO", "no")
    monkeypatch.setenv("TASKFLOW_TODAY", "2025-09-01")
    monkeypatch.setenv("TASKFLOW_RECENT_LIMIT", "3")
    monkeypatch.setenv("TASKFLOW_DEFAULT_VIEW", "Analytics")
    monkeypatch.setenv("TASKFLOW_DEFAULT_FILTER", "overdue")

    s = Settings.from_env()
    assert s.app_name == "Board"
    assert s.data_dir == tmp_path
    assert s.seed_demo is False
    assert s.today == date(2025, 9, 1)
    assert s.recent_limit == 3
    assert s.default_view == "analytics"
    assert s.default_filter == "overdue"


def test_malformed_values_fall_back(monkeypatch) -> None:
    monkeypatch.setenv("TASKFLOW_TODAY", "someday")
    monkeypatch.setenv("TASKFLOW_RECENT_LIMIT", "lots")
    monkeypatch.setenv("TASKFLOW_DEFAULT_VIEW", "kanban")
    monkeypatch.setenv("TASKFLOW_DEFAULT_FILTER", "urgent")

    s = Settings.from_env()
    assert s.today is None
    assert s.recent_limit == 5
    assert s.default_view == "board"
    assert s.default_filter == "all"

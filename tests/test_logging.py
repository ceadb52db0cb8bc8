# tests/test_logging.py

from __future__ import annotations

import logging

from taskflow.logging_setup import _ConsoleNoiseFilter, setup_logging


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter_keeps_app_logs_and_mutes_third_party() -> None:
    f = _ConsoleNoiseFilter()
    assert f.filter(_record("taskflow.tasks.task_store", logging.DEBUG))
    assert f.filter(_record("taskflow", logging.INFO))
    assert not f.filter(_record("urllib3", logging.WARNING))
    assert f.filter(_record("urllib3", logging.ERROR))
    assert not f.filter(_record("py.warnings", logging.INFO))
    assert f.filter(_record("py.warnings", logging.WARNING))


def test_setup_logging_writes_file(tmp_path) -> None:
    root = logging.getLogger()
    saved = list(root.handlers)
    try:
        log_file = setup_logging(log_dir=tmp_path)
        assert log_file == tmp_path / "taskflow.log"
        logging.getLogger("taskflow.test").debug("hello file")
        for h in root.handlers:
            h.flush()
        assert "hello file" in log_file.read_text("utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved:
            root.addHandler(h)
        logging.captureWarnings(False)


def test_setup_logging_without_file(tmp_path) -> None:
    root = logging.getLogger()
    saved = list(root.handlers)
    try:
        assert setup_logging(log_dir=None) is None
        assert not any(isinstance(h, logging.FileHandler) for h in root.handlers)
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
        for h in saved:
            root.addHandler(h)
        logging.captureWarnings(False)

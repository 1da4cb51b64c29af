# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from kiko.logging_setup import _ConsoleNoiseFilter, setup_logging


@pytest.fixture()
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter_levels() -> None:
    f = _ConsoleNoiseFilter()
    assert f.filter(_record("kiko.cli.commands", logging.DEBUG))
    assert not f.filter(_record("kiko.tasks.task_store", logging.INFO))
    assert f.filter(_record("kiko.tasks.task_store", logging.WARNING))
    assert not f.filter(_record("urllib3", logging.WARNING))
    assert f.filter(_record("urllib3", logging.ERROR))


def test_setup_logging_writes_log_file(tmp_path: Path, restore_root_logging) -> None:
    setup_logging(log_dir=tmp_path / "logs", console_level=logging.WARNING)

    logging.getLogger("kiko.test").debug("hello from test")
    for h in logging.getLogger().handlers:
        h.flush()

    text = (tmp_path / "logs" / "kiko.log").read_text("utf-8")
    assert "DEBUG kiko.test: hello from test" in text


def test_py_warnings_need_error_level() -> None:
    f = _ConsoleNoiseFilter()
    assert not f.filter(_record("py.warnings", logging.WARNING))
    assert f.filter(_record("py.warnings", logging.ERROR))

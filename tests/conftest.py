# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from kiko.core.state import AppState
from kiko.tasks.history import History
from kiko.tasks.task_list import TaskList
from kiko.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="Kiko",
        log_level="DEBUG",
        data_dir=data_dir,
        tasks_path=data_dir / "kiko.txt",
        log_dir=data_dir / "logs",
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.tasks_path)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """
    AppState wired with the real file store on tmp_path.

    NOTE: the store is real because persistence after every command is part
    of what we want to test.
    """
    return AppState(settings=settings, tasks=TaskList(store, store.load_tasks()), history=History())

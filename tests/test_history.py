# tests/test_history.py

from __future__ import annotations

import pytest

from kiko.core.errors import UndoUnavailableError
from kiko.tasks.history import History
from kiko.tasks.task_list import TaskList

from .fakes import FakeTaskRepo


def test_undo_walks_back_one_mutation_at_a_time() -> None:
    repo = FakeTaskRepo()
    tasks = TaskList(repo)
    history = History()

    history.save_state(tasks)
    tasks.add_todo("buy milk")
    assert tasks.count() == 1

    history.save_state(tasks)
    tasks.mark(1)

    history.undo_into(tasks)
    assert tasks.count() == 1
    assert tasks.get(1).is_done is False
    assert repo.tasks == tasks.all_tasks()

    history.undo_into(tasks)
    assert tasks.count() == 0
    assert repo.tasks == []

    assert not history.can_undo()
    with pytest.raises(UndoUnavailableError):
        history.undo_into(tasks)


def test_empty_history_cannot_undo() -> None:
    history = History()
    assert len(history) == 0
    with pytest.raises(UndoUnavailableError):
        history.undo()

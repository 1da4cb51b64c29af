# tests/test_task_list.py

from __future__ import annotations

from datetime import datetime

import pytest

from kiko.tasks.task_list import TaskList
from kiko.tasks.task_models import Deadline, Event, Todo

from .fakes import FakeTaskRepo


@pytest.fixture()
def repo() -> FakeTaskRepo:
    return FakeTaskRepo()


@pytest.fixture()
def tasks(repo: FakeTaskRepo) -> TaskList:
    tl = TaskList(repo)
    tl.add_todo("buy milk")
    tl.add_deadline("Submit Essay", datetime(2024, 12, 31, 23, 59))
    tl.add_event("book club", datetime(2024, 1, 1, 19, 0), datetime(2024, 1, 1, 21, 0))
    repo.saves.clear()
    return tl


def test_add_appends_in_order_and_persists(repo: FakeTaskRepo) -> None:
    tl = TaskList(repo)
    tl.add_todo("a")
    tl.add_deadline("b", datetime(2024, 1, 1))

    assert tl.count() == 2
    assert [type(t) for t in tl] == [Todo, Deadline]
    assert len(repo.saves) == 2
    assert repo.tasks == tl.all_tasks()


def test_mark_and_unmark(tasks: TaskList, repo: FakeTaskRepo) -> None:
    assert tasks.mark(2) is True
    assert tasks.get(2).is_done is True
    assert tasks.unmark(2) is True
    assert tasks.get(2).is_done is False
    assert len(repo.saves) == 2


@pytest.mark.parametrize("index", [0, -1, 4, 100])
def test_invalid_indices_fail_without_mutation(tasks: TaskList, repo: FakeTaskRepo, index: int) -> None:
    before = tasks.snapshot()

    assert tasks.mark(index) is False
    assert tasks.unmark(index) is False
    assert tasks.delete(index) is None
    assert tasks.get(index) is None

    assert tasks.snapshot() == before
    assert repo.saves == []


def test_delete_returns_removed_task(tasks: TaskList, repo: FakeTaskRepo) -> None:
    removed = tasks.delete(1)
    assert removed == Todo("buy milk")
    assert tasks.count() == 2
    assert isinstance(tasks.get(1), Deadline)
    assert repo.saves[-1] == tasks.all_tasks()


def test_find_is_case_insensitive_substring(tasks: TaskList) -> None:
    assert tasks.find("ESSAY") == [tasks.get(2)]
    assert tasks.find("oo") == [tasks.get(3)]
    assert [t.description for t in tasks.find("K")] == ["buy milk", "book club"]


def test_find_without_match_or_keyword_is_empty(tasks: TaskList) -> None:
    assert tasks.find("dentist") == []
    assert tasks.find("") == []


def test_snapshot_is_independent_of_later_changes(tasks: TaskList) -> None:
    snap = tasks.snapshot()
    tasks.mark(1)
    tasks.delete(3)

    assert len(snap) == 3
    assert snap[0].is_done is False
    assert isinstance(snap[2], Event)


def test_restore_replaces_state_and_persists(tasks: TaskList, repo: FakeTaskRepo) -> None:
    snap = tasks.snapshot()
    tasks.delete(1)
    tasks.restore(snap)

    assert tasks.snapshot() == snap
    assert repo.tasks == list(snap)

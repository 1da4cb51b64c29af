# src/kiko/tasks/task_list.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from datetime import datetime

from ..core.ports import TaskRepo
from .task_models import Deadline, Event, Task, Todo

logger = logging.getLogger(__name__)

Snapshot = tuple[Task, ...]


class TaskList:
    """
    Ordered task collection with 1-based external indexing.

    Every mutation rewrites the backing repo before returning. Invalid
    indices never raise: mark/unmark return False, get/delete return None.
    """

    def __init__(self, repo: TaskRepo, tasks: Iterable[Task] = ()) -> None:
        self._repo = repo
        self._tasks: list[Task] = list(tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    # ---- queries ----

    def count(self) -> int:
        return len(self._tasks)

    def is_valid_index(self, index: int) -> bool:
        return 1 <= index <= len(self._tasks)

    def get(self, index: int) -> Task | None:
        if not self.is_valid_index(index):
            return None
        return self._tasks[index - 1]

    def all_tasks(self) -> list[Task]:
        return list(self._tasks)

    def find(self, keyword: str) -> list[Task]:
        """Case-insensitive substring match on descriptions. Empty keyword matches nothing."""
        if not keyword:
            return []
        needle = keyword.lower()
        return [t for t in self._tasks if needle in t.description.lower()]

    # ---- mutations ----

    def add_todo(self, description: str) -> Task:
        return self._append(Todo(description))

    def add_deadline(self, description: str, by: datetime) -> Task:
        return self._append(Deadline(description, by))

    def add_event(self, description: str, start: datetime, end: datetime) -> Task:
        return self._append(Event(description, start, end))

    def mark(self, index: int) -> bool:
        if not self.is_valid_index(index):
            return False
        self._tasks[index - 1] = self._tasks[index - 1].as_done()
        self._save()
        return True

    def unmark(self, index: int) -> bool:
        if not self.is_valid_index(index):
            return False
        self._tasks[index - 1] = self._tasks[index - 1].as_not_done()
        self._save()
        return True

    def delete(self, index: int) -> Task | None:
        if not self.is_valid_index(index):
            return None
        removed = self._tasks.pop(index - 1)
        self._save()
        return removed

    # ---- snapshots ----

    def snapshot(self) -> Snapshot:
        """Independent copy of the current state (tasks are immutable)."""
        return tuple(self._tasks)

    def restore(self, snapshot: Snapshot) -> None:
        self._tasks = list(snapshot)
        self._save()
        logger.debug("TaskList restored to %d tasks", len(self._tasks))

    # ---- internals ----

    def _append(self, task: Task) -> Task:
        self._tasks.append(task)
        self._save()
        return task

    def _save(self) -> None:
        self._repo.save_tasks(self._tasks)

# src/kiko/tasks/history.py

from __future__ import annotations

import logging

from ..core.errors import UndoUnavailableError
from .task_list import Snapshot, TaskList

logger = logging.getLogger(__name__)


class History:
    """
    Linear undo stack of TaskList snapshots (no redo).

    Callers push the pre-mutation state right before a mutating command is
    applied; undo() pops the newest one.
    """

    def __init__(self) -> None:
        self._stack: list[Snapshot] = []

    def __len__(self) -> int:
        return len(self._stack)

    def save_state(self, task_list: TaskList) -> None:
        self._stack.append(task_list.snapshot())

    def can_undo(self) -> bool:
        return bool(self._stack)

    def undo(self) -> Snapshot:
        if not self._stack:
            raise UndoUnavailableError()
        snapshot = self._stack.pop()
        logger.info("Undo: restoring %d tasks (%d snapshots left)", len(snapshot), len(self._stack))
        return snapshot

    def undo_into(self, task_list: TaskList) -> None:
        """Pop the newest snapshot and make it the live (persisted) state of task_list."""
        task_list.restore(self.undo())

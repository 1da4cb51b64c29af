# src/kiko/core/ports.py

"""
Ports (interfaces) used by the core.

The task list depends on a Protocol instead of the concrete file store,
so tests can swap in an in-memory repo.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Final, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import Task

# Reply prefix telling the front end to end the session after showing the rest.
CLOSE_WINDOW_PREFIX: Final[str] = "CLOSE_WINDOW:"


class TaskRepo(Protocol):
    def load_tasks(self) -> list[Task]: ...

    def save_tasks(self, tasks: Sequence[Task]) -> None:
        """Overwrite the whole backing store. Raises StorageIOError on failure."""
        ...


def split_close_signal(reply: str) -> tuple[str, bool]:
    """Return (text to show, whether the session should end)."""
    if reply.startswith(CLOSE_WINDOW_PREFIX):
        return reply[len(CLOSE_WINDOW_PREFIX) :], True
    return reply, False

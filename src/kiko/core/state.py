# src/kiko/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..tasks.history import History
from ..tasks.task_list import TaskList


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: Any

    tasks: TaskList
    history: History = field(default_factory=History)

# src/kiko/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import StrEnum
from typing import ClassVar, TypeAlias

from ..core.dates import format_display


class TaskType(StrEnum):
    """Type tag, also the first field of a persisted line."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


class _TaskMixin:
    """
    Behaviour shared by every task variant.

    Tasks are immutable: marking returns an updated copy. This lets a
    TaskList snapshot be a plain tuple of the current tasks.
    """

    __slots__ = ()

    type_tag: ClassVar[TaskType]
    description: str
    is_done: bool

    def as_done(self):
        return self if self.is_done else replace(self, is_done=True)

    def as_not_done(self):
        return replace(self, is_done=False) if self.is_done else self

    def suffix(self) -> str:
        return ""

    def describe(self) -> str:
        status = "X" if self.is_done else " "
        suffix = self.suffix()
        line = f"[{self.type_tag}][{status}] {self.description}"
        return f"{line} {suffix}" if suffix else line

    def __str__(self) -> str:
        return self.describe()


@dataclass(frozen=True, slots=True)
class Todo(_TaskMixin):
    type_tag: ClassVar[TaskType] = TaskType.TODO

    description: str
    is_done: bool = False


@dataclass(frozen=True, slots=True)
class Deadline(_TaskMixin):
    type_tag: ClassVar[TaskType] = TaskType.DEADLINE

    description: str
    by: datetime
    is_done: bool = False

    def suffix(self) -> str:
        return f"(by: {format_display(self.by)})"


@dataclass(frozen=True, slots=True)
class Event(_TaskMixin):
    """A time range. start <= end is not checked."""

    type_tag: ClassVar[TaskType] = TaskType.EVENT

    description: str
    start: datetime
    end: datetime
    is_done: bool = False

    def suffix(self) -> str:
        return f"(from: {format_display(self.start)} to: {format_display(self.end)})"


Task: TypeAlias = Todo | Deadline | Event

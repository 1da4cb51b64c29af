# src/kiko/core/persona.py

"""User-facing reply texts. Handlers compose replies only from these."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Final

from .dates import INPUT_FORMATS
from .ports import CLOSE_WINDOW_PREFIX

if TYPE_CHECKING:
    from ..tasks.task_models import Task

GREETING: Final[str] = "Hello! I'm Kiko the bunny\nWhat can I do for you? >.<"
FAREWELL: Final[str] = "Goodbye! Hope to see you again soon!"
EMPTY_INPUT: Final[str] = "Please enter a command!"
NOTHING_TO_UNDO: Final[str] = "Nothing to undo!"
EMPTY_LIST: Final[str] = "You have no tasks in your list!"
EMPTY_TODO: Final[str] = "The description of a todo cannot be empty!"
EMPTY_KEYWORD: Final[str] = "Please provide a keyword to search for!"

DEADLINE_USAGE: Final[str] = "Usage: deadline <description> /by <date>"
EVENT_USAGE: Final[str] = "Usage: event <description> /from <start> /to <end>"


def farewell() -> str:
    return CLOSE_WINDOW_PREFIX + FAREWELL


def unknown_command(help_text: str) -> str:
    return "I'm sorry, but I don't know what that means. Try these commands:\n" + help_text


def numbered(tasks: Sequence[Task]) -> str:
    return "\n".join(f"{i}. {t.describe()}" for i, t in enumerate(tasks, start=1))


def task_list(tasks: Sequence[Task]) -> str:
    if not tasks:
        return EMPTY_LIST
    return "Here are the tasks in your list:\n" + numbered(tasks)


def find_results(tasks: Sequence[Task], keyword: str) -> str:
    if not tasks:
        return f"No matching tasks found for keyword: {keyword}"
    return "Here are the matching tasks in your list:\n" + numbered(tasks)


def _count(n: int) -> str:
    return f"{n} task" if n == 1 else f"{n} tasks"


def task_added(task: Task, total: int) -> str:
    return f"Got it. I've added this task:\n  {task.describe()}\nNow you have {_count(total)} in the list."


def task_marked(task: Task) -> str:
    return f"Nice! I've marked this task as done:\n  {task.describe()}"


def task_unmarked(task: Task) -> str:
    return f"OK, I've marked this task as not done yet:\n  {task.describe()}"


def task_deleted(task: Task, remaining: int) -> str:
    return f"Noted. I've removed this task:\n  {task.describe()}\nNow you have {_count(remaining)} in the list."


def invalid_index(number: int, total: int) -> str:
    return f"Task number {number} does not exist. You have {_count(total)}."


def invalid_number(command: str) -> str:
    return f"Please provide a valid task number to {command}!"


def deadline_missing_by() -> str:
    return f"Please include '/by' followed by the deadline date!\n{DEADLINE_USAGE}"


def deadline_missing_fields() -> str:
    return f"Please provide both description and deadline!\n{DEADLINE_USAGE}"


def event_missing_markers() -> str:
    return f"Please include '/from' and then '/to' with dates!\n{EVENT_USAGE}"


def event_missing_fields() -> str:
    return f"Please provide description, start time, and end time!\n{EVENT_USAGE}"


def invalid_date(token: str) -> str:
    lines = [f"Invalid date format: {token!r}. Try these formats:"]
    for fmt in INPUT_FORMATS:
        lines.append(f"  {fmt.label} (e.g., {fmt.example})")
    lines.append("  (a date without time means 00:00)")
    return "\n".join(lines)


def undone(tasks: Sequence[Task]) -> str:
    return "Undone! Here is your list now:\n" + (numbered(tasks) if tasks else EMPTY_LIST)


def save_failed(reason: str) -> str:
    return f"I couldn't save your tasks ({reason}). Your change is kept for this session."


def description_has_separator(separator: str) -> str:
    return f"Descriptions cannot contain {separator.strip()!r} with spaces around it. Please reword the task!"

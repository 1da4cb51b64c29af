# src/kiko/core/parser.py

"""
Command-line parsing: classify a raw input line and extract its argument.

Matching rules:
- the whole line is stripped, the command word is compared case-insensitively,
- a command matches only as an exact word or as "<word> " prefix ("todox" is unknown),
- the argument is the rest of the line, stripped, in its original case.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

BY_MARKER = "/by "
FROM_MARKER = "/from "
TO_MARKER = "/to "

_TASK_NUMBER_RE = re.compile(r"[+-]?[0-9]+")


class CommandKind(StrEnum):
    LIST = "list"
    MARK = "mark"
    UNMARK = "unmark"
    DELETE = "delete"
    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"
    FIND = "find"
    UNDO = "undo"
    BYE = "bye"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class ParsedCommand:
    kind: CommandKind
    argument: str


@dataclass(frozen=True, slots=True)
class DeadlineArgs:
    description: str
    by: str


@dataclass(frozen=True, slots=True)
class EventArgs:
    description: str
    start: str
    end: str


@dataclass(frozen=True, slots=True)
class InvalidNumber:
    """The task-number argument was not a base-10 integer."""

    token: str


def parse_command(line: str) -> ParsedCommand:
    text = line.strip()
    lowered = text.lower()
    for kind in CommandKind:
        if kind is CommandKind.UNKNOWN:
            continue
        word = kind.value
        if lowered == word or lowered.startswith(word + " "):
            return ParsedCommand(kind=kind, argument=text[len(word) :].strip())
    return ParsedCommand(kind=CommandKind.UNKNOWN, argument=text)


def parse_deadline_argument(argument: str) -> DeadlineArgs | None:
    """'<description> /by <date>' -> DeadlineArgs, or None when malformed."""
    idx = argument.find(BY_MARKER)
    if idx == -1:
        return None
    description = argument[:idx].strip()
    by = argument[idx + len(BY_MARKER) :].strip()
    if not description or not by:
        return None
    return DeadlineArgs(description=description, by=by)


def parse_event_argument(argument: str) -> EventArgs | None:
    """
    '<description> /from <start> /to <end>' -> EventArgs.

    None if a marker is missing, /to comes at or before /from, or any part is empty.
    """
    from_idx = argument.find(FROM_MARKER)
    to_idx = argument.find(TO_MARKER)
    if from_idx == -1 or to_idx == -1 or to_idx <= from_idx:
        return None
    description = argument[:from_idx].strip()
    start = argument[from_idx + len(FROM_MARKER) : to_idx].strip()
    end = argument[to_idx + len(TO_MARKER) :].strip()
    if not description or not start or not end:
        return None
    return EventArgs(description=description, start=start, end=end)


def parse_task_number(argument: str) -> int | InvalidNumber:
    token = argument.strip()
    if not _TASK_NUMBER_RE.fullmatch(token):
        return InvalidNumber(token=token)
    return int(token)

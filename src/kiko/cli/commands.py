# src/kiko/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core import persona
from ..core.dates import DateParseError, parse_datetime
from ..core.errors import StorageIOError, UndoUnavailableError
from ..core.parser import (
    BY_MARKER,
    FROM_MARKER,
    TO_MARKER,
    CommandKind,
    InvalidNumber,
    parse_command,
    parse_deadline_argument,
    parse_event_argument,
    parse_task_number,
)
from ..core.state import AppState
from ..tasks.task_store import FIELD_SEP, fits_field

CommandHandler = Callable[[AppState, str], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Maps command kinds to handlers; handle() is the one entry point for every front end."""

    def __init__(self) -> None:
        self._handlers: dict[CommandKind, CommandHandler] = {}
        self._help: dict[CommandKind, str] = {}

    def register(self, kind: CommandKind, handler: CommandHandler, help_text: str) -> None:
        self._handlers[kind] = handler
        self._help[kind] = help_text

    def handle(self, state: AppState, line: str) -> str:
        """Return the reply for one input line. Never raises for user or storage errors."""
        if not line or not line.strip():
            return persona.EMPTY_INPUT

        parsed = parse_command(line)
        handler = self._handlers.get(parsed.kind)
        if handler is None:
            logger.debug("Unknown command: %r", line)
            return persona.unknown_command(self.build_help())

        logger.debug("Handling command=%s", parsed.kind)
        try:
            return handler(state, parsed.argument)
        except UndoUnavailableError:
            return persona.NOTHING_TO_UNDO
        except StorageIOError as e:
            # Already logged by the store; the in-memory change stands.
            return persona.save_failed(e.reason)

    def build_help(self) -> str:
        return "\n".join(f"  {text}" for text in self._help.values())


registry = CommandRegistry()


def _task_number(state: AppState, argument: str, command: str) -> int | str:
    """Parsed, in-range task number, or the error reply to send back."""
    number = parse_task_number(argument)
    if isinstance(number, InvalidNumber):
        return persona.invalid_number(command)
    if not state.tasks.is_valid_index(number):
        return persona.invalid_index(number, state.tasks.count())
    return number


def cmd_list(state: AppState, argument: str) -> str:
    return persona.task_list(state.tasks.all_tasks())


def cmd_mark(state: AppState, argument: str) -> str:
    number = _task_number(state, argument, "mark")
    if isinstance(number, str):
        return number
    state.history.save_state(state.tasks)
    state.tasks.mark(number)
    return persona.task_marked(state.tasks.get(number))


def cmd_unmark(state: AppState, argument: str) -> str:
    number = _task_number(state, argument, "unmark")
    if isinstance(number, str):
        return number
    state.history.save_state(state.tasks)
    state.tasks.unmark(number)
    return persona.task_unmarked(state.tasks.get(number))


def cmd_delete(state: AppState, argument: str) -> str:
    number = _task_number(state, argument, "delete")
    if isinstance(number, str):
        return number
    state.history.save_state(state.tasks)
    removed = state.tasks.delete(number)
    return persona.task_deleted(removed, state.tasks.count())


def cmd_todo(state: AppState, argument: str) -> str:
    if not argument:
        return persona.EMPTY_TODO
    if not fits_field(argument):
        return persona.description_has_separator(FIELD_SEP)
    state.history.save_state(state.tasks)
    task = state.tasks.add_todo(argument)
    return persona.task_added(task, state.tasks.count())


def cmd_deadline(state: AppState, argument: str) -> str:
    args = parse_deadline_argument(argument)
    if args is None:
        if BY_MARKER not in argument:
            return persona.deadline_missing_by()
        return persona.deadline_missing_fields()
    if not fits_field(args.description):
        return persona.description_has_separator(FIELD_SEP)

    by = parse_datetime(args.by)
    if isinstance(by, DateParseError):
        return persona.invalid_date(by.token)

    state.history.save_state(state.tasks)
    task = state.tasks.add_deadline(args.description, by)
    return persona.task_added(task, state.tasks.count())


def cmd_event(state: AppState, argument: str) -> str:
    args = parse_event_argument(argument)
    if args is None:
        # Markers present in the right order means one of the parts was empty.
        from_idx, to_idx = argument.find(FROM_MARKER), argument.find(TO_MARKER)
        if from_idx != -1 and to_idx > from_idx:
            return persona.event_missing_fields()
        return persona.event_missing_markers()
    if not fits_field(args.description):
        return persona.description_has_separator(FIELD_SEP)

    start = parse_datetime(args.start)
    if isinstance(start, DateParseError):
        return persona.invalid_date(start.token)
    end = parse_datetime(args.end)
    if isinstance(end, DateParseError):
        return persona.invalid_date(end.token)

    state.history.save_state(state.tasks)
    task = state.tasks.add_event(args.description, start, end)
    return persona.task_added(task, state.tasks.count())


def cmd_find(state: AppState, argument: str) -> str:
    if not argument:
        return persona.EMPTY_KEYWORD
    return persona.find_results(state.tasks.find(argument), argument)


def cmd_undo(state: AppState, argument: str) -> str:
    state.history.undo_into(state.tasks)
    return persona.undone(state.tasks.all_tasks())


def cmd_bye(state: AppState, argument: str) -> str:
    return persona.farewell()


registry.register(CommandKind.LIST, cmd_list, "list - show all tasks")
registry.register(CommandKind.TODO, cmd_todo, "todo <description> - add a todo")
registry.register(
    CommandKind.DEADLINE, cmd_deadline, "deadline <description> /by <date> - add a deadline"
)
registry.register(
    CommandKind.EVENT, cmd_event, "event <description> /from <date> /to <date> - add an event"
)
registry.register(CommandKind.MARK, cmd_mark, "mark <number> - mark task as done")
registry.register(CommandKind.UNMARK, cmd_unmark, "unmark <number> - mark task as not done")
registry.register(CommandKind.DELETE, cmd_delete, "delete <number> - delete a task")
registry.register(CommandKind.FIND, cmd_find, "find <keyword> - find tasks by keyword")
registry.register(CommandKind.UNDO, cmd_undo, "undo - revert the last change")
registry.register(CommandKind.BYE, cmd_bye, "bye - exit")

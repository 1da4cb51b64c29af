# src/kiko/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Iterable, Sequence
from pathlib import Path

from ..core.dates import DateParseError, format_canonical, parse_canonical
from ..core.errors import StorageIOError
from .task_models import Deadline, Event, Task, TaskType, Todo

logger = logging.getLogger(__name__)

FIELD_SEP = " | "


# ---- line codec ----


def task_to_line(task: Task) -> str:
    """'<tag> | <0/1> | <description>[ | <datetime>]*' with canonical datetimes."""
    fields = [task.type_tag.value, "1" if task.is_done else "0", task.description]
    match task:
        case Todo():
            pass
        case Deadline(by=by):
            fields.append(format_canonical(by))
        case Event(start=start, end=end):
            fields.extend((format_canonical(start), format_canonical(end)))
    return FIELD_SEP.join(fields)


def task_from_line(line: str) -> Task | None:
    """Decode one persisted line. None for anything malformed."""
    parts = [p.strip() for p in line.split(FIELD_SEP)]
    if len(parts) < 3:
        return None

    tag, done_flag, description = parts[0], parts[1], parts[2]
    task: Task | None = None

    if tag == TaskType.TODO:
        task = Todo(description)
    elif tag == TaskType.DEADLINE:
        if len(parts) < 4:
            return None
        by = parse_canonical(parts[3])
        if isinstance(by, DateParseError):
            return None
        task = Deadline(description, by)
    elif tag == TaskType.EVENT:
        if len(parts) < 5:
            return None
        start = parse_canonical(parts[3])
        end = parse_canonical(parts[4])
        if isinstance(start, DateParseError) or isinstance(end, DateParseError):
            return None
        task = Event(description, start, end)

    if task is None:
        return None
    return task.as_done() if done_flag == "1" else task


def _is_clean_text(line: str) -> bool:
    try:
        line.encode("utf-8")
    except UnicodeEncodeError:
        # Lone surrogates left by surrogateescape decoding of a non-UTF-8 byte.
        return False
    return True


def fits_field(description: str) -> bool:
    """The format has no escaping: a description must not contain the field separator."""
    return FIELD_SEP not in description


def serialize(tasks: Iterable[Task]) -> str:
    return "".join(task_to_line(t) + "\n" for t in tasks)


def deserialize(text: str, *, source: str = "<memory>") -> list[Task]:
    """Decode a whole file. Malformed lines are logged and dropped."""
    out: list[Task] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        task = task_from_line(line) if _is_clean_text(line) else None
        if task is None:
            logger.warning("Skipping malformed task line %s:%d: %r", source, lineno, line)
            continue
        out.append(task)
    return out


# ---- file store ----


class TaskStore:
    """
    Flat-file task store (one pipe-delimited line per task).

    Every save rewrites the whole file: write to a temp file next to it,
    then os.replace() over the target.
    """

    def __init__(self, path: str | Path = "data/kiko.txt") -> None:
        self._path = Path(path)
        logger.info("TaskStore ready path=%s exists=%s", self._path, self._path.exists())

    @property
    def path(self) -> Path:
        return self._path

    def load_tasks(self) -> list[Task]:
        """Missing file -> []. Unreadable file -> [] (logged)."""
        if not self._path.exists():
            logger.debug("No task file at %s, starting empty.", self._path)
            return []
        try:
            # Undecodable bytes survive as surrogates so only their line is dropped.
            text = self._path.read_bytes().decode("utf-8", errors="surrogateescape")
        except OSError:
            logger.exception("Failed to load tasks from %s; starting empty.", self._path)
            return []
        tasks = deserialize(text, source=str(self._path))
        logger.debug("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save_tasks(self, tasks: Sequence[Task]) -> None:
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            # Text mode: "\n" becomes the platform line terminator.
            tmp.write_text(serialize(tasks), "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            logger.exception("Failed to save tasks to %s", self._path)
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise StorageIOError(self._path, e.strerror or str(e)) from e
        logger.debug("Saved %d tasks to %s", len(tasks), self._path)

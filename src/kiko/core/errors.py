# src/kiko/core/errors.py

from __future__ import annotations

from pathlib import Path


class KikoError(Exception):
    """Base class for errors raised inside kiko."""


class StorageIOError(KikoError):
    """The backing file could not be read or written."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class UndoUnavailableError(KikoError):
    """Raised by History.undo() when there is no snapshot left."""

    def __init__(self) -> None:
        super().__init__("nothing to undo")

"""Errors raised by the board services."""
from __future__ import annotations

from pathlib import Path
from typing import Optional


class BoardError(RuntimeError):
    """Base error for board service failures."""

    def __init__(self, message: str, *, path: Optional[Path] = None, cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None
        if cause is not None:
            self.__cause__ = cause


class MalformedDocumentError(BoardError):
    """Raised when a saved board cannot be decoded into a scene document."""


class BoardPersistenceError(BoardError):
    """Raised when underlying storage cannot be read or written."""


class SlotNotFoundError(BoardPersistenceError):
    """Raised when a named save slot does not exist."""

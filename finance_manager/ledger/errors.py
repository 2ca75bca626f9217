"""Mini README: Exceptions raised by the ledger core.

Structure:
    * LedgerError - common base so front ends can catch every core failure.
    * ValidationError - rejected transaction input (negative amount etc.).
    * ParseError - a persisted line that is not ``<text> <number> <0|1>``.
    * StorageError - the ledger file exists but cannot be read, or cannot be
      written.

The builtin bases are kept (``ValueError`` / ``OSError``) so callers that
already handle those continue to work.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class LedgerError(Exception):
    """Base class for errors surfaced by the ledger core."""


class ValidationError(LedgerError, ValueError):
    """Raised when a transaction cannot be constructed from the given values."""


class ParseError(LedgerError, ValueError):
    """Raised when a persisted record cannot be decoded."""

    def __init__(self, message: str, *, line: Optional[str] = None) -> None:
        super().__init__(message)
        self.line = line


class StorageError(LedgerError, OSError):
    """Raised when the ledger file cannot be opened, read, or written."""

    def __init__(self, message: str, *, path: Path) -> None:
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        return f"{self.args[0]} ({self.path})"

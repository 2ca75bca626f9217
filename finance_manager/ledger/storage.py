"""Mini README: Flat-file persistence for the ledger.

Structure:
    * format_record / parse_record - codec for one ``<category> <amount> <flag>`` line.
    * LoadReport - outcome of reading a ledger file.
    * save_transactions / load_transactions - whole-file helpers.

File format:
    One transaction per line, fields separated by whitespace. ``flag`` is ``1``
    for income and ``0`` for expense. There is no header and no escaping, so a
    category containing whitespace cannot be stored; ``format_record`` rejects
    such categories instead of writing a line that would misparse.

Loading stops quietly at the first line that does not decode, including a line
that is not valid UTF-8. Everything read
before that line is kept and the line number is noted on the report, but the
caller does not receive an error. Blank lines are ignored.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path
from typing import Iterable, List, Optional, Union

from ..logging_utils import get_logger
from .errors import ParseError, StorageError, ValidationError
from .transaction import Transaction, TransactionKind

LOGGER = get_logger(__name__)

PathLike = Union[str, Path]


def format_amount(amount: float) -> str:
    """Render ``amount`` as a plain decimal that parses back to the same float."""

    text = format(Decimal(repr(amount)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def is_storable_category(category: str) -> bool:
    """Return ``True`` when ``category`` survives a write/read cycle."""

    return bool(category) and not any(character.isspace() for character in category)


def format_record(transaction: Transaction) -> str:
    """Encode a transaction as a single line without the trailing newline."""

    category = transaction.category
    if not is_storable_category(category):
        raise ValidationError(
            f"Category {category!r} cannot be saved: it must be non-empty and contain no whitespace."
        )
    return f"{category} {format_amount(transaction.amount)} {transaction.kind.flag}"


def parse_record(line: str) -> Transaction:
    """Decode one persisted line, raising ``ParseError`` when it is malformed."""

    fields = line.split()
    if len(fields) != 3:
        raise ParseError(f"Expected 3 fields, found {len(fields)}", line=line)
    category, raw_amount, raw_flag = fields
    try:
        amount = float(raw_amount)
    except ValueError as error:
        raise ParseError(f"Amount is not a number: {raw_amount!r}", line=line) from error
    if not math.isfinite(amount):
        raise ParseError(f"Amount is not a finite number: {raw_amount!r}", line=line)
    kind = TransactionKind.from_flag(raw_flag)
    try:
        return Transaction(category=category, amount=amount, kind=kind)
    except ValidationError as error:
        raise ParseError(str(error), line=line) from error


@dataclass(slots=True)
class LoadReport:
    """Summary of a ledger file read."""

    path: Path
    file_found: bool
    transactions: List[Transaction] = field(default_factory=list)
    truncated_at: Optional[int] = None

    @property
    def loaded(self) -> int:
        return len(self.transactions)

    @property
    def no_prior_data(self) -> bool:
        """``True`` when there was no ledger file to read."""

        return not self.file_found

    @property
    def truncated(self) -> bool:
        return self.truncated_at is not None


def _decode_line(raw_line: bytes) -> str:
    try:
        return raw_line.decode("utf-8")
    except UnicodeDecodeError as error:
        raise ParseError(f"Line is not valid UTF-8: {error.reason}", line=repr(raw_line)) from error


def save_transactions(path: PathLike, transactions: Iterable[Transaction]) -> int:
    """Overwrite ``path`` with one line per transaction and return the count."""

    path = Path(path)
    # Encode first so an unsaveable category leaves the existing file untouched.
    lines = [format_record(transaction) + "\n" for transaction in transactions]
    try:
        with path.open("w", encoding="utf-8") as handle:
            handle.writelines(lines)
    except OSError as error:
        raise StorageError(f"Unable to write ledger file: {error.strerror or error}", path=path) from error
    LOGGER.debug("Wrote %s transactions to %s", len(lines), path)
    return len(lines)


def load_transactions(path: PathLike) -> LoadReport:
    """Read transactions from ``path``; a missing file yields an empty report."""

    path = Path(path)
    report = LoadReport(path=path, file_found=True)
    try:
        with path.open("rb") as handle:
            for line_number, raw_line in enumerate(handle, start=1):
                if not raw_line.strip():
                    continue
                try:
                    report.transactions.append(parse_record(_decode_line(raw_line)))
                except ParseError as error:
                    report.truncated_at = line_number
                    LOGGER.debug(
                        "Stopped reading %s at line %s: %s", path, line_number, error
                    )
                    break
    except FileNotFoundError:
        LOGGER.debug("No ledger file at %s", path)
        return LoadReport(path=path, file_found=False)
    except OSError as error:
        raise StorageError(f"Unable to read ledger file: {error}", path=path) from error
    LOGGER.debug("Read %s transactions from %s", report.loaded, path)
    return report

"""Mini README: In-memory ledger of income and expense transactions.

Structure:
    * Ledger - owns the ordered transaction list and every operation on it.

Insertion order is the default order. ``sort_by_amount`` reorders the stored
list itself, so later listings and saves keep the sorted order. Persistence is
delegated to ``storage`` and appends on load rather than replacing.
"""

from __future__ import annotations

import math
from collections import defaultdict
from typing import Dict, Iterable, Iterator, List, Optional

from ..logging_utils import get_logger
from .storage import LoadReport, PathLike, load_transactions, save_transactions
from .transaction import Transaction, TransactionKind

LOGGER = get_logger(__name__)


class Ledger:
    """Manage an ordered collection of transactions."""

    def __init__(self, transactions: Optional[Iterable[Transaction]] = None) -> None:
        self._transactions: List[Transaction] = list(transactions or [])
        LOGGER.debug("Ledger initialised with %s transactions", len(self._transactions))

    def __len__(self) -> int:
        return len(self._transactions)

    @property
    def is_empty(self) -> bool:
        return not self._transactions

    def add_transaction(self, category: str, amount: float, kind: TransactionKind) -> Transaction:
        """Validate and append a new transaction.

        ``ValidationError`` from the constructor propagates and the ledger is
        left unchanged.
        """

        transaction = Transaction(category=category, amount=amount, kind=kind)
        self._transactions.append(transaction)
        LOGGER.debug("Added %s transaction %s=%s", transaction.kind.value, category, amount)
        return transaction

    def list_all(self) -> Optional[Iterator[Transaction]]:
        """Return a lazy iterator in stored order, or ``None`` when empty."""

        if not self._transactions:
            return None
        return iter(tuple(self._transactions))

    def sort_by_amount(self) -> None:
        """Permanently reorder transactions by ascending amount (stable)."""

        self._transactions.sort(key=lambda transaction: transaction.amount)
        LOGGER.debug("Sorted %s transactions by amount", len(self._transactions))

    def calculate_balance(self) -> float:
        """Return total income minus total expenses."""

        return math.fsum(
            transaction.amount if transaction.kind is TransactionKind.INCOME else -transaction.amount
            for transaction in self._transactions
        )

    def expense_statistics(self) -> Dict[str, float]:
        """Total expenses per category, keyed in alphabetical order."""

        totals: Dict[str, List[float]] = defaultdict(list)
        for transaction in self._transactions:
            if transaction.kind is TransactionKind.EXPENSE:
                totals[transaction.category].append(transaction.amount)
        return {category: math.fsum(totals[category]) for category in sorted(totals)}

    def save_to_file(self, path: PathLike) -> int:
        """Overwrite ``path`` with the current transactions and return the count.

        Raises ``StorageError`` when the file cannot be written, and
        ``ValidationError`` when a category is empty or contains whitespace,
        since the line format cannot represent it. Nothing is written in the
        second case.
        """

        return save_transactions(path, self._transactions)

    def load_from_file(self, path: PathLike) -> LoadReport:
        """Append transactions read from ``path``.

        A missing file is reported through ``LoadReport.no_prior_data`` rather
        than an exception.
        """

        report = load_transactions(path)
        self._transactions.extend(report.transactions)
        LOGGER.debug("Ledger now holds %s transactions", len(self._transactions))
        return report

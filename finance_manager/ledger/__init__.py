"""Mini README: Ledger core for the finance manager.

This package holds everything the front ends call into: the immutable
``Transaction`` value, the ``Ledger`` that owns and aggregates transactions,
the flat-file codec, and the structured errors the core raises. Nothing in
here prints; rendering is left to ``finance_manager.interface``.
"""

from .errors import LedgerError, ParseError, StorageError, ValidationError
from .ledger import Ledger
from .storage import LoadReport, is_storable_category, load_transactions, save_transactions
from .transaction import Transaction, TransactionKind

__all__ = [
    "Ledger",
    "LedgerError",
    "LoadReport",
    "ParseError",
    "StorageError",
    "Transaction",
    "TransactionKind",
    "ValidationError",
    "is_storable_category",
    "load_transactions",
    "save_transactions",
]

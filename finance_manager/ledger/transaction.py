"""Mini README: Immutable ledger entries.

Structure:
    * TransactionKind - enum representing income versus expense entries.
    * Transaction - frozen dataclass validated at construction time.

A transaction never changes after it is created. The amount invariant
(finite and non-negative) is checked once in ``__post_init__`` and relied on
everywhere else.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Dict

from .errors import ParseError, ValidationError


class TransactionKind(str, Enum):
    """Enumerate the supported transaction kinds."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_str(cls, value: str) -> "TransactionKind":
        """Coerce arbitrary casing into a valid transaction kind."""

        try:
            normalised = value.strip().lower()
            return cls(normalised)
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported transaction kind: {value}") from error

    @classmethod
    def from_flag(cls, flag: str) -> "TransactionKind":
        """Decode the persisted ``1``/``0`` flag."""

        if flag == "1":
            return cls.INCOME
        if flag == "0":
            return cls.EXPENSE
        raise ParseError(f"Unsupported kind flag: {flag!r}")

    @property
    def flag(self) -> int:
        return 1 if self is TransactionKind.INCOME else 0

    @property
    def label(self) -> str:
        return "Income" if self is TransactionKind.INCOME else "Expense"


@dataclass(frozen=True)
class Transaction:
    """Represent one recorded money movement."""

    category: str
    amount: float
    kind: TransactionKind

    def __post_init__(self) -> None:
        amount = self.amount
        if isinstance(amount, bool) or not isinstance(amount, numbers.Real):
            raise ValidationError(f"Amount must be a number, got {amount!r}")
        if amount < 0:
            raise ValidationError("Amount cannot be negative!")
        if not math.isfinite(amount):
            raise ValidationError("Amount must be a finite number!")
        object.__setattr__(self, "amount", float(amount))
        if not isinstance(self.kind, TransactionKind):
            try:
                kind = TransactionKind.from_str(str(self.kind))
            except ValueError as error:
                raise ValidationError(str(error)) from error
            object.__setattr__(self, "kind", kind)

    def display(self) -> str:
        """Return the fixed-width console line for this transaction."""

        return f"{self.category:<15}{self.amount:<10g}{self.kind.label}"

    def as_dict(self) -> Dict[str, object]:
        """Export the transaction with serialisable values."""

        return {
            "category": self.category,
            "amount": self.amount,
            "kind": self.kind.value,
        }

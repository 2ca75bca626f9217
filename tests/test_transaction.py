"""Mini README: Tests for the immutable transaction value.

Structure:
    * amount validation - negatives, NaN and non-numbers are rejected.
    * kind helpers - string/flag coercion and labels.
    * display - fixed-width console rendering.
"""

from __future__ import annotations

import dataclasses
import math

import pytest

from finance_manager.ledger import ParseError, Transaction, TransactionKind, ValidationError


@pytest.mark.parametrize("amount", [-0.01, -1, -2000.0])
def test_negative_amount_is_rejected(amount: float) -> None:
    """Negative amounts fail with a validation error mentioning the rule."""

    with pytest.raises(ValidationError, match="negative"):
        Transaction("Food", amount, TransactionKind.EXPENSE)


@pytest.mark.parametrize("amount", [0, 0.0, 50, 19.99, 1e12])
def test_non_negative_amount_is_kept_exactly(amount: float) -> None:
    """Accepted amounts are returned unchanged."""

    transaction = Transaction("Food", amount, TransactionKind.EXPENSE)
    assert transaction.amount == amount
    assert isinstance(transaction.amount, float)


@pytest.mark.parametrize("amount", [math.nan, math.inf, "50", None, True])
def test_non_finite_or_non_numeric_amount_is_rejected(amount: object) -> None:
    """Only finite real numbers are valid amounts."""

    with pytest.raises(ValidationError):
        Transaction("Food", amount, TransactionKind.EXPENSE)  # type: ignore[arg-type]


def test_validation_error_is_a_value_error() -> None:
    """Callers catching ``ValueError`` still see validation failures."""

    with pytest.raises(ValueError):
        Transaction("Food", -5, TransactionKind.EXPENSE)


def test_category_is_not_normalised() -> None:
    """Category text is stored verbatim, including empty strings."""

    assert Transaction(" Mixed Case ", 1, TransactionKind.INCOME).category == " Mixed Case "
    assert Transaction("", 1, TransactionKind.INCOME).category == ""


def test_transaction_is_immutable() -> None:
    """Fields cannot be reassigned after construction."""

    transaction = Transaction("Food", 10, TransactionKind.EXPENSE)
    with pytest.raises(dataclasses.FrozenInstanceError):
        transaction.amount = -10  # type: ignore[misc]


def test_kind_accepts_strings() -> None:
    """String kinds are coerced, and unknown kinds are rejected."""

    assert Transaction("Salary", 10, "Income").kind is TransactionKind.INCOME  # type: ignore[arg-type]
    with pytest.raises(ValidationError):
        Transaction("Salary", 10, "refund")  # type: ignore[arg-type]


def test_kind_flags_and_labels() -> None:
    """Persisted flags map to kinds and back."""

    assert TransactionKind.from_flag("1") is TransactionKind.INCOME
    assert TransactionKind.from_flag("0") is TransactionKind.EXPENSE
    assert TransactionKind.INCOME.flag == 1
    assert TransactionKind.EXPENSE.flag == 0
    assert TransactionKind.INCOME.label == "Income"
    assert TransactionKind.EXPENSE.label == "Expense"
    with pytest.raises(ParseError):
        TransactionKind.from_flag("2")


def test_display_uses_fixed_width_columns() -> None:
    """Category and amount are left-aligned in 15 and 10 columns."""

    expense = Transaction("Food", 50, TransactionKind.EXPENSE)
    income = Transaction("Salary", 2000.5, TransactionKind.INCOME)

    assert expense.display() == "Food".ljust(15) + "50".ljust(10) + "Expense"
    assert income.display() == "Salary".ljust(15) + "2000.5".ljust(10) + "Income"


def test_as_dict_is_serialisable() -> None:
    """The export uses plain values for JSON responses."""

    transaction = Transaction("Food", 12.5, TransactionKind.EXPENSE)
    assert transaction.as_dict() == {"category": "Food", "amount": 12.5, "kind": "expense"}

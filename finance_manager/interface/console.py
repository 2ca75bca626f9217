"""Mini README: Console presentation for the finance manager.

Structure:
    * format_transactions / format_statistics / format_balance - text renderers.
    * truncation_warning - notice shown when a load stopped at a bad line.
    * MenuSession - the interactive numbered menu driving one ``Ledger``.

The session receives its ledger explicitly and talks to the terminal through
injectable ``echo``/``prompt`` callables (Typer's by default) so it can be
driven from tests. Ledger errors are shown as ``Error: <message>`` and the loop
carries on, mirroring how the menu lets users re-enter bad input.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Optional

import typer

from ..ledger import Ledger, LedgerError, LoadReport, TransactionKind, ValidationError, is_storable_category
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

TABLE_HEADER = "Category        Amount    Type"
TABLE_RULE = "-" * 34
NO_TRANSACTIONS = "No transactions found."

MENU = "\n".join(
    [
        "",
        "===== SMART FINANCE MANAGER =====",
        "1. Add Income",
        "2. Add Expense",
        "3. Show All Transactions",
        "4. Show Balance",
        "5. Sort by Amount",
        "6. Show Expense Statistics",
        "7. Save & Exit",
    ]
)


def format_transactions(ledger: Ledger) -> str:
    transactions = ledger.list_all()
    if transactions is None:
        return NO_TRANSACTIONS
    lines = ["", TABLE_HEADER, TABLE_RULE]
    lines.extend(transaction.display() for transaction in transactions)
    return "\n".join(lines)


def format_statistics(ledger: Ledger) -> str:
    lines = ["", "Expense Statistics:"]
    lines.extend(f"{category}: {total:g}" for category, total in ledger.expense_statistics().items())
    return "\n".join(lines)


def format_balance(ledger: Ledger) -> str:
    return f"Current Balance: {ledger.calculate_balance():g}"


def truncation_warning(report: LoadReport) -> str:
    return (
        f"Warning: stopped reading {report.path} at unreadable line {report.truncated_at}; "
        "that line and everything after it will be dropped when the ledger is saved."
    )


class MenuSession:
    """Interactive loop over a single ledger instance."""

    def __init__(
        self,
        ledger: Ledger,
        ledger_file: Path,
        *,
        echo: Callable[[str], None] = typer.echo,
        prompt: Callable[..., object] = typer.prompt,
    ) -> None:
        self.ledger = ledger
        self.ledger_file = Path(ledger_file)
        self._echo = echo
        self._prompt = prompt
        self._handlers: Dict[str, Callable[[], bool]] = {
            "1": lambda: self._add(TransactionKind.INCOME),
            "2": lambda: self._add(TransactionKind.EXPENSE),
            "3": self._show_all,
            "4": self._show_balance,
            "5": self._sort,
            "6": self._show_statistics,
            "7": self._save_and_exit,
        }

    def load(self) -> None:
        """Read the ledger file, reporting whether prior data existed."""

        report = self.ledger.load_from_file(self.ledger_file)
        if report.no_prior_data:
            self._echo("No saved file found.")
        else:
            self._echo("Loaded data from file.")
        if report.truncated:
            self._echo(truncation_warning(report))

    def run(self) -> None:
        """Load, then dispatch menu choices until the user saves and exits."""

        self.load()
        while True:
            self._echo(MENU)
            choice = str(self._prompt("Choice")).strip()
            handler = self._handlers.get(choice)
            if handler is None:
                self._echo("Invalid choice.")
                continue
            try:
                if handler():
                    break
            except LedgerError as error:
                LOGGER.debug("Menu choice %s failed: %s", choice, error)
                self._echo(f"Error: {error}")

    def _add(self, kind: TransactionKind) -> bool:
        category = str(self._prompt("Enter category")).strip()
        amount = self._prompt("Enter amount", type=float)
        if not is_storable_category(category):
            raise ValidationError("Category must be a single word without spaces!")
        self.ledger.add_transaction(category, amount, kind)
        return False

    def _show_all(self) -> bool:
        self._echo(format_transactions(self.ledger))
        return False

    def _show_balance(self) -> bool:
        self._echo(format_balance(self.ledger))
        return False

    def _sort(self) -> bool:
        self.ledger.sort_by_amount()
        self._echo("Sorted successfully.")
        return False

    def _show_statistics(self) -> bool:
        self._echo(format_statistics(self.ledger))
        return False

    def _save_and_exit(self) -> bool:
        self.ledger.save_to_file(self.ledger_file)
        self._echo("Saved to file successfully.")
        return True


def run_menu(ledger_file: Path, ledger: Optional[Ledger] = None) -> Ledger:
    """Run a menu session, returning the ledger for callers that inspect it."""

    session = MenuSession(ledger if ledger is not None else Ledger(), ledger_file)
    session.run()
    return session.ledger


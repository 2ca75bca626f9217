"""Mini README: Entry point CLI for the smart finance manager.

This script exposes a Typer CLI. ``menu`` runs the interactive numbered menu;
the other commands perform a single ledger operation against the ledger file
(saving afterwards when they change it), and ``serve`` starts the FastAPI
front end with uvicorn. Settings come from ``FINANCE_MANAGER_*`` environment
variables unless overridden by options.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
import uvicorn

from finance_manager.configuration import get_settings
from finance_manager.interface import (
    format_balance,
    format_statistics,
    format_transactions,
    run_menu,
    truncation_warning,
)
from finance_manager.ledger import Ledger, LedgerError, TransactionKind, is_storable_category
from finance_manager.logging_utils import configure_root_logger

cli = typer.Typer(help="Track income and expenses in a flat ledger file.")

LEDGER_FILE_OPTION = typer.Option(None, "--ledger-file", help="Ledger file to read and write.")


def _resolve_ledger_file(ledger_file: Optional[Path]) -> Path:
    settings = get_settings()
    configure_root_logger(settings.log_level)
    return ledger_file or settings.ledger_file


def _open_ledger(ledger_file: Path) -> Ledger:
    ledger = Ledger()
    try:
        report = ledger.load_from_file(ledger_file)
    except LedgerError as error:
        _fail(error)
    if report.truncated:
        typer.echo(truncation_warning(report), err=True)
    return ledger


def _fail(error: Exception) -> None:
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(code=1)


@cli.command()
def menu(ledger_file: Optional[Path] = LEDGER_FILE_OPTION) -> None:
    """Run the interactive menu; the ledger is saved when you choose Save & Exit."""

    path = _resolve_ledger_file(ledger_file)
    try:
        run_menu(path)
    except LedgerError as error:
        _fail(error)


@cli.command()
def add(
    category: str = typer.Argument(..., help="Single-word category label."),
    amount: float = typer.Argument(..., help="Non-negative amount."),
    kind: TransactionKind = typer.Option(TransactionKind.EXPENSE, help="income or expense."),
    ledger_file: Optional[Path] = LEDGER_FILE_OPTION,
) -> None:
    """Record one transaction and save the ledger."""

    path = _resolve_ledger_file(ledger_file)
    ledger = _open_ledger(path)
    try:
        if not is_storable_category(category):
            raise typer.BadParameter("Category must be a single word without spaces.")
        ledger.add_transaction(category, amount, kind)
        ledger.save_to_file(path)
    except LedgerError as error:
        _fail(error)
    typer.echo(f"Recorded {kind.value} {category} {amount:g}.")


@cli.command("list")
def list_transactions(ledger_file: Optional[Path] = LEDGER_FILE_OPTION) -> None:
    """Show every transaction in stored order."""

    ledger = _open_ledger(_resolve_ledger_file(ledger_file))
    typer.echo(format_transactions(ledger))


@cli.command()
def balance(ledger_file: Optional[Path] = LEDGER_FILE_OPTION) -> None:
    """Show income minus expenses."""

    ledger = _open_ledger(_resolve_ledger_file(ledger_file))
    typer.echo(format_balance(ledger))


@cli.command()
def sort(ledger_file: Optional[Path] = LEDGER_FILE_OPTION) -> None:
    """Sort the ledger by amount and save the new order."""

    path = _resolve_ledger_file(ledger_file)
    ledger = _open_ledger(path)
    ledger.sort_by_amount()
    try:
        ledger.save_to_file(path)
    except LedgerError as error:
        _fail(error)
    typer.echo("Sorted successfully.")


@cli.command()
def stats(ledger_file: Optional[Path] = LEDGER_FILE_OPTION) -> None:
    """Show expense totals per category."""

    ledger = _open_ledger(_resolve_ledger_file(ledger_file))
    typer.echo(format_statistics(ledger))


@cli.command()
def serve(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI front end using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    # Browsers cannot open the 0.0.0.0 sentinel, so point them at localhost.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Serving {settings.ledger_file} on {effective_host}:{effective_port}.\n"
        f"API docs at http://{browser_host}:{effective_port}/docs"
    )
    uvicorn.run(
        "finance_manager.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


if __name__ == "__main__":
    cli()

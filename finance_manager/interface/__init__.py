"""Mini README: Front ends for the finance manager.

Exports the interactive console session and the FastAPI application factory.
Both receive an explicit ledger (or ledger file) and only call the public
``Ledger`` operations.
"""

from .console import (
    MenuSession,
    format_balance,
    format_statistics,
    format_transactions,
    run_menu,
    truncation_warning,
)
from .web_app import create_application

__all__ = [
    "MenuSession",
    "create_application",
    "format_balance",
    "format_statistics",
    "format_transactions",
    "run_menu",
    "truncation_warning",
]

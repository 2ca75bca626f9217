"""Mini README: FastAPI-powered JSON front end for the finance manager.

Structure:
    * create_application - application factory wiring routes to one ledger.

The factory loads the configured ledger file once and keeps the ``Ledger``
instance in the closure shared by every route. Handlers are plain functions,
which FastAPI runs in its threadpool, so every ledger access is serialised by a
lock owned by the application. Nothing
is written back until ``POST /save`` is called.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Form, HTTPException
from fastapi.responses import JSONResponse

from ..configuration import get_settings
from ..ledger import Ledger, StorageError, TransactionKind, ValidationError, is_storable_category
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


def create_application(ledger_file: Optional[Path] = None) -> FastAPI:
    """Create the FastAPI application with routes bound to a loaded ledger."""

    app = FastAPI(title="Smart Finance Manager", version="1.0.0")
    path = Path(ledger_file) if ledger_file is not None else get_settings().ledger_file
    ledger = Ledger()
    lock = threading.Lock()
    load_report = ledger.load_from_file(path)
    LOGGER.info(
        "Serving ledger %s (%s transactions, prior data: %s)",
        path,
        load_report.loaded,
        not load_report.no_prior_data,
    )

    @app.get("/transactions")
    def list_transactions() -> JSONResponse:
        """Return transactions in stored order."""

        with lock:
            transactions = ledger.list_all()
            if transactions is None:
                return JSONResponse({"transactions": [], "message": "No transactions found."})
            return JSONResponse({"transactions": [transaction.as_dict() for transaction in transactions]})

    @app.post("/transactions")
    def add_transaction(
        category: str = Form(...),
        amount: float = Form(...),
        kind: TransactionKind = Form(...),
    ) -> JSONResponse:
        """Record a new income or expense."""

        if not is_storable_category(category):
            raise HTTPException(status_code=400, detail="Category must be a single word without spaces.")
        try:
            with lock:
                transaction = ledger.add_transaction(category, amount, kind)
        except ValidationError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        LOGGER.info("Recorded %s of %.2f under %s", kind.value, amount, category)
        return JSONResponse({"transaction": transaction.as_dict()}, status_code=201)

    @app.post("/transactions/sort")
    def sort_transactions() -> JSONResponse:
        """Sort the stored transactions by ascending amount."""

        with lock:
            ledger.sort_by_amount()
            transactions = ledger.list_all() or iter(())
            return JSONResponse({"transactions": [transaction.as_dict() for transaction in transactions]})

    @app.get("/balance")
    def balance() -> JSONResponse:
        """Return income minus expenses."""

        with lock:
            return JSONResponse({"balance": ledger.calculate_balance()})

    @app.get("/statistics")
    def statistics() -> JSONResponse:
        """Return expense totals per category."""

        with lock:
            return JSONResponse({"expenses_by_category": ledger.expense_statistics()})

    @app.post("/save")
    def save() -> JSONResponse:
        """Write the ledger back to its file."""

        try:
            with lock:
                saved = ledger.save_to_file(path)
        except ValidationError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        except StorageError as error:
            raise HTTPException(status_code=500, detail=str(error)) from error
        LOGGER.info("Saved %s transactions to %s", saved, path)
        return JSONResponse({"saved": saved, "path": str(path)})

    return app

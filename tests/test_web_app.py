"""Mini README: Tests for the FastAPI front end.

The application is created against a temporary ledger file and exercised with
FastAPI's ``TestClient`` using form posts, matching how the routes are declared.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from finance_manager.interface import create_application


@pytest.fixture()
def ledger_file(tmp_path: Path) -> Path:
    return tmp_path / "finance.txt"


@pytest.fixture()
def client(ledger_file: Path) -> TestClient:
    return TestClient(create_application(ledger_file=ledger_file))


def _add(client: TestClient, category: str, amount: float, kind: str):
    return client.post("/transactions", data={"category": category, "amount": amount, "kind": kind})


def test_empty_ledger_reports_no_transactions(client: TestClient) -> None:
    """Listing an empty ledger includes the explicit message."""

    payload = client.get("/transactions").json()
    assert payload == {"transactions": [], "message": "No transactions found."}


def test_walkthrough_over_http(client: TestClient, ledger_file: Path) -> None:
    """Adding, aggregating, sorting and saving through the API."""

    assert _add(client, "Food", 50, "expense").status_code == 201
    assert _add(client, "Salary", 2000, "income").status_code == 201
    assert _add(client, "Food", 20, "expense").status_code == 201

    assert client.get("/balance").json()["balance"] == pytest.approx(1930)
    assert client.get("/statistics").json() == {"expenses_by_category": {"Food": 70.0}}

    sorted_payload = client.post("/transactions/sort").json()
    assert [entry["amount"] for entry in sorted_payload["transactions"]] == [20.0, 50.0, 2000.0]

    saved = client.post("/save").json()
    assert saved["saved"] == 3
    assert ledger_file.read_text(encoding="utf-8") == "Food 20 0\nFood 50 0\nSalary 2000 1\n"


def test_invalid_input_is_rejected(client: TestClient) -> None:
    """Negative amounts and multi-word categories return 400; bad kinds 422."""

    negative = _add(client, "Food", -1, "expense")
    assert negative.status_code == 400
    assert "negative" in negative.json()["detail"]

    assert _add(client, "Fast food", 5, "expense").status_code == 400
    assert _add(client, "Food", 5, "refund").status_code == 422
    assert client.get("/transactions").json()["transactions"] == []


def test_application_loads_existing_file(ledger_file: Path) -> None:
    """Transactions on disk are available as soon as the app starts."""

    ledger_file.write_text("Salary 100 1\nRent 40 0\n", encoding="utf-8")
    client = TestClient(create_application(ledger_file=ledger_file))

    assert client.get("/balance").json()["balance"] == pytest.approx(60)
    assert len(client.get("/transactions").json()["transactions"]) == 2


def test_save_failure_returns_server_error(tmp_path: Path) -> None:
    """Write failures surface as HTTP 500 instead of silent success."""

    client = TestClient(create_application(ledger_file=tmp_path / "missing" / "finance.txt"))
    _add(client, "Food", 5, "expense")

    response = client.post("/save")
    assert response.status_code == 500

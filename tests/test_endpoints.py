"""
Route-level tests with the service layer monkeypatched out.

These check request parsing, response shapes and status codes without a
database; the session guard is overridden where a route needs it.
"""

from datetime import date, datetime
from decimal import Decimal
from types import SimpleNamespace

import pytest

from test_fixtures import client, make_category, make_document
import api.routes.health as health_routes
from api.dependencies import require_session
from domain.enums import DocumentKind
from main import app
from services.category_service import CategoryService
from services.dashboard_service import DashboardService
from services.document_service import DocumentService
from services.food_service import FoodService


@pytest.fixture(autouse=True)
def authorized():
    app.dependency_overrides[require_session] = lambda: "test-session"
    yield
    app.dependency_overrides.pop(require_session, None)


def test_health_check(monkeypatch):
    monkeypatch.setattr(health_routes, "check_database", lambda: True)
    r = client.get("/health-check")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert body["service"] == "SCPP"
    assert body["database"] == "ok"


def test_health_check_reports_database_down(monkeypatch):
    monkeypatch.setattr(health_routes, "check_database", lambda: False)
    r = client.get("/health-check")
    assert r.status_code == 200
    assert r.json()["status"] == "degraded"
    assert r.json()["database"] == "unavailable"


def test_list_categories(monkeypatch):
    monkeypatch.setattr(
        CategoryService,
        "list_categories",
        lambda db: [make_category(1, "Groceries", 1), make_category(2, "Rent", 2)],
    )
    r = client.get("/categories")
    assert r.status_code == 200
    assert [c["description"] for c in r.json()] == ["Groceries", "Rent"]


def test_list_documents_builds_filter_from_query(monkeypatch):
    captured = {}

    def fake_list(db, filters):
        captured["filters"] = filters
        return [make_document(document_id=7, purpose="Train ticket", category=None)]

    monkeypatch.setattr(DocumentService, "list_documents", fake_list)
    r = client.get(
        "/documents",
        params=[
            ("document_type_id", 1),
            ("document_type_id", 3),
            ("start_date", "2024-01-01"),
            ("search_phrase", "train"),
            ("search_ignores_filters", "true"),
            ("id", 7),
        ],
    )
    assert r.status_code == 200
    doc = r.json()[0]
    assert doc["document_id"] == 7
    assert doc["category"] is None
    assert doc["document_type"] == {"id": 1, "description": "expense"}

    filters = captured["filters"]
    assert filters.document_type_ids == [1, 3]
    assert filters.start_date == date(2024, 1, 1)
    assert filters.ids == [7]
    assert filters.ignore_other_filters


def test_create_document_returns_envelope(monkeypatch):
    monkeypatch.setattr(
        DocumentService,
        "create_document",
        lambda db, payload: make_document(
            document_id=11,
            document_type_id=payload.document_type_id,
            amount=payload.amount,
            day=payload.date,
        ),
    )
    r = client.post(
        "/documents",
        json={
            "document_type_id": DocumentKind.INCOME.value,
            "purpose": "Salary",
            "amount": 2500,
            "date": "2024-03-25",
            "category_id": 1,
        },
    )
    assert r.status_code == 201
    body = r.json()
    assert body["success"] is True
    assert body["message"] == "Document created"
    assert body["data"]["amount"] == 2500.0
    assert body["data"]["document_type"]["description"] == "income"


def test_create_document_requires_date():
    r = client.post("/documents", json={"document_type_id": 1, "amount": 5})
    assert r.status_code == 422


def test_dashboard_monthly_graph_shape(monkeypatch):
    monkeypatch.setattr(
        DashboardService,
        "monthly_graph",
        lambda db, n_months, today: {
            "labels": ["2024-03"],
            "expenses": [1.5],
            "income": [0.0],
            "savings": [10.0],
            "range": {"start": date(2024, 3, 1), "end": date(2024, 3, 31)},
        },
    )
    r = client.get("/dashboard/monthly-graph", params={"n_months": 1})
    assert r.status_code == 200
    assert r.json()["range"] == {"start": "2024-03-01", "end": "2024-03-31"}


def test_food_transactions_listing(monkeypatch):
    tx = SimpleNamespace(
        transaction_id=3,
        food_item_id=1,
        change_qty=Decimal("-0.250"),
        transaction_type="consumption",
        occurred_at=datetime(2024, 3, 1, 8, 30),
        note=None,
        code=None,
        best_before=date(2024, 3, 10),
        lot_id=2,
        remaining_quantity=None,
    )
    monkeypatch.setattr(FoodService, "list_transactions", lambda db, food_item_id: [(tx, "Milk", "l")])
    r = client.get("/food/transactions")
    assert r.status_code == 200
    row = r.json()[0]
    assert row["change_qty"] == -0.25
    assert row["item_name"] == "Milk"
    assert row["lot_id"] == 2
    assert row["remaining_quantity"] is None


def test_food_update_reports_no_changes(monkeypatch):
    tx = SimpleNamespace(
        transaction_id=5,
        food_item_id=1,
        change_qty=Decimal("2"),
        transaction_type="restock",
        occurred_at=datetime(2024, 3, 1),
        note="x",
        code=None,
        best_before=None,
        lot_id=None,
        remaining_quantity=Decimal("2"),
    )
    monkeypatch.setattr(FoodService, "update_transaction", lambda db, tid, payload: (tx, False))
    r = client.put("/food/transactions/5", json={"note": "x"})
    assert r.status_code == 200
    assert r.json()["message"] == "No changes"


def test_food_update_rejects_non_positive_quantity():
    r = client.put("/food/transactions/5", json={"quantity": 0})
    assert r.status_code == 422

"""
Tests for /dashboard endpoints.

- Happy path: data function output mapped into the response model
- Every response carries Cache-Control: no-store
- Failure path: store error -> 500 with a fetch_error body
"""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from dashboard.db.client import get_query_executor
from dashboard.main import app


@pytest.fixture
def client(db):
    """Test client with the query executor replaced by the mock `db`."""
    app.dependency_overrides[get_query_executor] = lambda: db

    yield TestClient(app)

    app.dependency_overrides.clear()


class TestRevenueChart:
    """Test GET /dashboard/revenue."""

    def test_returns_revenue_and_y_axis(self, client, db):
        db.execute.return_value = [
            {"month": "Jan", "revenue": 2000},
            {"month": "Feb", "revenue": 1800},
        ]

        response = client.get("/dashboard/revenue")

        assert response.status_code == 200
        data = response.json()
        assert data["revenue"][0] == {"month": "Jan", "revenue": 2000}
        assert data["top_label"] == 2000
        assert data["y_axis_labels"] == ["$2K", "$1K", "$0K"]
        assert response.headers["cache-control"] == "no-store"

    def test_missing_revenue_renders_empty_chart(self, client, db):
        db.execute.return_value = None

        response = client.get("/dashboard/revenue")

        assert response.status_code == 200
        assert response.json() == {"revenue": [], "y_axis_labels": ["$0K"], "top_label": 0}

    def test_null_revenue_passes_through(self, client, db):
        db.execute.return_value = [
            {"month": "Jan", "revenue": None},
            {"month": "Feb", "revenue": 1800},
        ]

        response = client.get("/dashboard/revenue")

        assert response.status_code == 200
        data = response.json()
        assert data["revenue"][0] == {"month": "Jan", "revenue": None}
        assert data["top_label"] == 2000
        assert data["y_axis_labels"] == ["$2K", "$1K", "$0K"]

    def test_store_error_returns_500(self, client, db):
        db.execute.side_effect = ConnectionError("database unreachable")

        response = client.get("/dashboard/revenue")

        assert response.status_code == 500
        assert response.json()["detail"]["error"] == "fetch_error"


class TestLatestInvoices:
    """Test GET /dashboard/latest-invoices."""

    def test_returns_formatted_invoices(self, client, db):
        db.execute.return_value = [
            {
                "amount": 15795,
                "name": "Delba de Oliveira",
                "image_url": "/customers/delba-de-oliveira.png",
                "email": "delba@oliveira.com",
                "id": "3958dc9e-712f-4377-85e9-fec4b6a6442a",
            }
        ]

        response = client.get("/dashboard/latest-invoices")

        assert response.status_code == 200
        invoice = response.json()["invoices"][0]
        assert invoice["amount"] == "$157.95"
        assert invoice["name"] == "Delba de Oliveira"
        assert response.headers["cache-control"] == "no-store"


class TestCardData:
    """Test GET /dashboard/cards."""

    def test_returns_card_data(self, client):
        card_data = {
            "number_of_customers": 10,
            "number_of_invoices": 5,
            "total_paid_invoices": "$50.00",
            "total_pending_invoices": "$20.00",
        }

        with patch(
            "dashboard.routes.dashboard.fetch_card_data",
            new=AsyncMock(return_value=card_data),
        ):
            response = client.get("/dashboard/cards")

        assert response.status_code == 200
        assert response.json() == card_data

    def test_partial_failure_returns_500(self, client, db):
        """One failing query fails the whole endpoint; no partial data."""
        def execute(query, *params):
            if "customers" in query:
                raise TimeoutError("statement timeout")
            return [{"count": 1, "paid": 0, "pending": 0}]

        db.execute.side_effect = execute

        response = client.get("/dashboard/cards")

        assert response.status_code == 500
        assert response.json()["detail"] == {
            "error": "fetch_error",
            "details": "Failed to fetch card data",
        }


class TestHealth:
    """Test GET /health."""

    def test_health_does_not_touch_the_database(self, client, db):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}
        db.execute.assert_not_awaited()

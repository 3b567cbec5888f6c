"""
Tests for customer queries.
"""

import pytest

from dashboard.services.customer_service import (
    CUSTOMERS_COUNT_QUERY,
    CUSTOMERS_QUERY,
    FILTERED_CUSTOMERS_QUERY,
    fetch_customers,
    fetch_customers_pages,
    fetch_filtered_customers,
)


def _customer_rows():
    return [
        {
            "id": "1",
            "name": "John Doe",
            "email": "john@example.com",
            "image_url": "https://example.com/john.jpg",
            "total_invoices": 5,
            "total_pending": "100000",
            "total_paid": "50000",
        },
        {
            "id": "2",
            "name": "Johnny Appleseed",
            "email": "johnny@example.com",
            "image_url": "https://example.com/johnny.jpg",
            "total_invoices": 3,
            "total_pending": 5000,
            "total_paid": 30000,
        },
    ]


class TestFetchCustomers:
    """Test loading customer options."""

    @pytest.mark.asyncio
    async def test_returns_id_and_name_rows(self, db, no_store):
        rows = [{"id": "1", "name": "Amy"}, {"id": "2", "name": "Bob"}]
        db.execute.return_value = rows

        result = await fetch_customers(db, no_store)

        assert result == rows
        db.execute.assert_awaited_once_with(CUSTOMERS_QUERY)
        assert "ORDER BY name ASC" in CUSTOMERS_QUERY

    @pytest.mark.asyncio
    async def test_returns_empty_list(self, db, no_store):
        db.execute.return_value = []

        assert await fetch_customers(db, no_store) == []

    @pytest.mark.asyncio
    async def test_bypasses_cache(self, db, no_store):
        await fetch_customers(db, no_store)

        no_store.assert_called_once()


class TestFetchFilteredCustomers:
    """Test searching customers with their invoice totals."""

    @pytest.mark.asyncio
    async def test_formats_totals_as_currency(self, db, no_store):
        db.execute.return_value = _customer_rows()

        result = await fetch_filtered_customers(db, no_store, "John", 1)

        assert result[0]["total_pending"] == "$1,000.00"
        assert result[0]["total_paid"] == "$500.00"
        assert result[1]["total_pending"] == "$50.00"
        assert result[1]["total_paid"] == "$300.00"
        assert result[0]["total_invoices"] == 5
        assert result[0]["name"] == "John Doe"

    @pytest.mark.asyncio
    async def test_null_totals_render_as_zero(self, db, no_store):
        """A customer with no invoices may carry NULL sums."""
        row = {**_customer_rows()[0], "total_invoices": 0, "total_pending": None, "total_paid": None}
        db.execute.return_value = [row]

        result = await fetch_filtered_customers(db, no_store, "John", 1)

        assert result[0]["total_pending"] == "$0.00"
        assert result[0]["total_paid"] == "$0.00"

    @pytest.mark.asyncio
    async def test_binds_pattern_limit_and_offset(self, db, no_store):
        await fetch_filtered_customers(db, no_store, "John", 1)

        db.execute.assert_awaited_once_with(FILTERED_CUSTOMERS_QUERY, "%John%", "%John%", 6, 0)

    @pytest.mark.asyncio
    async def test_offsets_by_page(self, db, no_store):
        await fetch_filtered_customers(db, no_store, "John", 2)

        db.execute.assert_awaited_once_with(FILTERED_CUSTOMERS_QUERY, "%John%", "%John%", 6, 6)

    @pytest.mark.asyncio
    async def test_passes_special_characters_as_parameters(self, db, no_store):
        await fetch_filtered_customers(db, no_store, "O'Brien & Co", 1)

        query, *params = db.execute.await_args.args
        assert "O'Brien" not in query
        assert params[:2] == ["%O'Brien & Co%", "%O'Brien & Co%"]

    @pytest.mark.asyncio
    async def test_returns_empty_list(self, db, no_store):
        db.execute.return_value = []

        assert await fetch_filtered_customers(db, no_store, "nobody", 1) == []

    @pytest.mark.asyncio
    async def test_bypasses_cache(self, db, no_store):
        await fetch_filtered_customers(db, no_store, "", 1)

        no_store.assert_called_once()


class TestFetchCustomersPages:
    """Test counting pages of matching customers."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("count, expected", [(18, 3), (0, 0), (5, 1), (12, 2), ("7", 2)])
    async def test_page_count(self, db, no_store, count, expected):
        db.execute.return_value = [{"count": count}]

        result = await fetch_customers_pages(db, no_store, "John")

        assert result == expected
        db.execute.assert_awaited_once_with(CUSTOMERS_COUNT_QUERY, "%John%", "%John%")

    @pytest.mark.asyncio
    async def test_propagates_store_errors(self, db, no_store):
        db.execute.side_effect = ConnectionError("connection refused")

        with pytest.raises(ConnectionError):
            await fetch_customers_pages(db, no_store, "John")

    @pytest.mark.asyncio
    async def test_bypasses_cache(self, db, no_store):
        db.execute.return_value = [{"count": 0}]

        await fetch_customers_pages(db, no_store, "")

        no_store.assert_called_once()

"""
Overview page data: revenue chart, latest invoices and summary cards.

RULES:
1. Every function calls no_store() before querying (data is always fresh)
2. Store errors propagate unchanged; nothing here retries or swallows them
3. Invoice amounts are cents; revenue amounts are already whole dollars
"""

import asyncio
import logging
from typing import List, Optional, cast

from dashboard.db.client import QueryExecutor
from dashboard.db.types import CardData, LatestInvoice, LatestInvoiceRow, Numeric, RevenuePoint
from dashboard.utils.cache import NoStore
from dashboard.utils.constants import LATEST_INVOICES_LIMIT
from dashboard.utils.formatting import format_currency

logger = logging.getLogger(__name__)

REVENUE_QUERY = "SELECT * FROM revenue"

LATEST_INVOICES_QUERY = """
    SELECT invoices.amount, customers.name, customers.image_url, customers.email, invoices.id
    FROM invoices
    JOIN customers ON invoices.customer_id = customers.id
    ORDER BY invoices.date DESC
    LIMIT $1
"""

INVOICE_COUNT_QUERY = "SELECT COUNT(*) FROM invoices"

CUSTOMER_COUNT_QUERY = "SELECT COUNT(*) FROM customers"

INVOICE_STATUS_QUERY = """
    SELECT
        SUM(CASE WHEN status = 'paid' THEN amount ELSE 0 END) AS "paid",
        SUM(CASE WHEN status = 'pending' THEN amount ELSE 0 END) AS "pending"
    FROM invoices
"""


async def fetch_revenue(
    db: QueryExecutor,
    no_store: NoStore,
) -> Optional[List[RevenuePoint]]:
    """
    Fetch monthly revenue for the chart.

    Args:
        db: Query executor
        no_store: Cache bypass directive for the current request

    Returns:
        Revenue rows exactly as the store returned them. A None result is
        passed through rather than replaced with an empty list.
    """
    no_store()

    logger.debug("Fetching revenue data")

    revenue = await db.execute(REVENUE_QUERY)

    logger.info(f"Fetched revenue data ({len(revenue) if revenue is not None else 'no'} rows)")

    return cast(Optional[List[RevenuePoint]], revenue)


async def fetch_latest_invoices(
    db: QueryExecutor,
    no_store: NoStore,
) -> List[LatestInvoice]:
    """
    Fetch the five most recent invoices with customer display fields.

    Returns:
        Up to five invoices, newest first, with `amount` formatted as
        currency (e.g. "$157.95").
    """
    no_store()

    rows = cast(
        List[LatestInvoiceRow],
        await db.execute(LATEST_INVOICES_QUERY, LATEST_INVOICES_LIMIT),
    )

    latest_invoices = [
        cast(LatestInvoice, {**invoice, "amount": format_currency(invoice["amount"])})
        for invoice in rows
    ]

    logger.info(f"Fetched {len(latest_invoices)} latest invoices")

    return latest_invoices


def _first_value(rows: Optional[list], key: str) -> Optional[Numeric]:
    """Value of `key` in the first row, or None if there is no such row/value."""
    if not rows:
        return None
    return rows[0].get(key)


async def fetch_card_data(
    db: QueryExecutor,
    no_store: NoStore,
) -> CardData:
    """
    Fetch the summary cards: customer/invoice counts and paid/pending totals.

    The three queries are independent and run concurrently; if any of them
    fails the whole call fails.

    Returns:
        CardData. Missing counts become 0 and missing totals "$0.00".
    """
    no_store()

    invoice_count, customer_count, invoice_status = await asyncio.gather(
        db.execute(INVOICE_COUNT_QUERY),
        db.execute(CUSTOMER_COUNT_QUERY),
        db.execute(INVOICE_STATUS_QUERY),
    )

    number_of_invoices = int(_first_value(invoice_count, "count") or 0)
    number_of_customers = int(_first_value(customer_count, "count") or 0)
    total_paid_invoices = format_currency(_first_value(invoice_status, "paid") or 0)
    total_pending_invoices = format_currency(_first_value(invoice_status, "pending") or 0)

    logger.info(
        f"Fetched card data: {number_of_invoices} invoices, "
        f"{number_of_customers} customers"
    )

    return {
        "number_of_customers": number_of_customers,
        "number_of_invoices": number_of_invoices,
        "total_paid_invoices": total_paid_invoices,
        "total_pending_invoices": total_pending_invoices,
    }

"""
Customer queries: select options, searchable table and page count.
"""

import logging
from typing import List, cast

from dashboard.db.client import QueryExecutor
from dashboard.db.types import CustomerField, CustomersTableRow, FormattedCustomersTable
from dashboard.services.invoice_service import search_pattern
from dashboard.utils.cache import NoStore
from dashboard.utils.constants import ITEMS_PER_PAGE
from dashboard.utils.formatting import format_currency
from dashboard.utils.pagination import count_pages, page_offset

logger = logging.getLogger(__name__)

CUSTOMERS_QUERY = """
    SELECT id, name
    FROM customers
    ORDER BY name ASC
"""

FILTERED_CUSTOMERS_QUERY = """
    SELECT
        customers.id,
        customers.name,
        customers.email,
        customers.image_url,
        COUNT(invoices.id) AS total_invoices,
        SUM(CASE WHEN invoices.status = 'pending' THEN invoices.amount ELSE 0 END) AS total_pending,
        SUM(CASE WHEN invoices.status = 'paid' THEN invoices.amount ELSE 0 END) AS total_paid
    FROM customers
    LEFT JOIN invoices ON customers.id = invoices.customer_id
    WHERE
        customers.name ILIKE $1 OR
        customers.email ILIKE $2
    GROUP BY customers.id, customers.name, customers.email, customers.image_url
    ORDER BY customers.name ASC
    LIMIT $3 OFFSET $4
"""

CUSTOMERS_COUNT_QUERY = """
    SELECT COUNT(*)
    FROM customers
    WHERE
        name ILIKE $1 OR
        email ILIKE $2
"""


async def fetch_customers(
    db: QueryExecutor,
    no_store: NoStore,
) -> List[CustomerField]:
    """Fetch every customer as an {id, name} option, sorted by name."""
    no_store()

    customers = await db.execute(CUSTOMERS_QUERY)

    logger.info(f"Fetched {len(customers) if customers else 0} customers")

    return cast(List[CustomerField], customers)


async def fetch_filtered_customers(
    db: QueryExecutor,
    no_store: NoStore,
    query: str,
    current_page: int,
) -> List[FormattedCustomersTable]:
    """
    Fetch one page of customers whose name or email matches a search term.

    Each customer carries its invoice count and pending/paid totals; the
    totals are formatted as currency.

    Args:
        db: Query executor
        no_store: Cache bypass directive for the current request
        query: Free-text search term, matched case-insensitively
        current_page: 1-based page number

    Returns:
        Up to ITEMS_PER_PAGE customers sorted by name.
    """
    no_store()

    pattern = search_pattern(query)
    offset = page_offset(current_page)

    rows = cast(
        List[CustomersTableRow],
        await db.execute(FILTERED_CUSTOMERS_QUERY, pattern, pattern, ITEMS_PER_PAGE, offset),
    )

    customers = [
        cast(FormattedCustomersTable, {
            **customer,
            "total_pending": format_currency(customer["total_pending"]),
            "total_paid": format_currency(customer["total_paid"]),
        })
        for customer in rows
    ]

    logger.info(f"Fetched {len(customers)} customers for page {current_page} (offset={offset})")

    return customers


async def fetch_customers_pages(
    db: QueryExecutor,
    no_store: NoStore,
    query: str,
) -> int:
    """
    Count the pages of customers whose name or email matches a search term.

    Returns:
        ceil(matches / ITEMS_PER_PAGE); 0 when nothing matches.
    """
    no_store()

    pattern = search_pattern(query)

    rows = await db.execute(CUSTOMERS_COUNT_QUERY, pattern, pattern)
    count = int(rows[0]["count"])

    pages = count_pages(count)

    logger.info(f"Customer search matched {count} rows ({pages} pages)")

    return pages

"""
Invoice table queries: search, page count and single-invoice lookup.

RULES:
1. The search term is bound as a parameter (`%term%`), never spliced into SQL
2. ILIKE makes the match case-insensitive; the term is passed through as typed
3. Table rows keep `amount` in cents; only the edit form converts to dollars
"""

import logging
from typing import List, Optional, cast

from dashboard.db.client import QueryExecutor
from dashboard.db.types import InvoiceForm, InvoiceTableRow
from dashboard.utils.cache import NoStore
from dashboard.utils.constants import ITEMS_PER_PAGE
from dashboard.utils.pagination import count_pages, page_offset

logger = logging.getLogger(__name__)

# Shared by the rows query and the count query so both see the same matches
INVOICE_SEARCH_PREDICATE = """
    customers.name ILIKE $1 OR
    customers.email ILIKE $2 OR
    invoices.amount::text ILIKE $3 OR
    invoices.date::text ILIKE $4 OR
    invoices.status ILIKE $5
"""

FILTERED_INVOICES_QUERY = f"""
    SELECT
        invoices.id,
        invoices.customer_id,
        invoices.amount,
        invoices.date,
        invoices.status,
        customers.name,
        customers.email,
        customers.image_url
    FROM invoices
    JOIN customers ON invoices.customer_id = customers.id
    WHERE {INVOICE_SEARCH_PREDICATE}
    ORDER BY invoices.date DESC
    LIMIT $6 OFFSET $7
"""

INVOICES_COUNT_QUERY = f"""
    SELECT COUNT(*)
    FROM invoices
    JOIN customers ON invoices.customer_id = customers.id
    WHERE {INVOICE_SEARCH_PREDICATE}
"""

INVOICE_BY_ID_QUERY = """
    SELECT
        invoices.id,
        invoices.customer_id,
        invoices.amount,
        invoices.status
    FROM invoices
    WHERE invoices.id = $1
"""

# Number of columns INVOICE_SEARCH_PREDICATE matches the term against
_SEARCHED_COLUMNS = 5


def search_pattern(query: str) -> str:
    """Wrap a search term for substring matching with ILIKE."""
    return f"%{query}%"


async def fetch_filtered_invoices(
    db: QueryExecutor,
    no_store: NoStore,
    query: str,
    current_page: int,
) -> List[InvoiceTableRow]:
    """
    Fetch one page of invoices matching a free-text search.

    The term is matched case-insensitively against customer name, email,
    amount, date and status.

    Args:
        db: Query executor
        no_store: Cache bypass directive for the current request
        query: Free-text search term ("" matches everything)
        current_page: 1-based page number

    Returns:
        Up to ITEMS_PER_PAGE invoices, newest first. `amount` is left in
        cents (not formatted).
    """
    no_store()

    pattern = search_pattern(query)
    offset = page_offset(current_page)

    invoices = await db.execute(
        FILTERED_INVOICES_QUERY,
        *([pattern] * _SEARCHED_COLUMNS),
        ITEMS_PER_PAGE,
        offset,
    )

    logger.info(
        f"Fetched {len(invoices) if invoices else 0} invoices for page {current_page} "
        f"(offset={offset})"
    )

    return cast(List[InvoiceTableRow], invoices)


async def fetch_invoices_pages(
    db: QueryExecutor,
    no_store: NoStore,
    query: str,
) -> int:
    """
    Count the pages of invoices matching a free-text search.

    Returns:
        ceil(matches / ITEMS_PER_PAGE); 0 when nothing matches.
    """
    no_store()

    pattern = search_pattern(query)

    rows = await db.execute(INVOICES_COUNT_QUERY, *([pattern] * _SEARCHED_COLUMNS))
    count = int(rows[0]["count"])

    pages = count_pages(count)

    logger.info(f"Invoice search matched {count} rows ({pages} pages)")

    return pages


async def fetch_invoice_by_id(
    db: QueryExecutor,
    no_store: NoStore,
    invoice_id: str,
) -> Optional[InvoiceForm]:
    """
    Fetch a single invoice for the edit form.

    Args:
        db: Query executor
        no_store: Cache bypass directive for the current request
        invoice_id: Invoice UUID

    Returns:
        The invoice with `amount` converted from cents to dollars
        (1050 -> 10.5), or None if no invoice has this id.
    """
    no_store()

    rows = await db.execute(INVOICE_BY_ID_QUERY, invoice_id)

    if not rows:
        logger.warning(f"Invoice {invoice_id} not found")
        return None

    invoice = rows[0]
    amount = invoice.get("amount")

    logger.info(f"Fetched invoice {invoice_id}")

    return cast(InvoiceForm, {
        **invoice,
        "amount": amount / 100 if amount is not None else None,
    })

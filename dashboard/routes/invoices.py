"""
Invoice API endpoints.

1. GET /invoices - Search invoices, one page at a time
2. GET /invoices/{invoice_id} - Invoice edit form data plus customer options
"""

import asyncio
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from dashboard.db.client import QueryExecutor, get_query_executor
from dashboard.schemas.customers import CustomerOptionResponse
from dashboard.schemas.invoices import (
    InvoiceEditResponse,
    InvoiceFormResponse,
    InvoiceTableItem,
    InvoiceTableResponse,
)
from dashboard.services import (
    fetch_customers,
    fetch_filtered_invoices,
    fetch_invoice_by_id,
    fetch_invoices_pages,
)
from dashboard.utils.cache import NoStore, get_no_store
from dashboard.utils.formatting import format_currency, format_date_to_local
from dashboard.utils.pagination import generate_pagination

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/invoices", tags=["invoices"])


@router.get(
    "",
    response_model=InvoiceTableResponse,
    status_code=status.HTTP_200_OK,
    summary="Search invoices",
    description="""
    Case-insensitive search over customer name, email, amount, date and
    status, newest first, 6 invoices per page.

    Each row keeps the stored amount in cents and adds display strings.
    The response also carries the page selector tokens for the table.
    """
)
async def list_invoices(
    db: Annotated[QueryExecutor, Depends(get_query_executor)],
    no_store: Annotated[NoStore, Depends(get_no_store)],
    query: str = "",
    page: Annotated[int, Query(ge=1, description="1-based page number")] = 1,
    locale: str = "en-US",
) -> InvoiceTableResponse:
    """
    List invoices matching a search term.

    Args:
        db: Query executor
        no_store: Cache bypass directive
        query: Search term ("" lists every invoice)
        page: Page to return
        locale: Locale for `date_display`

    Returns:
        InvoiceTableResponse with rows, page count and pagination tokens
    """
    logger.info(f"Listing invoices (page={page})")

    try:
        invoices = await fetch_filtered_invoices(db, no_store, query, page)
        total_pages = await fetch_invoices_pages(db, no_store, query)
    except Exception as e:
        logger.error(f"Failed to fetch invoices: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={
                "error": "fetch_error",
                "details": "Failed to fetch invoices"
            }
        )

    rows = [
        InvoiceTableItem(
            id=str(invoice["id"]),
            customer_id=str(invoice["customer_id"]),
            name=invoice["name"],
            email=invoice["email"],
            image_url=invoice["image_url"],
            date=str(invoice["date"]),
            amount=invoice["amount"],
            status=invoice["status"],
            amount_display=format_currency(invoice["amount"]),
            date_display=format_date_to_local(invoice["date"], locale),
        )
        for invoice in invoices
    ]

    return InvoiceTableResponse(
        invoices=rows,
        query=query,
        current_page=page,
        total_pages=total_pages,
        pagination=generate_pagination(page, total_pages),
    )


@router.get(
    "/{invoice_id}",
    response_model=InvoiceEditResponse,
    status_code=status.HTTP_200_OK,
    summary="Get invoice edit form data",
    description="""
    Retrieve a single invoice (amount in dollars) together with the list of
    customers it can be assigned to.

    Returns 404 if the invoice doesn't exist.
    """
)
async def get_invoice(
    invoice_id: str,
    db: Annotated[QueryExecutor, Depends(get_query_executor)],
    no_store: Annotated[NoStore, Depends(get_no_store)],
) -> InvoiceEditResponse:
    """
    Get an invoice and the customer options for its edit form.

    Raises:
        HTTPException 404: If the invoice doesn't exist
    """
    logger.info(f"Fetching invoice {invoice_id}")

    try:
        invoice, customers = await asyncio.gather(
            fetch_invoice_by_id(db, no_store, invoice_id),
            fetch_customers(db, no_store),
        )
    except Exception as e:
        logger.error(f"Failed to fetch invoice {invoice_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={
                "error": "fetch_error",
                "details": "Failed to fetch invoice"
            }
        )

    if invoice is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={
                "error": "not_found",
                "details": f"Invoice {invoice_id} not found"
            }
        )

    return InvoiceEditResponse(
        invoice=InvoiceFormResponse(
            id=str(invoice["id"]),
            customer_id=str(invoice["customer_id"]),
            amount=invoice["amount"],
            status=invoice["status"],
        ),
        customers=[
            CustomerOptionResponse(id=str(customer["id"]), name=customer["name"])
            for customer in customers
        ],
    )

"""
Customer API endpoints.

1. GET /customers - Search customers with invoice totals, one page at a time
2. GET /customers/options - Every customer as an {id, name} option
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from dashboard.db.client import QueryExecutor, get_query_executor
from dashboard.schemas.customers import (
    CustomerOptionResponse,
    CustomerOptionsResponse,
    CustomerTableItem,
    CustomerTableResponse,
)
from dashboard.services import fetch_customers, fetch_customers_pages, fetch_filtered_customers
from dashboard.utils.cache import NoStore, get_no_store
from dashboard.utils.pagination import generate_pagination

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get(
    "",
    response_model=CustomerTableResponse,
    status_code=status.HTTP_200_OK,
    summary="Search customers",
    description="""
    Case-insensitive search over customer name and email, sorted by name,
    6 customers per page. Each customer includes its invoice count and
    formatted pending/paid totals.
    """
)
async def list_customers(
    db: Annotated[QueryExecutor, Depends(get_query_executor)],
    no_store: Annotated[NoStore, Depends(get_no_store)],
    query: str = "",
    page: Annotated[int, Query(ge=1, description="1-based page number")] = 1,
) -> CustomerTableResponse:
    """List customers matching a search term."""
    logger.info(f"Listing customers (page={page})")

    try:
        customers = await fetch_filtered_customers(db, no_store, query, page)
        total_pages = await fetch_customers_pages(db, no_store, query)
    except Exception as e:
        logger.error(f"Failed to fetch customers: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={
                "error": "fetch_error",
                "details": "Failed to fetch customers"
            }
        )

    return CustomerTableResponse(
        customers=[
            CustomerTableItem(
                id=str(customer["id"]),
                name=customer["name"],
                email=customer["email"],
                image_url=customer["image_url"],
                total_invoices=customer["total_invoices"],
                total_pending=customer["total_pending"],
                total_paid=customer["total_paid"],
            )
            for customer in customers
        ],
        query=query,
        current_page=page,
        total_pages=total_pages,
        pagination=generate_pagination(page, total_pages),
    )


@router.get(
    "/options",
    response_model=CustomerOptionsResponse,
    status_code=status.HTTP_200_OK,
    summary="List customer options",
)
async def list_customer_options(
    db: Annotated[QueryExecutor, Depends(get_query_executor)],
    no_store: Annotated[NoStore, Depends(get_no_store)],
) -> CustomerOptionsResponse:
    """Return every customer as an {id, name} option, sorted by name."""
    try:
        customers = await fetch_customers(db, no_store)
    except Exception as e:
        logger.error(f"Failed to fetch customer options: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={
                "error": "fetch_error",
                "details": "Failed to fetch customers"
            }
        )

    return CustomerOptionsResponse(
        customers=[
            CustomerOptionResponse(id=str(customer["id"]), name=customer["name"])
            for customer in customers
        ]
    )

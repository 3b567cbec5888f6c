"""
Dashboard overview API endpoints.

Flow for every endpoint:
1. Resolve the query executor and the no-store directive (dependencies)
2. Call ONE data access function
3. Map its output into a Pydantic ResponseModel
4. Turn store failures into a 500 with a stable error body
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from dashboard.db.client import QueryExecutor, get_query_executor
from dashboard.schemas.dashboard import (
    CardDataResponse,
    LatestInvoiceResponse,
    LatestInvoicesResponse,
    RevenueChartResponse,
    RevenuePointResponse,
)
from dashboard.services import fetch_card_data, fetch_latest_invoices, fetch_revenue
from dashboard.utils.cache import NoStore, get_no_store
from dashboard.utils.formatting import generate_y_axis

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get(
    "/revenue",
    response_model=RevenueChartResponse,
    status_code=status.HTTP_200_OK,
    summary="Revenue chart data",
    description="""
    Monthly revenue with pre-computed Y axis labels.

    The Y axis steps down from the highest month (rounded up to the next
    $1K) to $0K. An empty revenue table yields a single "$0K" label.
    """
)
async def get_revenue_chart(
    db: Annotated[QueryExecutor, Depends(get_query_executor)],
    no_store: Annotated[NoStore, Depends(get_no_store)],
) -> RevenueChartResponse:
    """Return the revenue series and its Y axis."""
    try:
        revenue = await fetch_revenue(db, no_store)
    except Exception as e:
        logger.error(f"Failed to fetch revenue data: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={
                "error": "fetch_error",
                "details": "Failed to fetch revenue data"
            }
        )

    # The chart renders nothing for a missing series
    points = revenue or []
    y_axis = generate_y_axis(points)

    return RevenueChartResponse(
        revenue=[
            RevenuePointResponse(month=point.get("month"), revenue=point.get("revenue"))
            for point in points
        ],
        y_axis_labels=y_axis["y_axis_labels"],
        top_label=y_axis["top_label"],
    )


@router.get(
    "/latest-invoices",
    response_model=LatestInvoicesResponse,
    status_code=status.HTTP_200_OK,
    summary="Five most recent invoices",
)
async def get_latest_invoices(
    db: Annotated[QueryExecutor, Depends(get_query_executor)],
    no_store: Annotated[NoStore, Depends(get_no_store)],
) -> LatestInvoicesResponse:
    """Return the latest invoices with formatted amounts."""
    try:
        invoices = await fetch_latest_invoices(db, no_store)
    except Exception as e:
        logger.error(f"Failed to fetch the latest invoices: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={
                "error": "fetch_error",
                "details": "Failed to fetch the latest invoices"
            }
        )

    return LatestInvoicesResponse(
        invoices=[
            LatestInvoiceResponse(
                id=str(invoice["id"]),
                name=invoice["name"],
                email=invoice["email"],
                image_url=invoice["image_url"],
                amount=invoice["amount"],
            )
            for invoice in invoices
        ]
    )


@router.get(
    "/cards",
    response_model=CardDataResponse,
    status_code=status.HTTP_200_OK,
    summary="Summary card data",
    description="""
    Customer and invoice counts plus collected and pending totals.

    The three underlying queries run concurrently; if any fails, the
    endpoint returns 500 rather than partial data.
    """
)
async def get_card_data(
    db: Annotated[QueryExecutor, Depends(get_query_executor)],
    no_store: Annotated[NoStore, Depends(get_no_store)],
) -> CardDataResponse:
    """Return the summary cards."""
    try:
        card_data = await fetch_card_data(db, no_store)
    except Exception as e:
        logger.error(f"Failed to fetch card data: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={
                "error": "fetch_error",
                "details": "Failed to fetch card data"
            }
        )

    return CardDataResponse(**card_data)

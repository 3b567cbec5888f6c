"""
Pydantic schemas for the dashboard overview endpoints.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class RevenuePointResponse(BaseModel):
    """One month of revenue (whole dollars)."""
    month: Optional[str] = Field(None, description="Month label", examples=["Jan"])
    revenue: Optional[int] = Field(
        None,
        description="Revenue in whole dollars; null when the month has no figure",
        examples=[2000]
    )


class RevenueChartResponse(BaseModel):
    """
    Response model for GET /dashboard/revenue.

    Carries both the raw series and the pre-computed Y axis, so the chart
    can be drawn without any client-side math.
    """
    revenue: List[RevenuePointResponse] = Field(..., description="Monthly revenue series")
    y_axis_labels: List[str] = Field(
        ...,
        description="Axis labels from top_label down to $0K",
        examples=[["$5K", "$4K", "$3K", "$2K", "$1K", "$0K"]]
    )
    top_label: int = Field(..., description="Highest axis value in dollars", examples=[5000])


class LatestInvoiceResponse(BaseModel):
    """A recent invoice with its amount formatted for display."""
    id: str = Field(..., description="Invoice UUID")
    name: str = Field(..., description="Customer name")
    email: str = Field(..., description="Customer email")
    image_url: str = Field(..., description="Customer avatar path")
    amount: str = Field(..., description="Formatted amount", examples=["$157.95"])


class LatestInvoicesResponse(BaseModel):
    """Response model for GET /dashboard/latest-invoices."""
    invoices: List[LatestInvoiceResponse] = Field(..., description="Up to 5 newest invoices")


class CardDataResponse(BaseModel):
    """Response model for GET /dashboard/cards."""
    number_of_customers: int = Field(..., ge=0, description="Total customers")
    number_of_invoices: int = Field(..., ge=0, description="Total invoices")
    total_paid_invoices: str = Field(..., description="Collected amount", examples=["$1,234.56"])
    total_pending_invoices: str = Field(..., description="Pending amount", examples=["$0.00"])

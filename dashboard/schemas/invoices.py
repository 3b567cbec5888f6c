"""
Pydantic schemas for invoice endpoints.

These models define the response contracts for the invoices table and the
invoice edit form.
"""

from typing import List, Literal, Optional, Union

from pydantic import BaseModel, Field

from dashboard.schemas.customers import CustomerOptionResponse


class InvoiceTableItem(BaseModel):
    """
    A row of the invoices table.

    `amount` stays in cents as stored; `amount_display` and `date_display`
    are the formatted values for rendering.
    """
    id: str = Field(..., description="Invoice UUID")
    customer_id: str = Field(..., description="Customer UUID")
    name: str = Field(..., description="Customer name")
    email: str = Field(..., description="Customer email")
    image_url: str = Field(..., description="Customer avatar path")
    date: str = Field(..., description="Issue date (ISO-8601)", examples=["2022-12-06"])
    amount: int = Field(..., description="Amount in cents", examples=[15795])
    status: Literal["pending", "paid"] = Field(..., description="Invoice status")
    amount_display: str = Field(..., description="Formatted amount", examples=["$157.95"])
    date_display: str = Field(..., description="Localized issue date", examples=["Dec 6, 2022"])


class InvoiceTableResponse(BaseModel):
    """Response model for GET /invoices."""
    invoices: List[InvoiceTableItem] = Field(..., description="Invoices on the requested page")
    query: str = Field(..., description="Search term used")
    current_page: int = Field(..., ge=1, description="1-based page number")
    total_pages: int = Field(..., ge=0, description="Pages matching the search")
    pagination: List[Union[int, str]] = Field(
        ...,
        description="Page selector tokens; '...' marks elided pages",
        examples=[[1, "...", 4, 5, 6, "...", 10]]
    )


class InvoiceFormResponse(BaseModel):
    """Invoice fields for the edit form (amount in dollars)."""
    id: str = Field(..., description="Invoice UUID")
    customer_id: str = Field(..., description="Customer UUID")
    amount: Optional[float] = Field(None, description="Amount in dollars", examples=[10.5])
    status: Literal["pending", "paid"] = Field(..., description="Invoice status")


class InvoiceEditResponse(BaseModel):
    """Response model for GET /invoices/{invoice_id}."""
    invoice: InvoiceFormResponse = Field(..., description="Invoice being edited")
    customers: List[CustomerOptionResponse] = Field(
        ...,
        description="Customer options for reassigning the invoice"
    )

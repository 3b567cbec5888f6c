"""
Pydantic schemas for customer endpoints.
"""

from typing import List, Union

from pydantic import BaseModel, Field


class CustomerOptionResponse(BaseModel):
    """Customer as a select option."""
    id: str = Field(..., description="Customer UUID")
    name: str = Field(..., description="Customer name")


class CustomerOptionsResponse(BaseModel):
    """Response model for GET /customers/options."""
    customers: List[CustomerOptionResponse] = Field(..., description="All customers by name")


class CustomerTableItem(BaseModel):
    """A row of the customers table with formatted totals."""
    id: str = Field(..., description="Customer UUID")
    name: str = Field(..., description="Customer name")
    email: str = Field(..., description="Customer email")
    image_url: str = Field(..., description="Customer avatar path")
    total_invoices: int = Field(..., ge=0, description="Number of invoices")
    total_pending: str = Field(..., description="Formatted pending total", examples=["$1,000.00"])
    total_paid: str = Field(..., description="Formatted paid total", examples=["$500.00"])


class CustomerTableResponse(BaseModel):
    """Response model for GET /customers."""
    customers: List[CustomerTableItem] = Field(..., description="Customers on the requested page")
    query: str = Field(..., description="Search term used")
    current_page: int = Field(..., ge=1, description="1-based page number")
    total_pages: int = Field(..., ge=0, description="Pages matching the search")
    pagination: List[Union[int, str]] = Field(
        ...,
        description="Page selector tokens; '...' marks elided pages"
    )

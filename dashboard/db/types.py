"""
Row and record contracts for dashboard queries.

Each query has an explicit row shape (what the executor returns) and, where
the data layer transforms it, a record shape (what callers receive).
All types are plain dicts at runtime and compatible with Pydantic.
"""

from datetime import date
from decimal import Decimal
from typing import Literal, Optional, TypedDict, Union

InvoiceStatus = Literal["pending", "paid"]

# Page number, or the "..." marker for an elided range
PaginationToken = Union[int, str]

# Postgres COUNT()/SUM() arrive as int, Decimal or str depending on the driver
Numeric = Union[int, float, Decimal, str]


class RevenuePoint(TypedDict):
    """One month of revenue, in whole dollars (not cents)."""
    month: Optional[str]
    revenue: int


class YAxis(TypedDict):
    """Revenue chart axis: labels from top_label down to $0K."""
    y_axis_labels: list[str]
    top_label: int


class LatestInvoiceRow(TypedDict):
    """Row from the latest-invoices query (amount in cents)."""
    id: str
    name: str
    image_url: str
    email: str
    amount: int


class LatestInvoice(TypedDict):
    """Latest invoice with amount formatted for display."""
    id: str
    name: str
    image_url: str
    email: str
    amount: str


class InvoiceTableRow(TypedDict):
    """Row for the searchable invoices table (amount left in cents)."""
    id: str
    customer_id: str
    name: str
    email: str
    image_url: str
    date: Union[date, str]
    amount: int
    status: InvoiceStatus


class InvoiceForm(TypedDict):
    """Invoice edit form data (amount in dollars)."""
    id: str
    customer_id: str
    amount: Optional[float]
    status: InvoiceStatus


class CustomerField(TypedDict):
    """Customer option for select inputs."""
    id: str
    name: str


class CustomersTableRow(TypedDict):
    """Row from the customers search query with raw aggregate sums."""
    id: str
    name: str
    email: str
    image_url: str
    total_invoices: int
    total_pending: Numeric
    total_paid: Numeric


class FormattedCustomersTable(TypedDict):
    """Customer search record with sums formatted for display."""
    id: str
    name: str
    email: str
    image_url: str
    total_invoices: int
    total_pending: str
    total_paid: str


class CardData(TypedDict):
    """Summary cards: counts stay integers, totals are formatted."""
    number_of_customers: int
    number_of_invoices: int
    total_paid_invoices: str
    total_pending_invoices: str

"""
Data access layer for the dashboard.

Each function:
- Invokes the request's cache bypass directive
- Issues parameterized queries through a QueryExecutor
- Maps rows through the formatting helpers where the caller needs display values

Routes (HTTP layer) call these; nothing here knows about HTTP.
"""

from .customer_service import (
    fetch_customers,
    fetch_customers_pages,
    fetch_filtered_customers,
)
from .dashboard_service import (
    fetch_card_data,
    fetch_latest_invoices,
    fetch_revenue,
)
from .invoice_service import (
    fetch_filtered_invoices,
    fetch_invoice_by_id,
    fetch_invoices_pages,
)

__all__ = [
    "fetch_revenue",
    "fetch_latest_invoices",
    "fetch_card_data",
    "fetch_filtered_invoices",
    "fetch_invoices_pages",
    "fetch_invoice_by_id",
    "fetch_customers",
    "fetch_filtered_customers",
    "fetch_customers_pages",
]

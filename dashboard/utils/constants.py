"""
Fixed paging policy for dashboard queries.

These are not configurable at call time: the UI's page selector and the
queries must agree on them.
"""

# Rows per page for the invoices and customers tables
ITEMS_PER_PAGE = 6

# Rows shown in the "Latest Invoices" card
LATEST_INVOICES_LIMIT = 5

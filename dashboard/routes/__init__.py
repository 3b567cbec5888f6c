"""
FastAPI routers for the dashboard API.

Each module defines a router for one area of the dashboard (overview,
invoices, customers). Routers only map data access results into response
models; all query logic lives in dashboard.services.
"""

"""
Database access layer for the dashboard.

All database operations MUST:
- Go through a QueryExecutor (never a raw connection)
- Bind every caller-supplied value as a positional parameter
- Let driver errors propagate to the caller

Includes:
- QueryExecutor protocol and the SQLAlchemy/asyncpg implementation
- Row/record TypedDict contracts for each dashboard query
"""

from .client import (
    QueryExecutor,
    SQLAlchemyQueryExecutor,
    close_query_executor,
    create_query_executor,
    get_query_executor,
)

__all__ = [
    "QueryExecutor",
    "SQLAlchemyQueryExecutor",
    "close_query_executor",
    "create_query_executor",
    "get_query_executor",
]

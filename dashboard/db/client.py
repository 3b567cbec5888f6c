"""
Query executor adapter for the dashboard's PostgreSQL store.

Data access functions only depend on the QueryExecutor protocol: they pass
query text with Postgres positional placeholders ($1, $2, ...) and the
values to bind. The production adapter runs those queries through an
SQLAlchemy async engine (asyncpg driver).

CRITICAL SECURITY RULES:
1. NEVER interpolate caller-supplied values into query text
2. ALWAYS pass values as positional parameters so the driver binds them
3. Connectivity/timeout errors are NOT caught here; callers see them unchanged
"""

import logging
import re
from typing import Any, Dict, List, Optional, Protocol, Sequence, Tuple

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from dashboard.config import settings

logger = logging.getLogger(__name__)

Row = Dict[str, Any]

_PLACEHOLDER = re.compile(r"\$(\d+)")

# libpq sslmode values that asyncpg understands as its own `ssl` argument
_SSL_MODES = {"disable", "allow", "prefer", "require", "verify-ca", "verify-full"}


class QueryExecutor(Protocol):
    """Anything that can run a parameterized query and return dict rows."""

    async def execute(self, query: str, *params: Any) -> Optional[List[Row]]:
        """
        Run `query` with `params` bound to $1..$n.

        Returns:
            Matching rows as dicts; an empty list when nothing matches.
        """
        ...


def bind_positional(query: str, params: Sequence[Any]) -> Tuple[str, Dict[str, Any]]:
    """
    Rewrite $n placeholders into named binds for sqlalchemy.text().

    Args:
        query: Query text using $1..$n placeholders
        params: Values for $1..$n, in order

    Returns:
        Tuple of (statement text with :p1..:pn binds, bind parameter dict)

    Raises:
        ValueError: If the placeholders don't match the number of params.
    """
    referenced = {int(number) for number in _PLACEHOLDER.findall(query)}
    expected = set(range(1, len(params) + 1))

    if referenced != expected:
        raise ValueError(
            f"Query references placeholders {sorted(referenced)} "
            f"but {len(params)} parameters were given"
        )

    statement = _PLACEHOLDER.sub(lambda match: f":p{match.group(1)}", query)
    bind_params = {f"p{index}": value for index, value in enumerate(params, start=1)}

    return statement, bind_params


class SQLAlchemyQueryExecutor:
    """QueryExecutor backed by an SQLAlchemy AsyncEngine."""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    async def execute(self, query: str, *params: Any) -> List[Row]:
        statement, bind_params = bind_positional(query, params)

        logger.debug(f"Executing query with {len(bind_params)} bound parameters")

        async with self.engine.connect() as connection:
            result = await connection.execute(text(statement), bind_params)
            rows = [dict(row) for row in result.mappings().all()]

        logger.debug(f"Query returned {len(rows)} rows")

        return rows

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self.engine.dispose()


def create_query_executor(database_url: Optional[str] = None) -> SQLAlchemyQueryExecutor:
    """
    Create a query executor for the configured database.

    Accepts postgres://, postgresql:// and postgresql+asyncpg:// URLs; the
    first two are rewritten to the asyncpg dialect. A libpq `sslmode` query
    parameter is translated to asyncpg's `ssl` argument.

    Args:
        database_url: Connection URL (defaults to settings.DATABASE_URL)

    Returns:
        A SQLAlchemyQueryExecutor with its own connection pool.

    Raises:
        ValueError: If no database URL is configured.
    """
    raw_url = database_url or settings.DATABASE_URL
    if not raw_url:
        raise ValueError("DATABASE_URL is not configured")

    if raw_url.startswith("postgres://"):
        raw_url = "postgresql://" + raw_url[len("postgres://"):]

    url = make_url(raw_url)
    if url.drivername in ("postgresql", "postgresql+psycopg2"):
        url = url.set(drivername="postgresql+asyncpg")

    connect_args: Dict[str, Any] = {"command_timeout": settings.DB_COMMAND_TIMEOUT}

    sslmode = url.query.get("sslmode")
    if sslmode:
        url = url.difference_update_query(["sslmode"])
        if sslmode in _SSL_MODES:
            connect_args["ssl"] = sslmode

    engine = create_async_engine(
        url,
        pool_size=settings.DB_POOL_SIZE,
        pool_pre_ping=True,
        echo=settings.DB_ECHO,
        connect_args=connect_args,
    )

    logger.info(f"Created query executor for database host={url.host}")

    return SQLAlchemyQueryExecutor(engine)


_executor: Optional[SQLAlchemyQueryExecutor] = None


async def get_query_executor() -> QueryExecutor:
    """
    FastAPI dependency returning the process-wide query executor.

    The engine is created on first use so importing the app does not need
    a reachable database. Must stay async so it runs on the event loop; the
    check-and-create never yields, so concurrent requests share one engine.
    """
    global _executor

    if _executor is None:
        _executor = create_query_executor()

    return _executor


async def close_query_executor() -> None:
    """Dispose the process-wide executor, if one was created."""
    global _executor

    if _executor is not None:
        await _executor.dispose()
        _executor = None
        logger.info("Query executor disposed")

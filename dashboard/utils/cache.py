"""
Per-request cache bypass directive.

Dashboard data is always read fresh. Every data access function receives a
NoStore callable and invokes it before querying; the HTTP layer's version
marks the response as non-cacheable.
"""

from typing import Callable

from fastapi import Response

NoStore = Callable[[], None]

NO_STORE_HEADER_VALUE = "no-store"


def get_no_store(response: Response) -> NoStore:
    """
    FastAPI dependency returning a NoStore bound to the current response.

    Calling it sets `Cache-Control: no-store`, so neither the browser nor
    any intermediate cache keeps the payload.
    """

    def no_store() -> None:
        response.headers["Cache-Control"] = NO_STORE_HEADER_VALUE

    return no_store

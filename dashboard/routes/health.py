"""
Health check route for the dashboard API.

Does not query the database: it only reports that the process is serving
requests, so load balancers don't take the API down during a database blip.
"""

from fastapi import APIRouter

from dashboard.schemas.health import HealthResponse
from dashboard.utils.logging import get_logger

logger = get_logger(__name__)

# Create router with no prefix (mounted at root level in main.py)
router = APIRouter()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check endpoint",
    description="Returns a simple status indicator for monitoring and load balancing.",
    status_code=200,
    tags=["system"],
)
async def health_check() -> HealthResponse:
    """
    Health check endpoint.

    Example response:
        {
            "status": "ok"
        }
    """
    logger.debug("Health check endpoint called")

    return HealthResponse(status="ok")

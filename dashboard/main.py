"""
FastAPI application entry point for the Acme dashboard API.

This module creates the FastAPI app instance and registers all routers.
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from dashboard.config import settings
from dashboard.db.client import close_query_executor
from dashboard.routes.customers import router as customers_router
from dashboard.routes.dashboard import router as dashboard_router
from dashboard.routes.health import router as health_router
from dashboard.routes.invoices import router as invoices_router

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


def _get_cors_origins() -> list[str]:
    """
    Get allowed CORS origins based on environment.

    - ENVIRONMENT=production: Uses CORS_ORIGINS (the dashboard front end)
    - ENVIRONMENT=testing/development: Allows all origins for local dev

    Returns:
        List of allowed origin URLs, or ["*"] for development.
    """
    environment = os.getenv("ENVIRONMENT", "development")

    if environment == "production":
        origins = [origin.strip() for origin in settings.CORS_ORIGINS if origin.strip()]
        logger.info(f"CORS configured for production with {len(origins)} allowed origins")
        return origins

    logger.info(f"CORS configured for {environment}: allowing all origins")
    return ["*"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Release pooled database connections on shutdown."""
    yield
    await close_query_executor()


# Create FastAPI app
app = FastAPI(
    title="Acme Dashboard API",
    description="Invoices, customers and revenue data for the Acme dashboard",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)


def jsonable_errors(exc: RequestValidationError) -> list:
    """Validation errors without the non-serializable `ctx` payloads."""
    return [
        {key: value for key, value in error.items() if key != "ctx"}
        for error in exc.errors()
    ]


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Log detailed validation errors for debugging.

    Mostly hit by out-of-range `page` query parameters.
    """
    logger.error(
        f"Validation error on {request.method} {request.url.path}: {exc.errors()}"
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "validation_error",
            "details": jsonable_errors(exc),
        }
    )


# Configure CORS with environment-based origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=_get_cors_origins(),
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Register routers
app.include_router(health_router)
app.include_router(dashboard_router)
app.include_router(invoices_router)
app.include_router(customers_router)

logger.info("FastAPI app initialized successfully")

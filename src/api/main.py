"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures routes and lifespan events, and exposes run()
for the user-service console script.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import httpx
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import run_migrations
from src.api.routes import request_validation_handler
from src.api.routes import router as users_router
from src.config.settings import get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "users",
        "description": "Create users, joining or founding a company, and look them up",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Creates database connection pool on startup
    - Runs migrations on startup
    - Creates the outbound HTTP client for the company service
    - Closes both on shutdown
    """
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    logger.info("Starting application...")
    logger.info("Connecting to database...")

    # Every statement is bounded by the per-operation timeout
    statement_timeout_ms = int(settings.request_timeout_seconds * 1000)
    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
        kwargs={"options": f"-c statement_timeout={statement_timeout_ms}"},
    )

    logger.info("Running database migrations...")
    run_migrations(pool)

    http_client = httpx.Client(timeout=settings.request_timeout_seconds)

    # Store shared resources in app state for dependency injection
    app.state.pool = pool
    app.state.http_client = http_client

    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application...")
    http_client.close()
    pool.close()
    logger.info("Database connection pool closed")


app = FastAPI(
    title="user-service",
    description="User provisioning API - Register users against new or existing companies",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

app.include_router(users_router)
app.add_exception_handler(RequestValidationError, request_validation_handler)


@app.get("/health")
async def health_check(request: Request) -> dict[str, str]:
    """
    Health check endpoint with database validation.

    Returns 200 OK if application and database are healthy.
    Raises exception if database connection fails.
    """
    pool = request.app.state.pool
    with pool.connection() as conn:
        conn.execute("SELECT 1")

    return {"status": "healthy"}


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    settings = get_settings()
    logger.info(f"Starting server on port {settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())

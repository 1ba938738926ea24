"""
Main FastAPI application entry point.

Wires the trace middleware, CORS, RFC 9457 exception handlers and the v1
routers. Missing tables are created at startup when DB_CREATE_TABLES is set.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.core.config import settings
from src.core.container import get_database, get_logger
from src.presentation.api.middleware.trace_middleware import TraceMiddleware
from src.presentation.api.v1 import v1_router
from src.presentation.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Handles startup and shutdown events:
    - Startup: Create tables (development/testing only)
    - Shutdown: Dispose the database engine

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    database = get_database()

    if settings.db_create_tables:
        await database.create_all()
        logger.info("database_tables_created")

    logger.info(
        "application_started",
        environment=settings.environment.value,
        version=settings.app_version,
    )

    yield

    await database.close()
    logger.info("application_stopped")


app = FastAPI(
    title=settings.app_name,
    description="Account credential and token lifecycle service",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Trace-Id"],
)

# Wire trace middleware (request correlation)
app.add_middleware(TraceMiddleware)

# Register global exception handlers (RFC 9457 error responses)
register_exception_handlers(app)

# Include API v1 routers (RESTful resource-based endpoints)
app.include_router(v1_router)


@app.get("/", tags=["System"])
async def root() -> dict[str, str]:
    """
    Root endpoint - basic status check.

    Returns:
        dict: Welcome message with API status.
    """
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
    }


@app.get("/health", tags=["System"])
async def health() -> dict[str, str]:
    """
    Health check endpoint for monitoring and load balancers.

    Returns:
        dict: Overall status and database reachability.
    """
    database_ok = await get_database().check_connection()
    return {
        "status": "healthy" if database_ok else "degraded",
        "database": "up" if database_ok else "down",
    }

"""
Main FastAPI application entry point.

This module initializes the FastAPI application instance: settings, the
authorization startup barrier (lifespan), exception handlers and the v1
routers.

Authentication is not handled here. The deployment mounts its own
authentication middleware in front of this app; it must place an
AuthenticatedUser on ``request.state.user`` for signed-in callers.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from barista_authz.core.config import settings
from barista_authz.presentation.api.v1 import v1_router
from barista_authz.presentation.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Handles startup and shutdown events:
    - Startup: Load and validate the role matrices (fails fast if invalid)
    - Shutdown: Forget the installed matrices

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    # Startup: Initialize authorization matrices
    from barista_authz.core.container import init_authorization, reset_authorization

    init_authorization()

    yield

    reset_authorization()


# Initialize FastAPI application with settings and lifespan
app = FastAPI(
    title=settings.app_name,
    description="Role-based authorization for the restaurant admin console",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Register global exception handlers (denial body, generic 500)
register_exception_handlers(app)

# Include API v1 routers (RESTful resource-based endpoints)
app.include_router(v1_router)


@app.get("/")
async def root() -> dict[str, str]:
    """
    Root endpoint - basic health check.

    Returns:
        dict: Welcome message with API status.
    """
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
    }


@app.get("/health")
async def health() -> dict[str, str]:
    """
    Health check endpoint for monitoring and load balancers.

    Returns:
        dict: Health status indicator.
    """
    return {"status": "healthy"}

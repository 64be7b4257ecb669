"""
Social Signals Agent - FastAPI Application

Main entry point for the agent API.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from social_signals.core.config import settings
from social_signals.api.v1 import router as api_v1_router
from social_signals.services.entrypoints import get_registry
from social_signals.services.sources import close_upstream_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.environment}")
    registry = get_registry()
    logger.info(f"{len(registry)} entrypoints ready")

    yield

    # Shutdown
    logger.info("Shutting down...")
    await close_upstream_client()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description=f"""
    {settings.app_description}

    ## Entrypoints
    - **overview** (free): small sample across all sources
    - **hn-top**, **news**: single-source feeds
    - **search**, **news-multi**: query and multi-category fetches
    - **all-signals**: every source in one call

    Each entrypoint has a fixed price, reported per call.
    """,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Include API routes
app.include_router(api_v1_router, prefix="/api/v1")


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "app": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment,
    }


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": f"{settings.app_name} API",
        "docs": "/docs",
        "health": "/health",
        "entrypoints": "/api/v1/entrypoints",
    }

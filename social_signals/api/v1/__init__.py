"""
API v1 Router

All API endpoints for agent callers.
"""

from fastapi import APIRouter

from social_signals.api.v1.endpoints import entrypoints

router = APIRouter()

# Include all endpoint routers
router.include_router(entrypoints.router, prefix="/entrypoints", tags=["Entrypoints"])

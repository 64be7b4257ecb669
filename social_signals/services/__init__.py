"""
Social Signals Services

Service layer: source adapters, aggregation, entrypoints and dispatch.
"""

from social_signals.services.base import (
    BaseService,
    ServiceError,
    ValidationError,
    NotFoundError,
    UpstreamError,
)

__all__ = [
    "BaseService",
    "ServiceError",
    "ValidationError",
    "NotFoundError",
    "UpstreamError",
]

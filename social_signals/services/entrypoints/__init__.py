"""
Entrypoint Registry

CONTRACT:
    Input:  CallContext (entrypoint key + validated input)
    Output: payload dict

RESPONSIBILITIES:
    - Declare key, description, input model and fixed price per entrypoint
    - Combine source fetches and shape the public payload
"""

from social_signals.services.entrypoints.interface import (
    Entrypoint,
    CallContext,
    SignalSources,
    fetched_at,
)
from social_signals.services.entrypoints.handlers import (
    OverviewEntrypoint,
    HNTopEntrypoint,
    NewsEntrypoint,
    SearchEntrypoint,
    NewsMultiEntrypoint,
    AllSignalsEntrypoint,
    ENTRYPOINT_CLASSES,
    UPGRADE_HINT,
)
from social_signals.services.entrypoints.registry import (
    EntrypointRegistry,
    build_registry,
    get_registry,
)

__all__ = [
    "Entrypoint",
    "CallContext",
    "SignalSources",
    "fetched_at",
    "OverviewEntrypoint",
    "HNTopEntrypoint",
    "NewsEntrypoint",
    "SearchEntrypoint",
    "NewsMultiEntrypoint",
    "AllSignalsEntrypoint",
    "ENTRYPOINT_CLASSES",
    "UPGRADE_HINT",
    "EntrypointRegistry",
    "build_registry",
    "get_registry",
]

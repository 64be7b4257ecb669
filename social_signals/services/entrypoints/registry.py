"""
Entrypoint Registry

Fixed key -> Entrypoint mapping, built once at startup.
"""

import logging
from typing import Iterator, Optional

from social_signals.services.base import NotFoundError
from social_signals.services.entrypoints.interface import Entrypoint, SignalSources
from social_signals.services.entrypoints.handlers import ENTRYPOINT_CLASSES

logger = logging.getLogger(__name__)


class EntrypointRegistry:
    """Lookup table of entrypoints by key."""

    def __init__(self, entrypoints: list[Entrypoint]):
        self._entrypoints: dict[str, Entrypoint] = {}
        for entrypoint in entrypoints:
            if entrypoint.key in self._entrypoints:
                raise ValueError(f"Duplicate entrypoint key: {entrypoint.key}")
            if entrypoint.price < 0:
                raise ValueError(f"Negative price for {entrypoint.key}")
            self._entrypoints[entrypoint.key] = entrypoint

    def get(self, key: str) -> Entrypoint:
        try:
            return self._entrypoints[key]
        except KeyError:
            raise NotFoundError(key) from None

    def keys(self) -> list[str]:
        return list(self._entrypoints)

    def describe(self) -> list[dict]:
        return [e.describe() for e in self._entrypoints.values()]

    def __contains__(self, key: str) -> bool:
        return key in self._entrypoints

    def __iter__(self) -> Iterator[Entrypoint]:
        return iter(self._entrypoints.values())

    def __len__(self) -> int:
        return len(self._entrypoints)


def build_registry(sources: Optional[SignalSources] = None) -> EntrypointRegistry:
    """Instantiate every entrypoint against one set of source adapters."""
    sources = sources or SignalSources()
    registry = EntrypointRegistry([cls(sources) for cls in ENTRYPOINT_CLASSES])
    logger.info(f"Registered entrypoints: {', '.join(registry.keys())}")
    return registry


# Singleton instance
_registry: Optional[EntrypointRegistry] = None


def get_registry() -> EntrypointRegistry:
    """Get the entrypoint registry singleton."""
    global _registry
    if _registry is None:
        _registry = build_registry()
    return _registry

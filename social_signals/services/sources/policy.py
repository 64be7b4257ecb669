"""
Fallback Policies

Each source adapter declares how it reacts when its upstream call fails.
"""

import logging
from abc import ABC, abstractmethod
from typing import Sequence

from social_signals.schemas.signals import SignalRecord
from social_signals.services.base import UpstreamError

logger = logging.getLogger(__name__)


class FallbackPolicy(ABC):
    """Decides what a failed upstream fetch yields."""

    fail_open: bool = False

    @abstractmethod
    def resolve(self, error: UpstreamError) -> list[SignalRecord]:
        """Return substitute records or raise."""
        pass


class FailClosed(FallbackPolicy):
    """Propagate the upstream error unchanged."""

    def resolve(self, error: UpstreamError) -> list[SignalRecord]:
        raise error

    def __repr__(self) -> str:
        return "FailClosed()"


class FailOpenWithDefault(FallbackPolicy):
    """Swallow the upstream error and return a fixed set of records."""

    fail_open = True

    def __init__(self, records: Sequence[SignalRecord]):
        self.records = tuple(records)

    def resolve(self, error: UpstreamError) -> list[SignalRecord]:
        logger.warning(
            f"{error.source} unavailable ({error.message}), "
            f"using {len(self.records)} fallback records"
        )
        return list(self.records)

    def __repr__(self) -> str:
        return f"FailOpenWithDefault(records={len(self.records)})"

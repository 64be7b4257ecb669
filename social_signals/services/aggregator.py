"""
Signal Aggregator

Runs independent source fetches concurrently and joins them before any
result is produced. One failing FailClosed source fails the whole
aggregation; FailOpen sources never report failures here.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from social_signals.schemas.signals import SignalRecord
from social_signals.services.sources.interface import SourceAdapter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchRequest:
    """One labelled adapter call inside an aggregation."""

    label: str
    adapter: SourceAdapter
    params: Any


@dataclass
class AggregateResult:
    """Joined results of a fan-out, keyed by request label."""

    results: dict[str, list[SignalRecord]] = field(default_factory=dict)

    @property
    def labels(self) -> list[str]:
        return list(self.results)

    @property
    def source_count(self) -> int:
        return len(self.results)

    @property
    def counts(self) -> dict[str, int]:
        return {label: len(records) for label, records in self.results.items()}

    @property
    def total_items(self) -> int:
        return sum(len(records) for records in self.results.values())

    def records(self, label: str) -> list[SignalRecord]:
        return self.results[label]

    def count(self, label: str) -> int:
        return len(self.results[label])

    def sample(self, label: str) -> Optional[str]:
        """Headline of the first record for ``label``, if any."""
        records = self.results.get(label) or []
        if not records:
            return None
        return records[0].headline or None

    def dump(self, label: str) -> list[dict[str, Any]]:
        return [record.to_dict() for record in self.results[label]]


async def combine(requests: Sequence[FetchRequest]) -> AggregateResult:
    """
    Fan out ``requests`` and wait for all of them.

    Labels must be unique. The first UpstreamError is re-raised after the
    remaining fetches are cancelled; nothing partial is returned.
    """
    labels = [r.label for r in requests]
    if len(set(labels)) != len(labels):
        raise ValueError(f"Duplicate fetch labels: {labels}")

    tasks = [
        asyncio.ensure_future(r.adapter.fetch_signals(r.params))
        for r in requests
    ]

    try:
        fetched = await asyncio.gather(*tasks)
    except Exception:
        for task in tasks:
            if not task.done():
                task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise

    result = AggregateResult(results=dict(zip(labels, fetched)))
    logger.debug(f"Aggregated {result.total_items} items from {result.counts}")
    return result

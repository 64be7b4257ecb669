"""Shared pytest fixtures for the social signals tests.

Wires the fakes from ``tests.helpers`` into adapters, a registry, a
recording billing reporter and a dispatcher, so test modules can focus
on behaviour rather than wiring.
"""

from __future__ import annotations

from typing import Callable

import pytest

from social_signals.services.dispatch import Dispatcher
from social_signals.services.entrypoints import SignalSources, build_registry
from social_signals.services.sources import (
    TrendAdapter,
    DiscussionAdapter,
    HeadlineAdapter,
)
from tests.helpers import FakeUpstreamClient, RecordingBillingReporter

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_client() -> FakeUpstreamClient:
    return FakeUpstreamClient()


@pytest.fixture
def make_sources() -> Callable[..., SignalSources]:
    """Factory building adapters over a given fake client."""

    def _make(client: FakeUpstreamClient) -> SignalSources:
        return SignalSources(
            trends=TrendAdapter(client=client),
            discussion=DiscussionAdapter(client=client),
            headlines=HeadlineAdapter(client=client),
        )

    return _make


@pytest.fixture
def sources(fake_client, make_sources) -> SignalSources:
    return make_sources(fake_client)


@pytest.fixture
def registry(sources):
    return build_registry(sources)


@pytest.fixture
def billing() -> RecordingBillingReporter:
    return RecordingBillingReporter()


@pytest.fixture
def dispatcher(registry, billing) -> Dispatcher:
    return Dispatcher(registry=registry, billing=billing)

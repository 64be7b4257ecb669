"""Tests for the fan-out/fan-in aggregator."""

from __future__ import annotations

import time

import pytest

from social_signals.schemas.signals import SignalSource, TrendTopic
from social_signals.services.aggregator import AggregateResult, FetchRequest, combine
from social_signals.services.base import UpstreamError
from social_signals.services.sources import FailOpenWithDefault
from tests.helpers import StubAdapter, make_articles, upstream_failure


class TestCombine:
    @pytest.mark.asyncio
    async def test_fetches_run_concurrently(self):
        delay = 0.3
        adapters = [StubAdapter(make_articles(2), delay=delay) for _ in range(4)]

        start = time.perf_counter()
        result = await combine([
            FetchRequest(f"req{i}", adapter, None) for i, adapter in enumerate(adapters)
        ])
        elapsed = time.perf_counter() - start

        assert result.total_items == 8
        # Sequential would take 4 * delay
        assert elapsed < delay * 2.5

    @pytest.mark.asyncio
    async def test_results_keyed_by_label_in_request_order(self):
        slow = StubAdapter(make_articles(1, "slow"), delay=0.1)
        fast = StubAdapter(make_articles(2, "fast"))

        result = await combine([
            FetchRequest("slow", slow, None),
            FetchRequest("fast", fast, None),
        ])

        assert result.labels == ["slow", "fast"]
        assert result.counts == {"slow": 1, "fast": 2}

    @pytest.mark.asyncio
    async def test_params_passed_to_adapter(self):
        adapter = StubAdapter()
        await combine([FetchRequest("only", adapter, {"limit": 3})])
        assert adapter.calls == [{"limit": 3}]

    @pytest.mark.asyncio
    async def test_failure_aborts_whole_aggregation(self):
        ok = StubAdapter(make_articles(3))
        failing = StubAdapter(error=upstream_failure(SignalSource.DISCUSSION, 500))

        with pytest.raises(UpstreamError) as exc_info:
            await combine([
                FetchRequest("news", ok, None),
                FetchRequest("hackernews", failing, None),
            ])

        assert exc_info.value.source == "hackernews"

    @pytest.mark.asyncio
    async def test_failure_cancels_pending_siblings(self):
        slow = StubAdapter(make_articles(1), delay=5)
        failing = StubAdapter(error=upstream_failure(SignalSource.DISCUSSION))

        start = time.perf_counter()
        with pytest.raises(UpstreamError):
            await combine([
                FetchRequest("slow", slow, None),
                FetchRequest("failing", failing, None),
            ])

        assert time.perf_counter() - start < 1
        assert slow.cancelled

    @pytest.mark.asyncio
    async def test_fail_open_source_never_fails_aggregation(self):
        defaults = [TrendTopic(topic="AI Agents")]
        trends = StubAdapter(
            error=upstream_failure(SignalSource.TREND),
            policy=FailOpenWithDefault(defaults),
        )
        news = StubAdapter(make_articles(2))

        result = await combine([
            FetchRequest("x", trends, None),
            FetchRequest("news", news, None),
        ])

        assert result.records("x") == defaults
        assert result.total_items == 3

    @pytest.mark.asyncio
    async def test_duplicate_labels_rejected(self):
        adapter = StubAdapter()

        with pytest.raises(ValueError):
            await combine([
                FetchRequest("same", adapter, None),
                FetchRequest("same", adapter, None),
            ])

        assert adapter.calls == []

    @pytest.mark.asyncio
    async def test_empty_request_list(self):
        result = await combine([])
        assert result.total_items == 0
        assert result.source_count == 0


class TestAggregateResult:
    def test_sample_is_first_headline(self):
        result = AggregateResult(results={
            "news": make_articles(3),
            "x": [TrendTopic(topic="Rust"), TrendTopic(topic="Go")],
        })

        assert result.sample("news") == "technology 0"
        assert result.sample("x") == "Rust"

    def test_sample_of_empty_or_unknown_label(self):
        result = AggregateResult(results={"news": []})

        assert result.sample("news") is None
        assert result.sample("missing") is None

    def test_totals(self):
        result = AggregateResult(results={"a": make_articles(2), "b": make_articles(5)})

        assert result.source_count == 2
        assert result.total_items == 7
        assert result.count("b") == 5

    def test_dump_serializes_records(self):
        result = AggregateResult(results={"news": make_articles(1)})
        assert result.dump("news")[0]["title"] == "technology 0"

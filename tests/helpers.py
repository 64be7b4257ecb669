"""Canned upstream payloads and fakes shared by the test modules."""

from __future__ import annotations

import asyncio
from typing import Any, Optional

from social_signals.schemas.signals import SignalSource, HeadlineArticle
from social_signals.services.base import UpstreamError
from social_signals.services.billing import BillingReporter, PriceReport
from social_signals.services.sources import SourceAdapter


# ---------------------------------------------------------------------------
# Canned upstream payloads
# ---------------------------------------------------------------------------


def hn_payload(count: int = 3) -> dict[str, Any]:
    """Algolia-style search body. Odd hits have no external url."""
    return {
        "hits": [
            {
                "title": f"Story {i}",
                "url": f"https://example.com/{i}" if i % 2 == 0 else "",
                "objectID": str(1000 + i),
                "points": 100 - i,
                "num_comments": 10 + i,
                "author": f"user{i}",
                "created_at": "2026-10-19T08:00:00.000Z",
                "_highlightResult": {"title": {"matchLevel": "full"}},
            }
            for i in range(count)
        ]
    }


def news_payload(category: str = "technology", count: int = 20) -> dict[str, Any]:
    """Headline body; the upstream ignores page size and returns ``count`` items."""
    return {
        "status": "ok",
        "articles": [
            {
                "title": f"{category} headline {i}",
                "description": f"About {category} {i}",
                "url": f"https://news.example.com/{category}/{i}",
                "source": {"id": None, "name": "Example Wire"},
                "publishedAt": "2026-10-19T07:30:00Z",
                "urlToImage": f"https://img.example.com/{i}.png",
            }
            for i in range(count)
        ],
    }


TRENDS_PAYLOAD = [
    {"source": "x", "topic": "Rust 2.0", "category": "Technology"},
    {"source": "x", "topic": "World Cup", "category": "Sports"},
    {"source": "x", "topic": "Fed rates", "category": "Business"},
    {"source": "x", "topic": "New Album", "category": "Entertainment"},
]


def category_from_url(url: str) -> str:
    return url.split("/category/")[1].split("/")[0]


def default_responses() -> dict[str, Any]:
    return {
        SignalSource.DISCUSSION.value: lambda url, params: hn_payload(params["hitsPerPage"]),
        SignalSource.HEADLINE.value: lambda url, params: news_payload(category_from_url(url)),
        SignalSource.TREND.value: TRENDS_PAYLOAD,
    }


# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------


class FakeUpstreamClient:
    """Quacks like ``UpstreamClient``; responses are keyed by source tag.

    A response may be a payload, an exception instance to raise, or a
    callable ``(url, params)`` returning either.
    """

    def __init__(self, responses: Optional[dict[str, Any]] = None, delay: float = 0.0):
        self.responses = default_responses()
        self.responses.update(responses or {})
        self.delay = delay
        self.calls: list[tuple[str, str, Optional[dict]]] = []

    async def get_json(self, source: str, url: str, params: Optional[dict] = None) -> Any:
        self.calls.append((source, url, params))
        if self.delay:
            await asyncio.sleep(self.delay)

        response = self.responses[source]
        if callable(response):
            response = response(url, params)
        if isinstance(response, Exception):
            raise response
        return response

    def calls_for(self, source: SignalSource) -> list[tuple[str, str, Optional[dict]]]:
        return [c for c in self.calls if c[0] == source.value]

    async def close(self) -> None:
        pass


class StubAdapter(SourceAdapter):
    """Adapter returning fixed records after an optional delay."""

    source = SignalSource.HEADLINE

    def __init__(
        self,
        records: Optional[list] = None,
        error: Optional[Exception] = None,
        delay: float = 0.0,
        policy=None,
    ):
        super().__init__(policy=policy)
        self.records = records if records is not None else []
        self.error = error
        self.delay = delay
        self.calls: list[Any] = []
        self.cancelled = False

    async def _fetch_raw(self, params: Any) -> Any:
        self.calls.append(params)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
        except asyncio.CancelledError:
            self.cancelled = True
            raise
        if self.error is not None:
            raise self.error
        return self.records

    def _normalize(self, raw: Any, params: Any) -> list:
        return list(raw)


class RecordingBillingReporter(BillingReporter):
    def __init__(self):
        self.reports: list[PriceReport] = []

    async def report(self, report: PriceReport) -> None:
        self.reports.append(report)


def make_articles(count: int, category: str = "technology") -> list[HeadlineArticle]:
    return [
        HeadlineArticle(title=f"{category} {i}", url=f"https://news.example.com/{i}")
        for i in range(count)
    ]


def upstream_failure(source: SignalSource, status_code: int = 503) -> UpstreamError:
    return UpstreamError(source.value, f"API error: {status_code}", status_code=status_code)

"""
Hacker News Adapter

Front-page and query-search variants of the Algolia HN search API.
No fallback: failures surface as UpstreamError.
"""

from dataclasses import dataclass
from typing import Any, Optional

from social_signals.core.config import settings
from social_signals.schemas.signals import (
    SignalSource,
    SignalRecord,
    DiscussionStory,
    SearchHit,
)
from social_signals.services.sources.client import UpstreamClient
from social_signals.services.sources.interface import SourceAdapter
from social_signals.services.sources.policy import FallbackPolicy


@dataclass(frozen=True)
class DiscussionQuery:
    """Front page when ``query`` is None, free-text search otherwise."""

    limit: int = 10
    query: Optional[str] = None

    @property
    def front_page(self) -> bool:
        return self.query is None


class DiscussionAdapter(SourceAdapter[DiscussionQuery, SignalRecord]):
    """Adapter for the discussion-search source (FailClosed)."""

    source = SignalSource.DISCUSSION

    def __init__(
        self,
        client: Optional[UpstreamClient] = None,
        policy: Optional[FallbackPolicy] = None,
        base_url: Optional[str] = None,
        item_url: Optional[str] = None,
    ):
        super().__init__(client=client, policy=policy)
        self.base_url = (base_url or settings.hn_api_base_url).rstrip("/")
        self.item_url = item_url or settings.hn_item_url

    def resolve_url(self, hit: dict) -> str:
        """External link when present, HN permalink otherwise."""
        return hit.get("url") or f"{self.item_url}{hit['objectID']}"

    async def _fetch_raw(self, params: DiscussionQuery) -> Any:
        if params.front_page:
            query_params = {"tags": "front_page", "hitsPerPage": params.limit}
        else:
            query_params = {"query": params.query, "hitsPerPage": params.limit}

        return await self.client.get_json(
            self.name,
            f"{self.base_url}/search",
            params=query_params,
        )

    def _normalize(self, raw: Any, params: DiscussionQuery) -> list[SignalRecord]:
        hits = raw["hits"]
        if params.front_page:
            return [self._to_story(hit) for hit in hits]
        return [self._to_search_hit(hit) for hit in hits]

    def _to_story(self, hit: dict) -> DiscussionStory:
        return DiscussionStory(
            title=hit.get("title"),
            url=self.resolve_url(hit),
            score=hit.get("points"),
            comments=hit.get("num_comments"),
            author=hit.get("author"),
            created_at=hit.get("created_at"),
        )

    def _to_search_hit(self, hit: dict) -> SearchHit:
        highlight = hit.get("_highlightResult") or {}
        title_match = highlight.get("title") or {}

        return SearchHit(
            title=hit.get("title"),
            url=self.resolve_url(hit),
            score=hit.get("points"),
            comments=hit.get("num_comments"),
            relevance_score=title_match.get("matchLevel"),
        )

    async def get_front_page(self, limit: int = 10) -> list[DiscussionStory]:
        return await self.fetch_signals(DiscussionQuery(limit=limit))

    async def search(self, query: str, limit: int = 10) -> list[SearchHit]:
        return await self.fetch_signals(DiscussionQuery(limit=limit, query=query))

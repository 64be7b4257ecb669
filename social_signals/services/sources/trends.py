"""
Social Trends Adapter

Fetches trending topics from the X trends feed. This source never fails
an operation: any upstream problem yields the fixed fallback topics.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from social_signals.core.config import settings
from social_signals.schemas.signals import SignalSource, TrendTopic
from social_signals.services.sources.client import UpstreamClient
from social_signals.services.sources.interface import SourceAdapter
from social_signals.services.sources.policy import FallbackPolicy, FailOpenWithDefault

logger = logging.getLogger(__name__)


FALLBACK_TRENDS = (
    TrendTopic(topic="AI Agents", category="Technology"),
    TrendTopic(topic="x402", category="Crypto"),
)


@dataclass(frozen=True)
class TrendQuery:
    """Optional cap on the number of topics returned."""

    limit: Optional[int] = None


class TrendAdapter(SourceAdapter[TrendQuery, TrendTopic]):
    """Adapter for the social-trends feed (FailOpen)."""

    source = SignalSource.TREND
    default_policy = FailOpenWithDefault(FALLBACK_TRENDS)

    def __init__(
        self,
        client: Optional[UpstreamClient] = None,
        policy: Optional[FallbackPolicy] = None,
        url: Optional[str] = None,
    ):
        super().__init__(client=client, policy=policy)
        self.url = url or settings.trends_url

    async def _fetch_raw(self, params: TrendQuery) -> Any:
        return await self.client.get_json(self.name, self.url)

    def _normalize(self, raw: Any, params: TrendQuery) -> list[TrendTopic]:
        if not isinstance(raw, list):
            raise TypeError("expected a JSON array of trends")

        trends = [
            TrendTopic(topic=item["topic"], category=item.get("category"))
            for item in raw
        ]
        if params.limit is not None:
            trends = trends[:params.limit]

        logger.debug(f"Trends feed returned {len(trends)} topics")
        return trends

    async def get_trends(self, limit: Optional[int] = None) -> list[TrendTopic]:
        return await self.fetch_signals(TrendQuery(limit=limit))

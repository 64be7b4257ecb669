"""
News Headlines Adapter

Fetches top headlines for a category. Unknown categories are coerced to
the default instead of rejected; input validation already ran upstream
of this adapter, so anything reaching here is best-effort.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

from social_signals.core.config import settings
from social_signals.schemas.signals import (
    SignalSource,
    NewsCategory,
    DEFAULT_CATEGORY,
    HeadlineArticle,
)
from social_signals.services.sources.client import UpstreamClient
from social_signals.services.sources.interface import SourceAdapter
from social_signals.services.sources.policy import FallbackPolicy

logger = logging.getLogger(__name__)

VALID_CATEGORIES = frozenset(c.value for c in NewsCategory)


def coerce_category(category: Union[str, NewsCategory, None]) -> str:
    """Return ``category`` when recognized, the default category otherwise."""
    value = category.value if isinstance(category, NewsCategory) else category
    if value in VALID_CATEGORIES:
        return value

    logger.debug(f"Unknown news category {category!r}, using {DEFAULT_CATEGORY.value}")
    return DEFAULT_CATEGORY.value


@dataclass(frozen=True)
class HeadlineQuery:
    category: Union[str, NewsCategory] = DEFAULT_CATEGORY
    limit: int = 10


class HeadlineAdapter(SourceAdapter[HeadlineQuery, HeadlineArticle]):
    """Adapter for the category-headlines source (FailClosed)."""

    source = SignalSource.HEADLINE

    def __init__(
        self,
        client: Optional[UpstreamClient] = None,
        policy: Optional[FallbackPolicy] = None,
        base_url: Optional[str] = None,
        country: Optional[str] = None,
    ):
        super().__init__(client=client, policy=policy)
        self.base_url = (base_url or settings.news_api_base_url).rstrip("/")
        self.country = country or settings.news_country

    def category_url(self, category: str) -> str:
        return f"{self.base_url}/top-headlines/category/{category}/{self.country}.json"

    async def _fetch_raw(self, params: HeadlineQuery) -> Any:
        category = coerce_category(params.category)
        return await self.client.get_json(self.name, self.category_url(category))

    def _normalize(self, raw: Any, params: HeadlineQuery) -> list[HeadlineArticle]:
        # Upstream ignores page size, so truncate here
        articles = raw["articles"][:params.limit]
        return [self._to_article(article) for article in articles]

    def _to_article(self, article: dict) -> HeadlineArticle:
        source = article.get("source") or {}

        return HeadlineArticle(
            title=article.get("title"),
            description=article.get("description"),
            url=article.get("url"),
            source_name=source.get("name"),
            published_at=article.get("publishedAt"),
            image_url=article.get("urlToImage"),
        )

    async def get_headlines(
        self,
        category: Union[str, NewsCategory] = DEFAULT_CATEGORY,
        limit: int = 10,
    ) -> list[HeadlineArticle]:
        return await self.fetch_signals(HeadlineQuery(category=category, limit=limit))

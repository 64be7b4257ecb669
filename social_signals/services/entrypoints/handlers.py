"""
Entrypoint Handlers

The six metered operations. Payload shapes are part of the public
contract; field names must not change.
"""

from social_signals.schemas.entrypoints import (
    OverviewInput,
    HNTopInput,
    NewsInput,
    SearchInput,
    NewsMultiInput,
    AllSignalsInput,
)
from social_signals.schemas.signals import SignalSource, DEFAULT_CATEGORY
from social_signals.services.aggregator import FetchRequest, combine
from social_signals.services.sources import DiscussionQuery, HeadlineQuery, TrendQuery
from social_signals.services.entrypoints.interface import (
    Entrypoint,
    CallContext,
    fetched_at,
)

HN = SignalSource.DISCUSSION.value
NEWS = SignalSource.HEADLINE.value
X = SignalSource.TREND.value

# Prices in the smallest currency unit
PRICE_FREE = 0
PRICE_BASIC = 1000
PRICE_STANDARD = 2000
PRICE_PREMIUM = 3000

OVERVIEW_SAMPLE_SIZE = 3
UPGRADE_HINT = "Use paid endpoints for full data with pagination and filtering"


class OverviewEntrypoint(Entrypoint):
    key = "overview"
    description = "Free overview of current social signals - try before you buy"
    price = PRICE_FREE
    input_model = OverviewInput

    async def execute(self, input_data: CallContext) -> dict:
        result = await combine([
            FetchRequest(HN, self.sources.discussion, DiscussionQuery(limit=OVERVIEW_SAMPLE_SIZE)),
            FetchRequest(
                NEWS,
                self.sources.headlines,
                HeadlineQuery(category=DEFAULT_CATEGORY, limit=OVERVIEW_SAMPLE_SIZE),
            ),
            FetchRequest(X, self.sources.trends, TrendQuery(limit=OVERVIEW_SAMPLE_SIZE)),
        ])

        return {
            "summary": {
                "hn_stories": result.count(HN),
                "news_articles": result.count(NEWS),
                "x_trends": result.count(X),
                "sources": result.labels,
            },
            "sample": {
                "hn_top": result.sample(HN),
                "news_top": result.sample(NEWS),
                "x_trend": result.sample(X),
            },
            "fetchedAt": fetched_at(),
            "upgrade": UPGRADE_HINT,
        }


class HNTopEntrypoint(Entrypoint):
    key = "hn-top"
    description = "Get top Hacker News stories with scores and comments"
    price = PRICE_BASIC
    input_model = HNTopInput

    async def execute(self, input_data: CallContext) -> dict:
        stories = await self.sources.discussion.get_front_page(input_data.input.limit)

        return {
            "count": len(stories),
            "stories": [s.to_dict() for s in stories],
            "fetchedAt": fetched_at(),
        }


class NewsEntrypoint(Entrypoint):
    key = "news"
    description = "Get top news headlines by category"
    price = PRICE_BASIC
    input_model = NewsInput

    async def execute(self, input_data: CallContext) -> dict:
        params = input_data.input
        articles = await self.sources.headlines.get_headlines(params.category, params.limit)

        return {
            "category": params.category.value,
            "count": len(articles),
            "articles": [a.to_dict() for a in articles],
            "fetchedAt": fetched_at(),
        }


class SearchEntrypoint(Entrypoint):
    key = "search"
    description = "Search social signals by topic across HN"
    price = PRICE_STANDARD
    input_model = SearchInput

    async def execute(self, input_data: CallContext) -> dict:
        params = input_data.input
        results = await self.sources.discussion.search(params.query, params.limit)

        return {
            "query": params.query,
            "count": len(results),
            "results": [r.to_dict() for r in results],
            "fetchedAt": fetched_at(),
        }


class NewsMultiEntrypoint(Entrypoint):
    key = "news-multi"
    description = "Get news from multiple categories in one call"
    price = PRICE_STANDARD
    input_model = NewsMultiInput

    async def execute(self, input_data: CallContext) -> dict:
        params = input_data.input
        categories = [c.value for c in params.categories]

        result = await combine([
            FetchRequest(
                category,
                self.sources.headlines,
                HeadlineQuery(category=category, limit=params.limit_per_category),
            )
            for category in categories
        ])

        return {
            "categories": categories,
            "totalArticles": result.total_items,
            "results": [
                {"category": category, "articles": result.dump(category)}
                for category in categories
            ],
            "fetchedAt": fetched_at(),
        }


class AllSignalsEntrypoint(Entrypoint):
    key = "all-signals"
    description = "Get aggregated signals from all sources in one call"
    price = PRICE_PREMIUM
    input_model = AllSignalsInput

    async def execute(self, input_data: CallContext) -> dict:
        params = input_data.input

        result = await combine([
            FetchRequest(HN, self.sources.discussion, DiscussionQuery(limit=params.hn_limit)),
            FetchRequest(
                NEWS,
                self.sources.headlines,
                HeadlineQuery(category=params.news_category, limit=params.news_limit),
            ),
            FetchRequest(X, self.sources.trends, TrendQuery()),
        ])

        return {
            "hackernews": {
                "count": result.count(HN),
                "stories": result.dump(HN),
            },
            "news": {
                "category": params.news_category.value,
                "count": result.count(NEWS),
                "articles": result.dump(NEWS),
            },
            "x": {
                "count": result.count(X),
                "trends": result.dump(X),
            },
            "totals": {
                "sources": result.source_count,
                "items": result.total_items,
            },
            "fetchedAt": fetched_at(),
        }


ENTRYPOINT_CLASSES: tuple[type[Entrypoint], ...] = (
    OverviewEntrypoint,
    HNTopEntrypoint,
    NewsEntrypoint,
    SearchEntrypoint,
    NewsMultiEntrypoint,
    AllSignalsEntrypoint,
)

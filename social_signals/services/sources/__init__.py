"""
Upstream Source Adapters

CONTRACT:
    Input:  source-specific query (limit, query text, category)
    Output: list of normalized SignalRecords

RESPONSIBILITIES:
    - Call exactly one upstream endpoint per fetch
    - Normalize each upstream shape into SignalRecords
    - Apply the adapter's fallback policy (trends fail open, others fail closed)
"""

from social_signals.services.sources.client import (
    UpstreamClient,
    get_upstream_client,
    close_upstream_client,
)
from social_signals.services.sources.policy import (
    FallbackPolicy,
    FailClosed,
    FailOpenWithDefault,
)
from social_signals.services.sources.interface import SourceAdapter
from social_signals.services.sources.trends import TrendAdapter, TrendQuery, FALLBACK_TRENDS
from social_signals.services.sources.discussion import DiscussionAdapter, DiscussionQuery
from social_signals.services.sources.headlines import (
    HeadlineAdapter,
    HeadlineQuery,
    coerce_category,
    VALID_CATEGORIES,
)

__all__ = [
    "UpstreamClient",
    "get_upstream_client",
    "close_upstream_client",
    "FallbackPolicy",
    "FailClosed",
    "FailOpenWithDefault",
    "SourceAdapter",
    "TrendAdapter",
    "TrendQuery",
    "FALLBACK_TRENDS",
    "DiscussionAdapter",
    "DiscussionQuery",
    "HeadlineAdapter",
    "HeadlineQuery",
    "coerce_category",
    "VALID_CATEGORIES",
]

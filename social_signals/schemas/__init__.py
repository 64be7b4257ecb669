"""
Social Signals Schema Contracts

Signal records, entrypoint inputs and the response envelope.
"""

from social_signals.schemas.signals import (
    SignalSource,
    NewsCategory,
    DEFAULT_CATEGORY,
    SignalRecord,
    TrendTopic,
    DiscussionStory,
    SearchHit,
    HeadlineArticle,
)
from social_signals.schemas.entrypoints import (
    EntrypointInput,
    OverviewInput,
    HNTopInput,
    NewsInput,
    SearchInput,
    NewsMultiInput,
    AllSignalsInput,
)
from social_signals.schemas.envelope import ErrorInfo, ResponseEnvelope

__all__ = [
    # Signals
    "SignalSource",
    "NewsCategory",
    "DEFAULT_CATEGORY",
    "SignalRecord",
    "TrendTopic",
    "DiscussionStory",
    "SearchHit",
    "HeadlineArticle",
    # Inputs
    "EntrypointInput",
    "OverviewInput",
    "HNTopInput",
    "NewsInput",
    "SearchInput",
    "NewsMultiInput",
    "AllSignalsInput",
    # Envelope
    "ErrorInfo",
    "ResponseEnvelope",
]

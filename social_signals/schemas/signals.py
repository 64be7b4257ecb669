"""
Signal Records

Normalized items produced by the upstream fetch adapters.
Records are immutable once built; the wire names match what existing
consumers of the agent already parse (camelCase where the feeds used it).
"""

from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class SignalSource(str, Enum):
    """Logical source of a record, serialized with its public tag."""

    TREND = "x"
    DISCUSSION = "hackernews"
    HEADLINE = "news"


class NewsCategory(str, Enum):
    BUSINESS = "business"
    ENTERTAINMENT = "entertainment"
    GENERAL = "general"
    HEALTH = "health"
    SCIENCE = "science"
    SPORTS = "sports"
    TECHNOLOGY = "technology"


DEFAULT_CATEGORY = NewsCategory.TECHNOLOGY


# =============================================================================
# RECORDS
# =============================================================================


class SignalRecord(BaseModel):
    """Base for every normalized record."""

    source: SignalSource

    class Config:
        frozen = True
        populate_by_name = True

    @property
    def headline(self) -> Optional[str]:
        """Short editorial label used for samples."""
        return None

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class TrendTopic(SignalRecord):
    """A trending topic from the social-trends feed."""

    source: SignalSource = SignalSource.TREND
    topic: str = Field(..., min_length=1)
    category: Optional[str] = None

    @property
    def headline(self) -> Optional[str]:
        return self.topic


class DiscussionStory(SignalRecord):
    """A front-page Hacker News story."""

    source: SignalSource = SignalSource.DISCUSSION
    title: Optional[str] = None
    url: str
    score: Optional[int] = None
    comments: Optional[int] = None
    author: Optional[str] = None
    created_at: Optional[str] = Field(default=None, alias="createdAt")

    @property
    def headline(self) -> Optional[str]:
        return self.title


class SearchHit(SignalRecord):
    """A Hacker News search result."""

    source: SignalSource = SignalSource.DISCUSSION
    title: Optional[str] = None
    url: str
    score: Optional[int] = None
    comments: Optional[int] = None
    relevance_score: Optional[str] = Field(
        default=None,
        alias="relevanceScore",
        description="Upstream title match level (full, partial, none)",
    )

    @property
    def headline(self) -> Optional[str]:
        return self.title


class HeadlineArticle(SignalRecord):
    """A category headline from the news feed."""

    source: SignalSource = SignalSource.HEADLINE
    title: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    source_name: Optional[str] = None
    published_at: Optional[str] = Field(default=None, alias="publishedAt")
    image_url: Optional[str] = Field(default=None, alias="imageUrl")

    @property
    def headline(self) -> Optional[str]:
        return self.title

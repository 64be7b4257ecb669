"""
Entrypoint Input Contracts

One model per entrypoint. Dispatch validates raw caller input against
these before any handler runs; omitted optional fields take the
defaults declared here.
"""

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

from social_signals.schemas.signals import NewsCategory, DEFAULT_CATEGORY


class EntrypointInput(BaseModel):
    """Base input model. Unknown keys are ignored."""

    class Config:
        frozen = True
        populate_by_name = True


class OverviewInput(EntrypointInput):
    """The free overview takes no input."""


class HNTopInput(EntrypointInput):
    limit: int = Field(default=20, ge=1, le=50, strict=True)


class NewsInput(EntrypointInput):
    category: NewsCategory = Field(default=DEFAULT_CATEGORY)
    limit: int = Field(default=15, ge=1, le=30, strict=True)


class SearchInput(EntrypointInput):
    query: str = Field(..., min_length=1, max_length=100, strict=True)
    limit: int = Field(default=15, ge=1, le=30, strict=True)


class NewsMultiInput(EntrypointInput):
    categories: list[NewsCategory] = Field(..., min_length=1, max_length=4)
    limit_per_category: int = Field(
        default=5,
        ge=1,
        le=10,
        strict=True,
        alias="limitPerCategory",
    )

    @field_validator("categories")
    @classmethod
    def categories_must_be_distinct(cls, v: list[NewsCategory]) -> list[NewsCategory]:
        if len(set(v)) != len(v):
            raise PydanticCustomError("unique", "categories must not repeat")
        return v


class AllSignalsInput(EntrypointInput):
    hn_limit: int = Field(default=15, ge=1, le=30, strict=True, alias="hnLimit")
    news_category: NewsCategory = Field(default=DEFAULT_CATEGORY, alias="newsCategory")
    news_limit: int = Field(default=10, ge=1, le=20, strict=True, alias="newsLimit")

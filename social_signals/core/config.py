"""
Application Configuration

All settings loaded from environment variables.
"""

from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Application
    app_name: str = "social-signals-agent"
    app_version: str = "1.0.0"
    app_description: str = (
        "Aggregated social signals from X, Hacker News, and news sources. "
        "Real-time trending intelligence for AI agents."
    )
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Upstream feeds
    trends_url: str = "https://trends.langoustine69.dev/x"
    hn_api_base_url: str = "https://hn.algolia.com/api/v1"
    hn_item_url: str = "https://news.ycombinator.com/item?id="
    news_api_base_url: str = "https://saurav.tech/NewsAPI"
    news_country: str = "us"

    # HTTP client
    upstream_timeout_seconds: Optional[float] = None  # None = no bound
    user_agent: str = "social-signals-agent/1.0"

    # Payments (settlement is handled outside this service)
    payments_pay_to: Optional[str] = None
    payments_network: Optional[str] = None
    payments_facilitator_url: Optional[str] = None

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()

"""
Upstream HTTP Client

Owns the shared aiohttp session used by every source adapter and turns
transport failures into UpstreamError.
"""

import asyncio
import json
import logging
from typing import Any, Optional

import aiohttp

from social_signals.core.config import settings
from social_signals.services.base import UpstreamError

logger = logging.getLogger(__name__)


class UpstreamClient:
    """JSON GET client over a lazily created aiohttp session."""

    def __init__(
        self,
        timeout_seconds: Optional[float] = None,
        user_agent: Optional[str] = None,
    ):
        self._session: Optional[aiohttp.ClientSession] = None
        self._timeout_seconds = timeout_seconds
        self._user_agent = user_agent or settings.user_agent

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure we have an active HTTP session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self._timeout_seconds),
                headers={"User-Agent": self._user_agent},
            )
        return self._session

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def get_json(
        self,
        source: str,
        url: str,
        params: Optional[dict[str, Any]] = None,
    ) -> Any:
        """
        GET ``url`` and decode the JSON body.

        Raises:
            UpstreamError: non-2xx status, network failure or undecodable body.
        """
        session = await self._ensure_session()

        try:
            async with session.get(url, params=params) as response:
                if not 200 <= response.status < 300:
                    raise UpstreamError(
                        source,
                        f"API error: {response.status}",
                        status_code=response.status,
                    )
                body = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise UpstreamError(source, "Upstream request failed", cause=str(e)) from e

        # UnicodeDecodeError is a ValueError too
        try:
            return json.loads(body)
        except ValueError as e:
            raise UpstreamError(source, "Malformed upstream body", cause=str(e)) from e


# Singleton instance
_upstream_client: Optional[UpstreamClient] = None


def get_upstream_client() -> UpstreamClient:
    """Get the upstream client singleton."""
    global _upstream_client
    if _upstream_client is None:
        _upstream_client = UpstreamClient(timeout_seconds=settings.upstream_timeout_seconds)
    return _upstream_client


async def close_upstream_client() -> None:
    global _upstream_client
    if _upstream_client is not None:
        await _upstream_client.close()
        _upstream_client = None

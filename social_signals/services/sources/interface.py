"""
Source Adapter Interface

Defines the contract every upstream fetch adapter follows.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar

from social_signals.schemas.signals import SignalRecord, SignalSource
from social_signals.services.base import UpstreamError
from social_signals.services.sources.client import UpstreamClient, get_upstream_client
from social_signals.services.sources.policy import FallbackPolicy, FailClosed

ParamsT = TypeVar("ParamsT")
RecordT = TypeVar("RecordT", bound=SignalRecord)


class SourceAdapter(ABC, Generic[ParamsT, RecordT]):
    """
    Source Adapter Contract.

    INPUT: source-specific params (limit, query, category, ...)

    OUTPUT: list of normalized SignalRecords

    RULES:
        - One upstream call per fetch
        - A malformed body is an upstream failure, same as a non-2xx status
        - Failures go through the adapter's FallbackPolicy; FailClosed
          adapters raise UpstreamError, FailOpen adapters return defaults
    """

    source: SignalSource
    default_policy: FallbackPolicy = FailClosed()

    def __init__(
        self,
        client: Optional[UpstreamClient] = None,
        policy: Optional[FallbackPolicy] = None,
    ):
        self._client = client
        self.policy = policy or self.default_policy

    @property
    def name(self) -> str:
        return self.source.value

    @property
    def client(self) -> UpstreamClient:
        return self._client or get_upstream_client()

    async def fetch_signals(self, params: ParamsT) -> list[RecordT]:
        """Fetch and normalize, applying the fallback policy on failure."""
        try:
            raw = await self._fetch_raw(params)
            try:
                return self._normalize(raw, params)
            except (KeyError, TypeError, AttributeError, ValueError) as e:
                raise UpstreamError(
                    self.name,
                    "Malformed upstream body",
                    cause=f"{type(e).__name__}: {e}",
                ) from e
        except UpstreamError as e:
            return self.policy.resolve(e)

    @abstractmethod
    async def _fetch_raw(self, params: ParamsT) -> Any:
        """Issue the upstream call and return the decoded body."""
        pass

    @abstractmethod
    def _normalize(self, raw: Any, params: ParamsT) -> list[RecordT]:
        """Translate the upstream body into records."""
        pass

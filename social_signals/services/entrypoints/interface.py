"""
Entrypoint Service Interface

Defines the contract for every metered entrypoint.
"""

from abc import abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Generic, TypeVar

from pydantic import ValidationError as PydanticValidationError

from social_signals.schemas.entrypoints import EntrypointInput
from social_signals.services.base import BaseService, ValidationError
from social_signals.services.sources import (
    TrendAdapter,
    DiscussionAdapter,
    HeadlineAdapter,
)

InputT = TypeVar("InputT", bound=EntrypointInput)


def fetched_at() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class SignalSources:
    """The adapters available to entrypoint handlers."""

    trends: TrendAdapter = field(default_factory=TrendAdapter)
    discussion: DiscussionAdapter = field(default_factory=DiscussionAdapter)
    headlines: HeadlineAdapter = field(default_factory=HeadlineAdapter)


@dataclass(frozen=True)
class CallContext(Generic[InputT]):
    """Validated input for one in-flight call."""

    key: str
    input: InputT


class Entrypoint(BaseService[CallContext, dict]):
    """
    Entrypoint Contract.

    INPUT: CallContext
        - key: the entrypoint key being invoked
        - input: instance of ``input_model`` with defaults applied

    OUTPUT: dict
        - entrypoint-specific payload, always including ``fetchedAt``

    RULES:
        - ``price`` is fixed; it never depends on the payload
        - handlers only run on validated input
    """

    key: str
    description: str
    price: int
    input_model: type[EntrypointInput]

    def __init__(self, sources: SignalSources):
        self.sources = sources

    @property
    def name(self) -> str:
        return self.key

    def validate_input(self, raw_input: Any) -> EntrypointInput:
        """
        Validate raw caller input against ``input_model``.

        Raises:
            ValidationError: first violated rule, with field path and rule name.
        """
        if raw_input is None:
            raw_input = {}

        try:
            return self.input_model.model_validate(raw_input)
        except PydanticValidationError as e:
            error = e.errors()[0]
            field_path = ".".join(str(part) for part in error["loc"]) or "input"
            raise ValidationError(
                self.key,
                field=field_path,
                rule=error["type"],
                message=f"{field_path}: {error['msg']}",
            ) from e

    @abstractmethod
    async def execute(self, input_data: CallContext) -> dict:
        """Fetch, aggregate and shape the payload."""
        pass

    def describe(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "description": self.description,
            "price": self.price,
            "input_schema": self.input_model.model_json_schema(by_alias=True),
        }

"""
Base Service Interface

Entrypoints and source adapters share this error hierarchy; entrypoints
also inherit from BaseService.
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")


class BaseService(ABC, Generic[InputT, OutputT]):
    """
    Base class for all services.

    Each service:
    - Has a defined input type
    - Has a defined output type
    - Can validate its inputs
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Service name for logging."""
        pass

    @abstractmethod
    async def execute(self, input_data: InputT) -> OutputT:
        """
        Execute the service's main function.

        Args:
            input_data: Validated input conforming to InputT schema

        Returns:
            Output conforming to OutputT schema

        Raises:
            ServiceError: If execution fails
        """
        pass

    def validate_input(self, raw_input) -> InputT:
        """
        Validate input data.
        Default implementation returns input as-is.
        Override for custom validation logic.
        """
        return raw_input


class ServiceError(Exception):
    """Base exception for service errors."""

    code = "service_error"

    def __init__(self, service_name: str, message: str, details: dict = None):
        self.service_name = service_name
        self.message = message
        self.details = details or {}
        super().__init__(f"[{service_name}] {message}")


class ValidationError(ServiceError):
    """Input validation error. Raised before any handler runs."""

    code = "validation_error"

    def __init__(self, service_name: str, field: str, rule: str, message: str):
        self.field = field
        self.rule = rule
        super().__init__(
            service_name,
            message,
            details={"field": field, "rule": rule},
        )


class NotFoundError(ServiceError):
    """Unknown entrypoint key."""

    code = "not_found"

    def __init__(self, key: str):
        self.key = key
        super().__init__("dispatch", f"Unknown entrypoint: {key}", details={"key": key})


class UpstreamError(ServiceError):
    """An upstream fetch did not succeed."""

    code = "upstream_error"

    def __init__(
        self,
        source: str,
        message: str,
        status_code: Optional[int] = None,
        cause: Optional[str] = None,
    ):
        self.source = source
        self.status_code = status_code
        self.cause = cause
        details = {"source": source}
        if status_code is not None:
            details["status_code"] = status_code
        if cause is not None:
            details["cause"] = cause
        super().__init__(source, message, details=details)

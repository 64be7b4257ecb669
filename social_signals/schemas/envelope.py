"""
Response Envelope

Every dispatched call produces exactly one envelope: ``{"output": ...}``
on success or ``{"error": {...}}`` on failure.
"""

from typing import Any, Optional
from pydantic import BaseModel


class ErrorInfo(BaseModel):
    """Caller-visible failure details. Never carries tracebacks."""

    code: str
    message: str
    source: Optional[str] = None
    status_code: Optional[int] = None
    field: Optional[str] = None
    rule: Optional[str] = None


class ResponseEnvelope(BaseModel):
    output: Optional[Any] = None
    error: Optional[ErrorInfo] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, output: Any) -> "ResponseEnvelope":
        return cls(output=output)

    @classmethod
    def failure(cls, error: ErrorInfo) -> "ResponseEnvelope":
        return cls(error=error)

    def to_dict(self) -> dict[str, Any]:
        if self.error is not None:
            return {"error": self.error.model_dump(exclude_none=True)}
        return {"output": self.output}

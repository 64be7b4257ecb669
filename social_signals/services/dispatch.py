"""
Dispatch Runtime

CONTRACT:
    Input:  entrypoint key + raw caller input
    Output: ResponseEnvelope

Validation and lookup failures never reach a handler or an upstream.
Every call that passes validation is reported to billing at its fixed
price, whether or not the handler succeeds.
"""

import logging
from typing import Any, Optional

from social_signals.schemas.envelope import ErrorInfo, ResponseEnvelope
from social_signals.services.base import (
    ServiceError,
    ValidationError,
    NotFoundError,
    UpstreamError,
)
from social_signals.services.billing import BillingReporter, LogBillingReporter, PriceReport
from social_signals.services.entrypoints import (
    CallContext,
    EntrypointRegistry,
    get_registry,
)

logger = logging.getLogger(__name__)


def error_info(error: ServiceError) -> ErrorInfo:
    """Caller-visible description of a failure."""
    if isinstance(error, UpstreamError):
        return ErrorInfo(
            code=error.code,
            message=error.message,
            source=error.source,
            status_code=error.status_code,
        )
    if isinstance(error, ValidationError):
        return ErrorInfo(
            code=error.code,
            message=error.message,
            field=error.field,
            rule=error.rule,
        )
    return ErrorInfo(code=error.code, message=error.message)


class Dispatcher:
    """Looks up, validates, bills and runs entrypoints."""

    def __init__(
        self,
        registry: Optional[EntrypointRegistry] = None,
        billing: Optional[BillingReporter] = None,
    ):
        self.registry = registry if registry is not None else get_registry()
        self.billing = billing or LogBillingReporter()

    async def execute(self, key: str, raw_input: Any = None) -> dict:
        """
        Run entrypoint ``key`` and return its bare payload.

        Raises:
            NotFoundError: unknown key
            ValidationError: input violates the entrypoint's schema
            UpstreamError: a fail-closed source did not succeed
        """
        entrypoint = self.registry.get(key)
        validated = entrypoint.validate_input(raw_input)

        await self.billing.report(PriceReport(key=entrypoint.key, price=entrypoint.price))

        context = CallContext(key=entrypoint.key, input=validated)
        return await entrypoint.execute(context)

    async def dispatch(self, key: str, raw_input: Any = None) -> ResponseEnvelope:
        """Run entrypoint ``key`` and wrap the outcome in an envelope."""
        try:
            output = await self.execute(key, raw_input)
        except (NotFoundError, ValidationError) as e:
            logger.info(f"Rejected call to {key}: {e.message}")
            return ResponseEnvelope.failure(error_info(e))
        except UpstreamError as e:
            logger.error(f"Entrypoint {key} failed: {e}")
            return ResponseEnvelope.failure(error_info(e))
        except Exception:
            logger.exception(f"Unexpected error in entrypoint {key}")
            return ResponseEnvelope.failure(
                ErrorInfo(code="internal_error", message="Internal error")
            )

        return ResponseEnvelope.success(output)


# Singleton instance
_dispatcher: Optional[Dispatcher] = None


def get_dispatcher() -> Dispatcher:
    """Get the dispatcher singleton."""
    global _dispatcher
    if _dispatcher is None:
        _dispatcher = Dispatcher()
    return _dispatcher

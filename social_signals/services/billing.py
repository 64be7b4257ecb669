"""
Billing Reporter

The dispatch runtime reports each attempted call's fixed price here.
Settlement happens in the payments collaborator, not in this service.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, asdict
from typing import Any, Optional

from social_signals.core.config import settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PriceReport:
    """A single charge: entrypoint key and its declared price."""

    key: str
    price: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class PaymentsConfig:
    """Where payments are settled. Surfaced to callers, never used to settle."""

    pay_to: Optional[str] = None
    network: Optional[str] = None
    facilitator_url: Optional[str] = None

    @property
    def enabled(self) -> bool:
        return bool(self.pay_to)

    @classmethod
    def from_settings(cls) -> "PaymentsConfig":
        return cls(
            pay_to=settings.payments_pay_to,
            network=settings.payments_network,
            facilitator_url=settings.payments_facilitator_url,
        )

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        d["enabled"] = self.enabled
        return d


class BillingReporter(ABC):
    """Receives one PriceReport per attempted call."""

    @abstractmethod
    async def report(self, report: PriceReport) -> None:
        pass


class LogBillingReporter(BillingReporter):
    """Default reporter: records charges in the application log."""

    async def report(self, report: PriceReport) -> None:
        if report.price == 0:
            logger.debug(f"Free call: {report.key}")
            return
        logger.info(f"Charged {report.price} units for {report.key}")

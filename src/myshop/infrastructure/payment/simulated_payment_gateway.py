"""Payment gateway that only pretends to talk to a provider.

Transaction references are built from an injected id factory so that no
process-wide counter is shared between instances.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from uuid import uuid4

import structlog

from myshop.application.ports import PaymentGateway
from myshop.domain.model.value_objects import Money

logger = structlog.get_logger(__name__)


def _random_id() -> str:
    return uuid4().hex[:12].upper()


class SimulatedPaymentGateway(PaymentGateway):

    def __init__(
        self,
        id_factory: Callable[[], str] = _random_id,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ) -> None:
        self._id_factory = id_factory
        self._clock = clock

    def authorize(self, amount: Money, payer: str, memo: str) -> str:
        reference = f"TXN-{self._clock():%Y%m%d}-{self._id_factory()}"
        logger.info(
            "Payment authorized",
            amount=str(amount),
            payer=payer,
            memo=memo,
            transaction_reference=reference,
        )
        return reference

    def refund(self, transaction_reference: str) -> None:
        logger.info("Payment refunded", transaction_reference=transaction_reference)

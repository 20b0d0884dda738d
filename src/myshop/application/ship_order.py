"""Application service: Ship Order use case."""

from __future__ import annotations

import structlog

from myshop.application.ports import EmailSender
from myshop.domain.exceptions import EntityNotFoundError
from myshop.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class ShipOrderHandler:

    def __init__(self, order_repo: OrderRepository, email_sender: EmailSender) -> None:
        self._order_repo = order_repo
        self._email_sender = email_sender

    def handle(self, order_id: int) -> None:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        order.mark_shipped()
        self._order_repo.update(order)
        logger.info("Order shipped", order_id=order.id)

        self._email_sender.send(
            order.customer_email,
            f"Order #{order.id} Shipped",
            f"Your order is on its way to {order.shipping_address}.",
        )

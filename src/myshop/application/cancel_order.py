"""Application service: Cancel Order use case.

Cancels the order, puts every line item's quantity back into stock if
the order was CONFIRMED, refunds the payment when one was recorded and
notifies the customer.
Shipped orders cannot be cancelled; the aggregate rejects them before
any stock is touched.
"""

from __future__ import annotations

import structlog

from myshop.application.ports import EmailSender, PaymentGateway
from myshop.domain.exceptions import EntityNotFoundError
from myshop.domain.model.order import OrderStatus
from myshop.domain.repository.order_repository import OrderRepository
from myshop.domain.repository.product_repository import ProductRepository
from myshop.domain.service.stock_reservation_service import StockReservationService

logger = structlog.get_logger(__name__)


class CancelOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        payment_gateway: PaymentGateway,
        email_sender: EmailSender,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._payment_gateway = payment_gateway
        self._email_sender = email_sender

    def handle(self, order_id: int) -> None:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        # Only confirmed orders hold reserved stock
        had_reservation = order.status == OrderStatus.CONFIRMED

        # Transition first so an illegal cancel leaves stock untouched
        order.cancel()

        if had_reservation:
            svc = StockReservationService(self._product_repo)
            svc.restore_for_order(order)

        self._order_repo.update(order)

        if order.payment_reference:
            self._payment_gateway.refund(order.payment_reference)

        logger.info("Order cancelled", order_id=order.id)

        self._email_sender.send(
            order.customer_email,
            f"Order #{order.id} Cancelled",
            "Your order has been cancelled.",
        )

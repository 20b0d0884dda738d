"""Application service: Create Order use case.

Orchestrates the flow between repositories, the domain services and the
outside collaborators (payment, e-mail).  This is the only place that
coordinates multiple aggregates (Product reservation + Order creation).
"""

from __future__ import annotations

import structlog

from myshop.application.dto import OrderDTO, OrderItemSpec, order_to_dto
from myshop.application.ports import EmailSender, PaymentGateway
from myshop.domain.exceptions import ValidationError
from myshop.domain.model.order import Order, OrderLineItem
from myshop.domain.model.value_objects import DEFAULT_CURRENCY, Address, Quantity
from myshop.domain.repository.order_repository import OrderRepository
from myshop.domain.repository.product_repository import ProductRepository
from myshop.domain.service.pricing_policy import PricingPolicy
from myshop.domain.service.stock_reservation_service import StockReservationService

logger = structlog.get_logger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        payment_gateway: PaymentGateway,
        email_sender: EmailSender,
        pricing_policy: PricingPolicy | None = None,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._payment_gateway = payment_gateway
        self._email_sender = email_sender
        self._pricing_policy = pricing_policy or PricingPolicy()
        self._currency = currency

    def handle(
        self,
        customer_email: str,
        shipping_address: Address,
        item_specs: list[OrderItemSpec],
    ) -> OrderDTO:
        """Create, price, confirm and pay for a new order.

        Steps:
        1. Validate the request (at least one item, positive quantities).
        2. Reserve stock for every line, all-or-nothing.
        3. Build OrderLineItems with *current* names and prices (snapshot).
        4. Apply shipping and discount rules, then confirm.
        5. Persist, authorize payment, notify the customer.

        Nothing is persisted and no payment is attempted if steps 1-2 fail.
        Payment or e-mail failures propagate after the order is saved.
        """
        if not item_specs:
            raise ValidationError("Order must have at least one item")

        order = Order.create(customer_email, shipping_address, currency=self._currency)
        requests = [(spec.product_id, Quantity(spec.quantity)) for spec in item_specs]

        reservation = StockReservationService(self._product_repo)
        reserved = reservation.reserve(requests, currency=self._currency)

        for product, quantity in reserved:
            order.add_item(
                OrderLineItem(
                    product_id=product.id,  # type: ignore[arg-type]
                    product_name=product.name,
                    quantity=quantity,
                    unit_price=product.price,  # <-- price snapshot
                )
            )

        self._pricing_policy.apply(order)
        order.confirm()
        self._order_repo.add(order)

        logger.info(
            "Order created",
            order_id=order.id,
            customer_email=order.customer_email,
            total=str(order.total),
        )

        reference = self._payment_gateway.authorize(
            order.total,
            order.customer_email,
            f"Order #{order.id}",
        )
        order.record_payment(reference)
        self._order_repo.update(order)

        self._email_sender.send(
            order.customer_email,
            f"Order #{order.id} Confirmed",
            f"Your order has been confirmed. Total: {order.total}. "
            f"Transaction ID: {reference}",
        )

        return order_to_dto(order)

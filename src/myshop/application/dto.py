"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI/HTTP and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from myshop.domain.model.order import Order
from myshop.domain.model.product import Product


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: what the customer asked for (product ID + quantity)."""

    product_id: int
    quantity: int


@dataclass(frozen=True)
class OrderLineItemDTO:
    """Output: a single line item of an order."""

    product_id: int
    product_name: str
    quantity: int
    unit_price: Decimal
    subtotal: Decimal


@dataclass(frozen=True)
class OrderDTO:
    """Output: order summary."""

    id: int
    customer_email: str
    status: str
    currency: str
    subtotal: Decimal
    shipping_cost: Decimal
    discount: Decimal
    total: Decimal
    created_at: datetime
    payment_reference: str | None
    items: list[OrderLineItemDTO]


@dataclass(frozen=True)
class ProductDTO:
    id: int
    name: str
    description: str
    price: Decimal
    currency: str
    stock_quantity: int
    is_active: bool


# --- Mapping ------------------------------------------------------------------


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        customer_email=order.customer_email,
        status=order.status.value,
        currency=order.currency,
        subtotal=order.subtotal.amount,
        shipping_cost=order.shipping_cost.amount,
        discount=order.discount.amount,
        total=order.total.amount,
        created_at=order.created_at,
        payment_reference=order.payment_reference,
        items=[
            OrderLineItemDTO(
                product_id=item.product_id,
                product_name=item.product_name,
                quantity=item.quantity.value,
                unit_price=item.unit_price.amount,
                subtotal=item.subtotal.amount,
            )
            for item in order.items
        ],
    )


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,  # type: ignore[arg-type]
        name=product.name,
        description=product.description,
        price=product.price.amount,
        currency=product.price.currency,
        stock_quantity=product.stock_quantity,
        is_active=product.is_active,
    )

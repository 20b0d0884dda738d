"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.  Repositories are
cached per process so their file locks are shared by every caller.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from myshop.application.ports import EmailSender, PaymentGateway
from myshop.domain.service.pricing_policy import PricingPolicy
from myshop.infrastructure.notification.logging_email_sender import LoggingEmailSender
from myshop.infrastructure.payment.simulated_payment_gateway import (
    SimulatedPaymentGateway,
)
from myshop.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from myshop.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from myshop.infrastructure.settings import get_settings


@lru_cache
def _product_repository(path: Path) -> JsonProductRepository:
    return JsonProductRepository(path)


@lru_cache
def _order_repository(path: Path) -> JsonOrderRepository:
    return JsonOrderRepository(path)


def product_repository() -> JsonProductRepository:
    return _product_repository(get_settings().data_dir / "products.json")


def order_repository() -> JsonOrderRepository:
    return _order_repository(get_settings().data_dir / "orders.json")


def payment_gateway() -> PaymentGateway:
    return SimulatedPaymentGateway()


def email_sender() -> EmailSender:
    return LoggingEmailSender()


def pricing_policy() -> PricingPolicy:
    settings = get_settings()
    return PricingPolicy(
        free_shipping_threshold=settings.free_shipping_threshold,
        standard_shipping_cost=settings.standard_shipping_cost,
        large_order_threshold=settings.large_order_threshold,
        large_order_discount_rate=settings.large_order_discount_rate,
    )


def currency() -> str:
    return get_settings().currency

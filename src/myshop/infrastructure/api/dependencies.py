"""FastAPI dependency providers.

Routes depend on these instead of the bootstrap module directly so
tests can swap implementations through ``app.dependency_overrides``.
"""

from __future__ import annotations

from myshop.application.ports import EmailSender, PaymentGateway
from myshop.domain.repository.order_repository import OrderRepository
from myshop.domain.repository.product_repository import ProductRepository
from myshop.domain.service.pricing_policy import PricingPolicy
from myshop.infrastructure import bootstrap


def get_product_repository() -> ProductRepository:
    return bootstrap.product_repository()


def get_order_repository() -> OrderRepository:
    return bootstrap.order_repository()


def get_payment_gateway() -> PaymentGateway:
    return bootstrap.payment_gateway()


def get_email_sender() -> EmailSender:
    return bootstrap.email_sender()


def get_pricing_policy() -> PricingPolicy:
    return bootstrap.pricing_policy()


def get_currency() -> str:
    return bootstrap.currency()

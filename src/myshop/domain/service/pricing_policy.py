"""Domain service: Pricing Policy.

Shipping and discount rules applied to an order once its line items
are known.  Thresholds and rates are configuration, not constants of
nature, so they live on a frozen policy object built by the bootstrap
module from settings.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from myshop.domain.model.order import Order
from myshop.domain.model.value_objects import Money


@dataclass(frozen=True)
class PricingPolicy:
    free_shipping_threshold: Decimal = Decimal("200.00")
    standard_shipping_cost: Decimal = Decimal("15.00")
    large_order_threshold: Decimal = Decimal("500.00")
    large_order_discount_rate: Decimal = Decimal("0.10")

    def shipping_cost_for(self, subtotal: Money) -> Money:
        """Free shipping at or above the threshold, flat rate below it."""
        if subtotal.amount >= self.free_shipping_threshold:
            return Money.zero(subtotal.currency)
        return Money(self.standard_shipping_cost, subtotal.currency)

    def discount_for(self, subtotal: Money) -> Money:
        """Percentage discount for large orders, nothing otherwise."""
        if subtotal.amount >= self.large_order_threshold:
            return (subtotal * self.large_order_discount_rate).rounded()
        return Money.zero(subtotal.currency)

    def apply(self, order: Order) -> None:
        subtotal = order.subtotal
        order.set_shipping_cost(self.shipping_cost_for(subtotal))
        order.apply_discount(self.discount_for(subtotal))

"""Unit tests for the shipping and discount rules."""

from decimal import Decimal

import pytest

from myshop.domain.model.order import Order, OrderLineItem
from myshop.domain.model.value_objects import Address, Money, Quantity
from myshop.domain.service.pricing_policy import PricingPolicy


def _order_with_subtotal(amount: str) -> Order:
    order = Order.create("ana@example.com", Address("Rua A", "Rio", "RJ", "20000"))
    order.add_item(OrderLineItem(1, "Thing", Quantity(1), Money.of(amount)))
    return order


class TestShippingCost:

    @pytest.mark.parametrize(
        ("subtotal", "expected"),
        [
            ("50.00", "15.00"),
            ("199.99", "15.00"),
            ("200.00", "0"),
            ("350.00", "0"),
        ],
    )
    def test_free_shipping_threshold(self, subtotal, expected):
        policy = PricingPolicy()
        assert policy.shipping_cost_for(Money.of(subtotal)) == Money.of(expected)


class TestDiscount:

    @pytest.mark.parametrize(
        ("subtotal", "expected"),
        [
            ("200.00", "0"),
            ("499.99", "0"),
            ("500.00", "50.00"),
            ("600.00", "60.00"),
            ("1234.55", "123.46"),
        ],
    )
    def test_large_order_discount(self, subtotal, expected):
        policy = PricingPolicy()
        assert policy.discount_for(Money.of(subtotal)) == Money.of(expected)

    def test_configurable_values(self):
        policy = PricingPolicy(
            free_shipping_threshold=Decimal("100"),
            standard_shipping_cost=Decimal("9.90"),
            large_order_threshold=Decimal("150"),
            large_order_discount_rate=Decimal("0.05"),
        )
        assert policy.shipping_cost_for(Money.of("99.99")) == Money.of("9.90")
        assert policy.discount_for(Money.of("200")) == Money.of("10.00")


class TestApply:

    def test_small_order(self):
        order = _order_with_subtotal("50.00")
        PricingPolicy().apply(order)
        assert order.shipping_cost == Money.of("15.00")
        assert order.discount == Money.of("0")
        assert order.total == Money.of("65.00")

    def test_large_order(self):
        order = _order_with_subtotal("600.00")
        PricingPolicy().apply(order)
        assert order.shipping_cost == Money.of("0")
        assert order.discount == Money.of("60.00")
        assert order.total == Money.of("540.00")

    def test_keeps_order_currency(self):
        order = Order.create("a@b.c", Address("Rua A", "Rio", "RJ", "20000"), currency="USD")
        order.add_item(OrderLineItem(1, "Thing", Quantity(1), Money.of("10", "USD")))
        PricingPolicy().apply(order)
        assert order.shipping_cost == Money.of("15.00", "USD")

"""Tests for the order query use cases."""

import pytest

from myshop.application.create_order import CreateOrderHandler
from myshop.application.dto import OrderItemSpec
from myshop.application.list_orders import ListOrdersHandler
from myshop.application.show_order import ShowOrderHandler
from myshop.domain.exceptions import EntityNotFoundError
from myshop.domain.model.product import Product
from myshop.domain.model.value_objects import Address, Money
from tests.fakes import (
    FakeEmailSender,
    FakeOrderRepository,
    FakePaymentGateway,
    FakeProductRepository,
)


@pytest.fixture()
def order_repo():
    repo = FakeOrderRepository()
    products = FakeProductRepository([
        Product(id=1, name="Notebook", price=Money.of("100.00"), stock_quantity=10),
    ])
    create = CreateOrderHandler(repo, products, FakePaymentGateway(), FakeEmailSender())
    address = Address("Rua A, 1", "Rio", "RJ", "20000-000")
    create.handle("ana@example.com", address, [OrderItemSpec(1, 1)])
    create.handle("bia@example.com", address, [OrderItemSpec(1, 2)])
    return repo


class TestShowOrder:

    def test_returns_summary(self, order_repo):
        dto = ShowOrderHandler(order_repo).handle(2)
        assert dto.customer_email == "bia@example.com"
        assert dto.items[0].product_name == "Notebook"
        assert dto.items[0].quantity == 2

    def test_missing_order(self, order_repo):
        with pytest.raises(EntityNotFoundError, match="#9 not found"):
            ShowOrderHandler(order_repo).handle(9)


class TestListOrders:

    def test_lists_all_by_id(self, order_repo):
        assert [dto.id for dto in ListOrdersHandler(order_repo).handle()] == [1, 2]

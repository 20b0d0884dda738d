"""Interaction tests for CreateOrder with mocked collaborators.

The repositories are fakes; the payment gateway and e-mail sender are
``unittest.mock`` objects so calls and failures can be asserted directly.
"""

from unittest.mock import MagicMock, call

import pytest

from myshop.application.create_order import CreateOrderHandler
from myshop.application.dto import OrderItemSpec
from myshop.application.ports import EmailSender, PaymentGateway
from myshop.domain.exceptions import InsufficientStockError
from myshop.domain.model.order import OrderStatus
from myshop.domain.model.product import Product
from myshop.domain.model.value_objects import Address, Money
from tests.fakes import FakeOrderRepository, FakeProductRepository

ADDRESS = Address("Rua A, 1", "São Paulo", "SP", "01000-000")


@pytest.fixture()
def product_repo():
    return FakeProductRepository([
        Product(id=1, name="Notebook", price=Money.of("100.00"), stock_quantity=10),
    ])


@pytest.fixture()
def order_repo():
    return FakeOrderRepository()


@pytest.fixture()
def payment_gateway():
    gateway = MagicMock(spec=PaymentGateway)
    gateway.authorize.return_value = "TXN-20260101-ABC"
    return gateway


@pytest.fixture()
def email_sender():
    return MagicMock(spec=EmailSender)


@pytest.fixture()
def handler(order_repo, product_repo, payment_gateway, email_sender):
    return CreateOrderHandler(order_repo, product_repo, payment_gateway, email_sender)


class TestCollaboratorCalls:

    def test_payment_authorized_once_with_total(self, handler, payment_gateway):
        dto = handler.handle("ana@example.com", ADDRESS, [OrderItemSpec(1, 2)])

        payment_gateway.authorize.assert_called_once_with(
            Money.of("200.00"), "ana@example.com", f"Order #{dto.id}"
        )
        payment_gateway.refund.assert_not_called()

    def test_confirmation_sent_after_payment(self, handler, payment_gateway, email_sender):
        manager = MagicMock()
        manager.attach_mock(payment_gateway.authorize, "authorize")
        manager.attach_mock(email_sender.send, "send")

        handler.handle("ana@example.com", ADDRESS, [OrderItemSpec(1, 1)])

        assert [c[0] for c in manager.mock_calls] == ["authorize", "send"]
        email_sender.send.assert_called_once()
        to, subject, body = email_sender.send.call_args.args
        assert to == "ana@example.com"
        assert subject == "Order #1 Confirmed"
        assert "TXN-20260101-ABC" in body

    def test_no_collaborator_called_when_validation_fails(
        self, handler, payment_gateway, email_sender
    ):
        with pytest.raises(InsufficientStockError):
            handler.handle("ana@example.com", ADDRESS, [OrderItemSpec(1, 50)])

        assert payment_gateway.mock_calls == []
        assert email_sender.mock_calls == []


class TestCollaboratorFailures:

    def test_payment_failure_propagates_after_order_is_saved(
        self, handler, order_repo, product_repo, payment_gateway, email_sender
    ):
        payment_gateway.authorize.side_effect = RuntimeError("card declined")

        with pytest.raises(RuntimeError, match="card declined"):
            handler.handle("ana@example.com", ADDRESS, [OrderItemSpec(1, 3)])

        [order] = order_repo.list_all()
        assert order.status == OrderStatus.CONFIRMED
        assert order.payment_reference is None
        assert product_repo.get_by_id(1).stock_quantity == 7
        email_sender.send.assert_not_called()

    def test_email_failure_propagates_after_payment(
        self, handler, order_repo, payment_gateway, email_sender
    ):
        email_sender.send.side_effect = ConnectionError("smtp down")

        with pytest.raises(ConnectionError):
            handler.handle("ana@example.com", ADDRESS, [OrderItemSpec(1, 1)])

        assert payment_gateway.authorize.call_args_list == [
            call(Money.of("115.00"), "ana@example.com", "Order #1")
        ]
        assert order_repo.get_by_id(1).payment_reference == "TXN-20260101-ABC"

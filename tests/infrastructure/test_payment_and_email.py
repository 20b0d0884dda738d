"""Tests for the simulated outbound collaborators."""

from datetime import datetime, timezone

from myshop.domain.model.value_objects import Money
from myshop.infrastructure.notification.logging_email_sender import LoggingEmailSender
from myshop.infrastructure.payment.simulated_payment_gateway import (
    SimulatedPaymentGateway,
)


class TestSimulatedPaymentGateway:

    def test_reference_uses_clock_and_id_factory(self):
        gateway = SimulatedPaymentGateway(
            id_factory=lambda: "ABC123",
            clock=lambda: datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc),
        )
        reference = gateway.authorize(Money.of("200.00"), "ana@example.com", "Order #1")
        assert reference == "TXN-20260101-ABC123"

    def test_default_references_are_unique(self):
        gateway = SimulatedPaymentGateway()
        first = gateway.authorize(Money.of("1.00"), "a@example.com", "Order #1")
        second = gateway.authorize(Money.of("1.00"), "a@example.com", "Order #2")
        assert first.startswith("TXN-")
        assert first != second

    def test_refund_accepts_reference(self):
        SimulatedPaymentGateway().refund("TXN-20260101-ABC123")


class TestLoggingEmailSender:

    def test_send_does_not_raise(self):
        LoggingEmailSender().send("ana@example.com", "Order #1 Confirmed", "Body")

"""Outbound ports for collaborators outside the domain.

The application layer talks to payment and notification providers only
through these interfaces; infrastructure supplies the implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from myshop.domain.model.value_objects import Money


class PaymentGateway(ABC):

    @abstractmethod
    def authorize(self, amount: Money, payer: str, memo: str) -> str:
        """Authorize a payment and return its transaction reference."""

    @abstractmethod
    def refund(self, transaction_reference: str) -> None:
        """Refund a previously authorized payment."""


class EmailSender(ABC):

    @abstractmethod
    def send(self, to: str, subject: str, body: str) -> None:
        """Deliver a plain-text message."""

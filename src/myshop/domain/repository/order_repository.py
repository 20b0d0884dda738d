"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from myshop.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order."""

    @abstractmethod
    def add(self, order: Order) -> Order:
        """Persist a new order with its line items, assigning its ID."""

    @abstractmethod
    def update(self, order: Order) -> None:
        """Persist the current state of an existing order."""

"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory)
live in the infrastructure layer and the test suite.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from myshop.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def add(self, product: Product) -> Product:
        """Persist a new product, assigning its ID."""

    @abstractmethod
    def update(self, product: Product) -> None:
        """Persist the current field values of an existing product.

        Raises ConcurrencyError if the stored version no longer matches
        ``product.version``; on success the version is incremented.
        """

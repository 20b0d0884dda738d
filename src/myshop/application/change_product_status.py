"""Application service: activate or deactivate a catalog product.

Inactive products stay in the catalog but are rejected by the order
workflow even when they have stock.
"""

from __future__ import annotations

from myshop.domain.exceptions import EntityNotFoundError
from myshop.domain.repository.product_repository import ProductRepository


class ChangeProductStatusHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int, active: bool) -> None:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID {product_id} not found")

        if active:
            product.activate()
        else:
            product.deactivate()
        self._product_repo.update(product)

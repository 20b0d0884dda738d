"""Application service: Update Stock use case."""

from __future__ import annotations

import structlog

from myshop.domain.exceptions import EntityNotFoundError
from myshop.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class UpdateStockHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int, new_quantity: int) -> None:
        """Set the stock level of a product to an absolute quantity."""
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID {product_id} not found")

        product.set_stock(new_quantity)
        self._product_repo.update(product)
        logger.info("Stock updated", product_id=product_id, stock=new_quantity)

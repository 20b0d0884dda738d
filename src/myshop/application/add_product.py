"""Application service: Add Product use case."""

from __future__ import annotations

import structlog

from myshop.application.dto import ProductDTO, product_to_dto
from myshop.domain.model.product import Product
from myshop.domain.model.value_objects import DEFAULT_CURRENCY, Money
from myshop.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        price: str,
        stock_quantity: int,
        description: str | None = None,
        currency: str = DEFAULT_CURRENCY,
    ) -> ProductDTO:
        """Add a new product to the catalog."""
        product = Product.create(
            name=name,
            price=Money.of(price, currency),
            stock_quantity=stock_quantity,
            description=description,
        )
        self._product_repo.add(product)
        logger.info("Product added", product_id=product.id, name=product.name)
        return product_to_dto(product)

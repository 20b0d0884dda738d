"""Application service: List Products use case (query)."""

from __future__ import annotations

from myshop.application.dto import ProductDTO, product_to_dto
from myshop.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, include_inactive: bool = False) -> list[ProductDTO]:
        """Return catalog products, active ones only unless asked otherwise."""
        products = sorted(self._product_repo.list_all(), key=lambda p: p.id or 0)
        return [
            product_to_dto(product)
            for product in products
            if include_inactive or product.is_active
        ]

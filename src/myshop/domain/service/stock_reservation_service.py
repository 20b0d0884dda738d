"""Domain service: Stock Reservation.

This service coordinates the cross-aggregate operation of reserving
or restoring product stock for an order.  It lives in the domain layer
because the logic is a core business rule, not just orchestration.

The two-phase approach (validate-then-mutate) ensures we never leave
the catalog in a partially-reserved state if one line fails validation;
a save that fails midway is compensated before the error propagates.
"""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from myshop.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from myshop.domain.model.order import Order
from myshop.domain.model.product import Product
from myshop.domain.model.value_objects import Quantity
from myshop.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class StockReservationService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def reserve(
        self,
        requests: Iterable[tuple[int, Quantity]],
        currency: str | None = None,
    ) -> list[tuple[Product, Quantity]]:
        """Reserve stock for every ``(product_id, quantity)`` request.

        Uses a two-phase approach:
          Phase 1, load and validate in input order: the product must
                   exist, be active, be priced in *currency* (when
                   given) and have enough stock for the sum of
                   everything requested against it.  Fails fast
                   before any mutation.
          Phase 2, mutate and persist: call ``reserve()`` on each
                   product and save it.  If a save fails (e.g. a
                   ``ConcurrencyError``), the products already saved
                   get their stock back before the error propagates.

        Returns ``(product, quantity)`` pairs in input order.
        """
        # Phase 1: load all products and validate
        loaded: dict[int, Product] = {}
        requested: dict[int, int] = {}
        lines: list[tuple[Product, Quantity]] = []

        for product_id, quantity in requests:
            product = loaded.get(product_id)
            if product is None:
                product = self._product_repo.get_by_id(product_id)
                if product is None:
                    raise EntityNotFoundError(f"Product with ID {product_id} not found")
                loaded[product_id] = product

            if not product.is_active:
                raise ValidationError(f"Product '{product.name}' is not active")
            if currency is not None and product.price.currency != currency:
                raise ValidationError(
                    f"Product '{product.name}' is priced in {product.price.currency}, "
                    f"expected {currency}"
                )

            total = requested.get(product_id, 0) + quantity.value
            if not product.has_stock(total):
                raise InsufficientStockError(product.name, total, product.stock_quantity)
            requested[product_id] = total
            lines.append((product, quantity))

        # Phase 2: mutate and persist, undoing earlier writes on failure
        committed: list[tuple[int, int]] = []
        try:
            for product_id, total in requested.items():
                self._commit(loaded[product_id], total)
                committed.append((product_id, total))
        except Exception:
            self._release(committed)
            raise

        return lines

    def _commit(self, product: Product, quantity: int) -> None:
        product.reserve(quantity)
        try:
            self._product_repo.update(product)
        except Exception:
            product.restore(quantity)
            raise
        logger.info(
            "Stock reserved",
            product_id=product.id,
            quantity=quantity,
            remaining=product.stock_quantity,
        )

    def _release(self, committed: list[tuple[int, int]]) -> None:
        """Give back reservations already persisted by a failed ``reserve``.

        Products are reloaded so the compensating write carries the
        current version stamp.
        """
        for product_id, quantity in reversed(committed):
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                logger.warning(
                    "Product missing while releasing stock", product_id=product_id
                )
                continue
            product.restore(quantity)
            self._product_repo.update(product)
            logger.warning(
                "Stock reservation rolled back",
                product_id=product_id,
                quantity=quantity,
                available=product.stock_quantity,
            )

    def restore_for_order(self, order: Order) -> None:
        """Put every line item's quantity back into its product's stock.

        Products that have since disappeared from the catalog are skipped.
        """
        for line in order.items:
            product = self._product_repo.get_by_id(line.product_id)
            if product is None:
                logger.warning(
                    "Product missing while restoring stock",
                    order_id=order.id,
                    product_id=line.product_id,
                )
                continue
            product.restore(line.quantity.value)
            self._product_repo.update(product)
            logger.info(
                "Stock restored",
                product_id=line.product_id,
                quantity=line.quantity.value,
                available=product.stock_quantity,
            )

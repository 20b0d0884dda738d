"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices change, stock is reserved and restored, products are activated
and deactivated in the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass

from myshop.domain.exceptions import InsufficientStockError, ValidationError
from myshop.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    This is an aggregate root; it is the entry point for any
    operation involving a product.  ``version`` is owned by the
    repository and used to detect concurrent stock updates.
    """

    id: int | None
    name: str
    price: Money
    stock_quantity: int
    description: str = ""
    is_active: bool = True
    version: int = 0

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        name: str,
        price: Money,
        stock_quantity: int,
        description: str | None = None,
    ) -> Product:
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if price.is_zero:
            raise ValidationError("Product price must be greater than zero")
        if stock_quantity < 0:
            raise ValidationError("Stock quantity cannot be negative")
        return Product(
            id=None,
            name=name.strip(),
            description=(description or "").strip(),
            price=price,
            stock_quantity=stock_quantity,
        )

    # --- Stock ----------------------------------------------------------------

    def has_stock(self, quantity: int) -> bool:
        return self.stock_quantity >= quantity

    def reserve(self, quantity: int) -> None:
        """Take *quantity* units out of stock for an order.

        Raises InsufficientStockError and leaves stock untouched if
        there is not enough available.
        """
        if quantity <= 0:
            raise ValidationError("Reservation quantity must be positive")
        if not self.has_stock(quantity):
            raise InsufficientStockError(self.name, quantity, self.stock_quantity)
        self.stock_quantity -= quantity

    def restore(self, quantity: int) -> None:
        """Put *quantity* units back into stock (e.g. on order cancellation)."""
        if quantity <= 0:
            raise ValidationError("Restore quantity must be positive")
        self.stock_quantity += quantity

    def set_stock(self, new_quantity: int) -> None:
        """Adjust stock to an absolute level through reserve/restore."""
        if new_quantity < 0:
            raise ValidationError("Stock quantity cannot be negative")
        difference = new_quantity - self.stock_quantity
        if difference > 0:
            self.restore(difference)
        elif difference < 0:
            self.reserve(-difference)

    # --- Catalog status -------------------------------------------------------

    def activate(self) -> None:
        self.is_active = True

    def deactivate(self) -> None:
        self.is_active = False

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        This does NOT affect any existing orders because orders
        capture a price snapshot when the item is added.
        """
        if new_price.is_zero:
            raise ValidationError("Product price must be greater than zero")
        self.price = new_price

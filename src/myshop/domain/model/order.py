"""Order aggregate, the core of the domain.

The Order is an aggregate root that owns its line items.
All business invariants are enforced here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4

from myshop.domain.exceptions import InvalidStateError, ValidationError
from myshop.domain.model.value_objects import DEFAULT_CURRENCY, Address, Money, Quantity


class OrderStatus(Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    SHIPPED = "SHIPPED"
    CANCELLED = "CANCELLED"


@dataclass
class OrderLineItem:
    """Captures the name and price of a product at the moment it is added.

    Later catalog changes never alter historical orders.
    """

    product_id: int
    product_name: str
    quantity: Quantity
    unit_price: Money  # locked when the item is added
    id: str = field(default_factory=lambda: uuid4().hex)

    @property
    def subtotal(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders; it enforces all
    business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: int | None
    customer_email: str
    shipping_address: Address
    items: list[OrderLineItem] = field(default_factory=list)
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    currency: str = DEFAULT_CURRENCY
    shipping_cost: Money | None = None
    discount: Money | None = None
    payment_reference: str | None = None

    def __post_init__(self) -> None:
        if self.shipping_cost is None:
            self.shipping_cost = Money.zero(self.currency)
        if self.discount is None:
            self.discount = Money.zero(self.currency)

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        customer_email: str,
        shipping_address: Address,
        currency: str = DEFAULT_CURRENCY,
    ) -> Order:
        """Create a new, empty PENDING order."""
        if not customer_email or not customer_email.strip():
            raise ValidationError("Customer email is required")
        return Order(
            id=None,
            customer_email=customer_email.strip(),
            shipping_address=shipping_address,
            currency=currency,
        )

    # --- Line items -----------------------------------------------------------

    def add_item(self, item: OrderLineItem) -> None:
        self._assert_pending("add items to")
        if item.unit_price.currency != self.currency:
            raise ValidationError(
                f"Cannot add a {item.unit_price.currency} item "
                f"to a {self.currency} order"
            )
        self.items.append(item)

    def remove_item(self, item_id: str) -> None:
        """Remove a line item by id; unknown ids are ignored."""
        self._assert_pending("remove items from")
        remaining = [item for item in self.items if item.id != item_id]
        if len(remaining) == len(self.items):
            return
        self.items = remaining
        if self.discount > self.subtotal:
            self.discount = Money.zero(self.currency)

    # --- Pricing --------------------------------------------------------------

    def apply_discount(self, amount: Money) -> None:
        if amount > self.subtotal:
            raise ValidationError(
                f"Discount {amount} cannot be greater than subtotal {self.subtotal}"
            )
        self.discount = amount

    def set_shipping_cost(self, amount: Money) -> None:
        # Money itself rejects negative amounts; this only guards currency.
        if amount.currency != self.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {amount.currency}"
            )
        self.shipping_cost = amount

    # --- State transitions ----------------------------------------------------

    def confirm(self) -> None:
        """Transition PENDING -> CONFIRMED.

        Stock reservation must happen *before* calling this
        (coordinated by the application handler via the domain service).
        """
        if self.status != OrderStatus.PENDING:
            raise InvalidStateError(
                f"Cannot confirm order, current status is {self.status.value}, "
                f"expected PENDING"
            )
        if not self.items:
            raise ValidationError("Cannot confirm an order without items")
        self.status = OrderStatus.CONFIRMED

    def cancel(self) -> None:
        """Transition PENDING|CONFIRMED -> CANCELLED.

        If the order was CONFIRMED, stock must be restored by the caller.
        """
        if self.status == OrderStatus.CANCELLED:
            raise InvalidStateError("Order is already cancelled")
        if self.status == OrderStatus.SHIPPED:
            raise InvalidStateError("Cannot cancel order in SHIPPED status")
        self.status = OrderStatus.CANCELLED

    def mark_shipped(self) -> None:
        if self.status != OrderStatus.CONFIRMED:
            raise InvalidStateError(
                f"Cannot ship order, current status is {self.status.value}, "
                f"expected CONFIRMED"
            )
        self.status = OrderStatus.SHIPPED

    def record_payment(self, reference: str) -> None:
        if not reference or not reference.strip():
            raise ValidationError("Payment reference is required")
        self.payment_reference = reference

    # --- Computed properties --------------------------------------------------

    @property
    def subtotal(self) -> Money:
        result = Money.zero(self.currency)
        for item in self.items:
            result = result + item.subtotal
        return result

    @property
    def total(self) -> Money:
        return self.subtotal + self.shipping_cost - self.discount

    # --- Internal helpers -----------------------------------------------------

    def _assert_pending(self, action: str) -> None:
        if self.status != OrderStatus.PENDING:
            raise InvalidStateError(
                f"Cannot {action} an order in {self.status.value} status"
            )

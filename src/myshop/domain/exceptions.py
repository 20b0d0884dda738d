"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI and HTTP layers can catch them uniformly and display
user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InsufficientStockError(ValidationError):
    """A product does not have enough stock for the requested quantity."""

    def __init__(self, product_name: str, requested: int, available: int) -> None:
        super().__init__(
            f"Insufficient stock for product '{product_name}'. "
            f"Requested: {requested}, Available: {available}"
        )
        self.product_name = product_name
        self.requested = requested
        self.available = available


class InvalidStateError(DomainException):
    """An operation is not allowed in the aggregate's current status."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ConcurrencyError(DomainException):
    """An entity was modified by someone else since it was loaded."""

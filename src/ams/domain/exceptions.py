"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI and HTTP layers can catch them uniformly and display
user-friendly messages.

Checkout failures form their own family under CheckoutError.  Every one of
them aborts the whole checkout; none is recovered partially.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class CheckoutError(DomainException):
    """Base class for failures while placing an order."""


class EmptyCart(CheckoutError):
    """The user has no cart, or the cart has no line items."""

    def __init__(self) -> None:
        super().__init__("Cart is empty!")


class InsufficientStock(CheckoutError):
    """A line item asks for more units than the product has available."""

    def __init__(self, product_name: str, requested: int, available: int) -> None:
        self.product_name = product_name
        self.requested = requested
        self.available = available
        super().__init__(
            f"Insufficient stock for product: {product_name} "
            f"(need {requested}, have {available} available)"
        )


class InventoryUpdateFailed(CheckoutError):
    """A stock write did not apply, e.g. the product vanished mid-checkout."""

    def __init__(self, product_name: str) -> None:
        self.product_name = product_name
        super().__init__(f"Failed to update inventory for product: {product_name}")


class CartRemovalFailed(CheckoutError):
    """The cart could not be found for deletion after the order was written."""

    def __init__(self) -> None:
        super().__init__("Failed to remove cart after order placement")


class TransactionAborted(CheckoutError):
    """Wraps whatever made a checkout roll back.

    The underlying error is available as ``__cause__`` and as ``reason``.
    """

    def __init__(self, reason: Exception) -> None:
        self.reason = reason
        super().__init__(f"Error placing order: {reason}")

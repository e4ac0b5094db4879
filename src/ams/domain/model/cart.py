"""Cart aggregate.

A user has at most one cart.  It is created lazily by the first
add-to-cart and disappears either when its last line is removed or when
checkout turns it into an order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from ams.domain.exceptions import ValidationError
from ams.domain.model.value_objects import Quantity


@dataclass
class CartItem:
    product_id: str
    quantity: int

    def __post_init__(self) -> None:
        Quantity(self.quantity)  # validates: positive integer


@dataclass
class Cart:
    """Aggregate root for a user's pending purchase.

    Lines keep insertion order.  Stock figures are passed in by the
    application handler; the cart never looks products up itself.
    """

    user_id: str
    items: list[CartItem] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Queries --------------------------------------------------------------

    @property
    def is_empty(self) -> bool:
        return not self.items

    def quantity_of(self, product_id: str) -> int:
        item = self._find(product_id)
        return item.quantity if item else 0

    def product_ids(self) -> list[str]:
        return [item.product_id for item in self.items]

    # --- Mutations ------------------------------------------------------------

    def add(self, product_id: str, quantity: int, available: int) -> int:
        """Add *quantity* units, never holding more than *available*.

        Returns the line's new quantity.
        """
        Quantity(quantity)
        current = self.quantity_of(product_id)
        if current >= available:
            raise ValidationError("Stock limit reached")

        new_quantity = min(current + quantity, available)
        item = self._find(product_id)
        if item is None:
            self.items.append(CartItem(product_id=product_id, quantity=new_quantity))
        else:
            item.quantity = new_quantity
        self._touch()
        return new_quantity

    def remove_one(self, product_id: str) -> None:
        """Take one unit off a line; a line at one unit is dropped."""
        item = self._require(product_id)
        if item.quantity > 1:
            item.quantity -= 1
        else:
            self.items.remove(item)
        self._touch()

    def remove_line(self, product_id: str) -> None:
        self.items.remove(self._require(product_id))
        self._touch()

    def discard(self, product_id: str) -> bool:
        """Drop a product if present.  Returns True when a line was removed."""
        item = self._find(product_id)
        if item is None:
            return False
        self.items.remove(item)
        self._touch()
        return True

    def set_quantity(self, product_id: str, amount: int, available: int) -> bool:
        """Set a line to *amount*, capped at *available*.

        Returns True when the cap was applied.
        """
        Quantity(amount)
        item = self._require(product_id)
        if available <= 0:
            raise ValidationError("Stock limit reached")
        capped = amount > available
        item.quantity = available if capped else amount
        self._touch()
        return capped

    # --- Internal helpers -----------------------------------------------------

    def _find(self, product_id: str) -> CartItem | None:
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None

    def _require(self, product_id: str) -> CartItem:
        item = self._find(product_id)
        if item is None:
            raise ValidationError(f"Product ID '{product_id}' is not in the cart")
        return item

    def _touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)

"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
artisans list them, moderators approve or disapprove them, stock goes
down with every checkout and eventually the listing is retired.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum

from ams.domain.exceptions import ValidationError
from ams.domain.model.lifecycle import RecordState
from ams.domain.model.value_objects import Money

# Listed products sell at 90% of their list price
DISCOUNT_FACTOR = Decimal("0.90")


class ProductStatus(Enum):
    PENDING = "pending"
    APPROVED = "approved"
    DISAPPROVED = "disapproved"


def discounted(old_price: Money) -> Money:
    return Money(old_price.amount * DISCOUNT_FACTOR, old_price.currency).rounded()


@dataclass
class Product:
    """A product in the catalog.

    ``old_price`` is the list price and ``new_price`` the price customers
    pay.  Orders never hold a reference to a Product; they copy what they
    need at checkout, so editing or retiring a product leaves past orders
    untouched.
    """

    id: str
    owner_id: str
    uploaded_by: str
    name: str
    category: str
    material: str
    image: str
    old_price: Money
    new_price: Money
    quantity: int
    description: str
    status: ProductStatus = ProductStatus.PENDING
    state: RecordState = RecordState.ACTIVE
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        product_id: str,
        owner_id: str,
        uploaded_by: str,
        name: str,
        category: str,
        material: str,
        image: str,
        old_price: Money,
        quantity: int,
        description: str,
    ) -> Product:
        """Create a pending listing, deriving the discounted price."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if not category or not material:
            raise ValidationError("Category and material are required")
        if old_price.amount <= 0:
            raise ValidationError("Product price must be greater than zero")
        _check_positive_stock(quantity)

        list_price = old_price.rounded()
        return Product(
            id=product_id,
            owner_id=owner_id,
            uploaded_by=uploaded_by,
            name=name.strip(),
            category=category.lower(),
            material=material.lower(),
            image=image,
            old_price=list_price,
            new_price=discounted(list_price),
            quantity=quantity,
            description=description,
        )

    # --- Moderation -----------------------------------------------------------

    def approve(self) -> None:
        self._assert_active()
        self.status = ProductStatus.APPROVED
        self._touch()

    def disapprove(self) -> None:
        self._assert_active()
        self.status = ProductStatus.DISAPPROVED
        self._touch()

    def retire(self) -> None:
        self._assert_active()
        self.state = RecordState.RETIRED
        self._touch()

    # --- Mutations ------------------------------------------------------------

    def update_details(
        self,
        name: str | None = None,
        category: str | None = None,
        material: str | None = None,
        image: str | None = None,
        description: str | None = None,
        old_price: Money | None = None,
    ) -> None:
        """Edit the listing.  A new list price recomputes ``new_price``.

        This does NOT affect any existing orders because orders
        capture a product snapshot at checkout time.
        """
        self._assert_active()
        if name is not None:
            if not name.strip():
                raise ValidationError("Product name is required")
            self.name = name.strip()
        if category is not None:
            self.category = category.lower()
        if material is not None:
            self.material = material.lower()
        if image is not None:
            self.image = image
        if description is not None:
            self.description = description
        if old_price is not None:
            if old_price.amount <= 0:
                raise ValidationError("Product price must be greater than zero")
            self.old_price = old_price.rounded()
            self.new_price = discounted(self.old_price)
        self._touch()

    def set_quantity(self, quantity: int, allow_zero: bool = False) -> None:
        """Overwrite the stock level.

        Zero is only accepted when the caller says so: a checkout may sell
        the last unit, but restocking to zero by accident must fail loudly.
        """
        self._assert_active()
        if not isinstance(quantity, int) or isinstance(quantity, bool):
            raise ValidationError(f"{quantity!r} is not a valid number")
        if quantity < 0:
            raise ValidationError("Quantity cannot be negative")
        if quantity == 0 and not allow_zero:
            raise ValidationError(
                "Quantity cannot be zero. Use allow_zero=True for order processing."
            )
        self.quantity = quantity
        self._touch()

    # --- Computed properties --------------------------------------------------

    @property
    def is_active(self) -> bool:
        return self.state == RecordState.ACTIVE

    @property
    def purchasable_stock(self) -> int:
        """Units customers can buy: zero unless approved and active."""
        if self.is_active and self.status == ProductStatus.APPROVED:
            return self.quantity
        return 0

    # --- Internal helpers -----------------------------------------------------

    def _assert_active(self) -> None:
        if not self.is_active:
            raise ValidationError(f"Product '{self.name}' has been retired")

    def _touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)


def _check_positive_stock(quantity: int) -> None:
    if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity <= 0:
        raise ValidationError("Quantity must be a positive integer greater than 0")

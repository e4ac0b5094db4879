"""Order aggregate: the record of a completed checkout.

An Order owns its lines.  Each line embeds a snapshot of the product as it
was at checkout, so later edits or retirement of the product never alter
a historical order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from ams.domain.exceptions import ValidationError
from ams.domain.model.lifecycle import RecordState
from ams.domain.model.product import Product
from ams.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "pending"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class PaymentStatus(Enum):
    UNPAID = "unpaid"
    PAID = "paid"
    FAILED = "failed"


# Allowed lifecycle moves; DELIVERED and CANCELLED are terminal.
_TRANSITIONS: dict[OrderStatus, tuple[OrderStatus, ...]] = {
    OrderStatus.PENDING: (OrderStatus.SHIPPED, OrderStatus.CANCELLED),
    OrderStatus.SHIPPED: (OrderStatus.DELIVERED, OrderStatus.CANCELLED),
    OrderStatus.DELIVERED: (),
    OrderStatus.CANCELLED: (),
}


@dataclass(frozen=True)
class ProductSnapshot:
    """Descriptive fields of a product, copied at checkout time."""

    name: str
    category: str
    material: str
    image: str
    old_price: Money
    new_price: Money
    quantity: int  # stock level when the order was placed
    description: str

    @staticmethod
    def of(product: Product) -> ProductSnapshot:
        return ProductSnapshot(
            name=product.name,
            category=product.category,
            material=product.material,
            image=product.image,
            old_price=product.old_price,
            new_price=product.new_price,
            quantity=product.quantity,
            description=product.description,
        )


@dataclass(frozen=True)
class OrderLine:
    product: ProductSnapshot
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.product.new_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for purchases.

    Use ``Order.place()`` for new orders.  The repository rebuilds persisted
    orders through the plain ``__init__``, which does not re-validate.
    """

    id: int | None
    user_id: str
    lines: list[OrderLine]
    money: Money
    purchased_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    status: OrderStatus = OrderStatus.PENDING
    delivery_person_id: str | None = None
    payment_id: str | None = None
    payment_status: PaymentStatus = PaymentStatus.UNPAID
    state: RecordState = RecordState.ACTIVE
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def place(user_id: str, lines: list[OrderLine], money: Money) -> Order:
        if not lines:
            raise ValidationError("Order must contain at least one item")
        now = datetime.now(timezone.utc)
        return Order(
            id=None,
            user_id=user_id,
            lines=list(lines),
            money=money,
            purchased_at=now,
            updated_at=now,
        )

    # --- State transitions ----------------------------------------------------

    def change_status(self, new_status: OrderStatus) -> None:
        self._assert_active()
        if new_status not in _TRANSITIONS[self.status]:
            raise ValidationError(
                f"Cannot move order from {self.status.value} to {new_status.value}"
            )
        self.status = new_status
        self._touch()

    def accept_delivery(self, delivery_person_id: str) -> None:
        """Assign a delivery person.  A pending order ships on acceptance."""
        self._assert_active()
        if self.delivery_person_id is not None:
            raise ValidationError("Order already assigned")
        if self.status not in (OrderStatus.PENDING, OrderStatus.SHIPPED):
            raise ValidationError(
                f"Cannot accept delivery of an order in {self.status.value} status"
            )
        self.delivery_person_id = delivery_person_id
        if self.status == OrderStatus.PENDING:
            self.status = OrderStatus.SHIPPED
        self._touch()

    def complete_delivery(self, delivery_person_id: str) -> None:
        self._assert_active()
        if self.delivery_person_id != delivery_person_id:
            raise ValidationError("You are not assigned to this order")
        self.change_status(OrderStatus.DELIVERED)

    def record_payment(self, payment_id: str, status: PaymentStatus) -> None:
        self._assert_active()
        if not payment_id or not payment_id.strip():
            raise ValidationError("Payment ID is required")
        if self.payment_status == PaymentStatus.PAID:
            raise ValidationError(f"Order #{self.id} is already paid")
        self.payment_id = payment_id.strip()
        self.payment_status = status
        self._touch()

    def retire(self) -> None:
        self._assert_active()
        self.state = RecordState.RETIRED
        self._touch()

    # --- Computed properties --------------------------------------------------

    @property
    def is_active(self) -> bool:
        return self.state == RecordState.ACTIVE

    @property
    def item_count(self) -> int:
        return len(self.lines)

    @property
    def subtotal(self) -> Money:
        return Money.total(line.line_total for line in self.lines)

    @property
    def awaiting_delivery(self) -> bool:
        return (
            self.delivery_person_id is None
            and self.status in (OrderStatus.PENDING, OrderStatus.SHIPPED)
        )

    # --- Internal helpers -----------------------------------------------------

    def _assert_active(self) -> None:
        if not self.is_active:
            raise ValidationError(f"Order #{self.id} has been retired")

    def _touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)

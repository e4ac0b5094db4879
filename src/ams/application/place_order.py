"""Application service: Place Order (checkout) use case.

Turns a user's cart into an order inside one unit of work:

1. Load the cart; an absent or empty cart is EmptyCart.
2. Check every line against current stock (no writes yet).
3. Price the order: subtotal of discounted prices, 5% tax rounded to
   cents, flat shipping fee.
4. Decrement stock for every line.
5. Write the order with a product snapshot per line.
6. Delete the cart.
7. Commit.

Any failure rolls every write back and surfaces as TransactionAborted
chained to the cause.  Nothing is retried.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from ams.application.dto import PlacedOrderDTO
from ams.domain.exceptions import (
    CartRemovalFailed,
    EmptyCart,
    InsufficientStock,
    TransactionAborted,
)
from ams.domain.model.cart import Cart
from ams.domain.model.order import Order, OrderLine, ProductSnapshot
from ams.domain.model.product import Product
from ams.domain.model.value_objects import Money, Quantity
from ams.domain.repository.unit_of_work import UnitOfWork
from ams.domain.service.stock_service import StockService

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Pricing policy
# ---------------------------------------------------------------------------
TAX_RATE = Decimal("0.05")
SHIPPING_FEE = Money(Decimal("50.00"))


def price_order(subtotal: Money) -> Money:
    """Total payable for a subtotal: tax and shipping included."""
    tax = subtotal.percent(TAX_RATE)
    return (subtotal + tax + SHIPPING_FEE).rounded()


class PlaceOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, user_id: str) -> PlacedOrderDTO:
        try:
            with self._uow as uow:
                cart = uow.carts.get_by_user(user_id)
                if cart is None or cart.is_empty:
                    raise EmptyCart()

                lines = self._load_lines(uow, cart)
                stock = StockService(uow.products)

                # Phase 1: validate every line before touching stock
                stock.assert_available(lines)

                subtotal = Money.zero()
                order_lines: list[OrderLine] = []
                for product, quantity in lines:
                    subtotal = subtotal + product.new_price * quantity
                    order_lines.append(
                        OrderLine(
                            product=ProductSnapshot.of(product),
                            quantity=Quantity(quantity),
                        )
                    )
                total = price_order(subtotal)

                # Phase 2: mutate
                stock.decrement(lines)

                order = Order.place(user_id=user_id, lines=order_lines, money=total)
                uow.orders.save(order)

                if not uow.carts.delete(user_id):
                    raise CartRemovalFailed()

                uow.commit()
        except Exception as exc:
            logger.warning("Checkout for user %s aborted: %s", user_id, exc)
            raise TransactionAborted(exc) from exc

        logger.info(
            "Order #%s placed for user %s: %d item(s), total %s",
            order.id, user_id, len(order_lines), total,
        )
        return PlacedOrderDTO(
            success=True,
            message="Order placed successfully!",
            order_id=order.id,  # type: ignore[arg-type]
            order_total=total.amount,
            item_count=len(order_lines),
        )

    @staticmethod
    def _load_lines(uow: UnitOfWork, cart: Cart) -> list[tuple[Product, int]]:
        """Resolve each cart line to its product.

        A product that is gone entirely has no stock to sell.
        """
        lines: list[tuple[Product, int]] = []
        for item in cart.items:
            product = uow.products.get_by_id(item.product_id)
            if product is None:
                raise InsufficientStock(f"#{item.product_id}", item.quantity, 0)
            lines.append((product, item.quantity))
        return lines

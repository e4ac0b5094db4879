"""Application services: cart editing use cases.

Removing the last line of a cart deletes the cart itself, so a user
never keeps an empty cart around.
"""

from __future__ import annotations

from ams.domain.exceptions import EntityNotFoundError
from ams.domain.model.cart import Cart
from ams.domain.repository.unit_of_work import UnitOfWork
from ams.domain.service.stock_service import StockService


def _require_cart(uow: UnitOfWork, user_id: str) -> Cart:
    cart = uow.carts.get_by_user(user_id)
    if cart is None:
        raise EntityNotFoundError(f"No cart found for user '{user_id}'")
    return cart


def _save_or_delete(uow: UnitOfWork, cart: Cart) -> bool:
    """Persist the cart, or delete it once empty.  True if deleted."""
    if cart.is_empty:
        uow.carts.delete(cart.user_id)
        return True
    uow.carts.save(cart)
    return False


class RemoveOneFromCartHandler:
    """Take a single unit of a product out of the cart."""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, user_id: str, product_id: str) -> str:
        with self._uow as uow:
            cart = _require_cart(uow, user_id)
            had_unit_left = cart.quantity_of(product_id) > 1
            cart.remove_one(product_id)
            deleted = _save_or_delete(uow, cart)
            uow.commit()

        if deleted:
            return "Cart deleted!"
        return "Cart updated!" if had_unit_left else "Product removed from cart!"


class RemoveCartLineHandler:
    """Drop a product from the cart regardless of its quantity."""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, user_id: str, product_id: str) -> str:
        with self._uow as uow:
            cart = _require_cart(uow, user_id)
            cart.remove_line(product_id)
            deleted = _save_or_delete(uow, cart)
            uow.commit()

        return "Cart cleared!" if deleted else "Product removed from cart!"


class ChangeCartQuantityHandler:
    """Set a line to an exact quantity, capped at available stock."""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, user_id: str, product_id: str, amount: int) -> str:
        with self._uow as uow:
            cart = _require_cart(uow, user_id)
            available = StockService(uow.products).current_stock(product_id)
            capped = cart.set_quantity(product_id, amount, available)
            uow.carts.save(cart)
            uow.commit()

        return "Inventory limit reached!" if capped else "Cart updated!"

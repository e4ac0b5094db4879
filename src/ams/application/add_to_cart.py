"""Application service: Add To Cart use case.

Creates the user's cart on first use.  A line never holds more units
than the product has available for purchase.
"""

from __future__ import annotations

import logging

from ams.domain.exceptions import EntityNotFoundError
from ams.domain.model.cart import Cart
from ams.domain.repository.unit_of_work import UnitOfWork
from ams.domain.service.stock_service import StockService

logger = logging.getLogger(__name__)


class AddToCartHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, user_id: str, product_id: str, quantity: int = 1) -> str:
        """Add units of a product and return a status message."""
        with self._uow as uow:
            if uow.products.get_by_id(product_id) is None:
                raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

            available = StockService(uow.products).current_stock(product_id)
            cart = uow.carts.get_by_user(user_id)
            if cart is None:
                cart = Cart(user_id=user_id)
            already_in_cart = cart.quantity_of(product_id) > 0

            new_quantity = cart.add(product_id, quantity, available)
            uow.carts.save(cart)
            uow.commit()

        logger.debug(
            "Cart of user %s: product %s now at %d", user_id, product_id, new_quantity
        )
        return "Cart updated!" if already_in_cart else "Product added to cart!"

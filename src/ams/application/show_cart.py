"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from ams.application.dto import CartDTO, cart_to_dto, empty_cart_dto
from ams.domain.repository.unit_of_work import UnitOfWork


class ShowCartHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, user_id: str) -> CartDTO:
        with self._uow as uow:
            cart = uow.carts.get_by_user(user_id)
            if cart is None:
                return empty_cart_dto(user_id)
            products = {}
            for product_id in cart.product_ids():
                product = uow.products.get_by_id(product_id)
                if product is not None:
                    products[product_id] = product
            return cart_to_dto(cart, products)

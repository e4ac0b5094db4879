"""Application service: Retire Product use case.

Retiring a product also withdraws it from every cart that holds it.
The cascade is done here, explicitly, inside the same unit of work.
"""

from __future__ import annotations

import logging

from ams.domain.exceptions import EntityNotFoundError
from ams.domain.model.product import Product
from ams.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


def withdraw_product(uow: UnitOfWork, product: Product) -> int:
    """Retire *product* and pull it from all carts.

    Carts left empty are deleted.  Returns the number of carts touched.
    Does not commit.
    """
    product.retire()
    uow.products.save(product)

    carts = uow.carts.list_containing(product.id)
    for cart in carts:
        cart.discard(product.id)
        if cart.is_empty:
            uow.carts.delete(cart.user_id)
        else:
            uow.carts.save(cart)
    return len(carts)


class RetireProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_id: str) -> None:
        with self._uow as uow:
            product = uow.products.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
            touched = withdraw_product(uow, product)
            uow.commit()

        logger.info("Product #%s retired, removed from %d cart(s)", product_id, touched)

"""Domain service: Stock.

The single authority on how many units of a product can be bought and
the only way stock levels are written.  Checkout and administrative
restocking both go through it.

Checkout uses the two-phase approach (validate-then-mutate): every line
is checked against current stock before any stock is written, so a
failing line never leaves earlier lines decremented.
"""

from __future__ import annotations

import logging

from ams.domain.exceptions import InsufficientStock, InventoryUpdateFailed
from ams.domain.model.product import Product
from ams.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class StockService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def current_stock(self, product_id: str) -> int:
        """Units available for purchase.

        Zero when the product does not exist, is retired, or has not been
        approved.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            return 0
        return product.purchasable_stock

    def set_stock(self, product_id: str, new_quantity: int, allow_zero: bool = False) -> bool:
        """Overwrite a product's stock level.

        Negative values are always rejected, zero only unless
        ``allow_zero`` is set (see ``Product.set_quantity``).  Returns
        False, writing nothing, when the product no longer exists.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            logger.warning("Stock write skipped: product %s not found", product_id)
            return False
        product.set_quantity(new_quantity, allow_zero=allow_zero)
        self._product_repo.save(product)
        logger.debug("Stock of product %s set to %d", product_id, new_quantity)
        return True

    # --- Checkout -------------------------------------------------------------

    def assert_available(self, lines: list[tuple[Product, int]]) -> None:
        """Phase 1: fail fast if any (product, quantity) pair exceeds stock."""
        for product, quantity in lines:
            available = self.current_stock(product.id)
            if quantity > available:
                raise InsufficientStock(product.name, quantity, available)

    def decrement(self, lines: list[tuple[Product, int]]) -> None:
        """Phase 2: subtract each ordered quantity from fresh stock.

        Stock is re-read per line, so a product that vanished since phase 1
        surfaces as InventoryUpdateFailed.  Selling the last unit is allowed.
        """
        for product, quantity in lines:
            remaining = self.current_stock(product.id) - quantity
            if remaining < 0 or not self.set_stock(product.id, remaining, allow_zero=True):
                raise InventoryUpdateFailed(product.name)

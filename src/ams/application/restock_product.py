"""Application service: Restock Product use case.

Administrative stock changes go through the default StockService path,
which refuses zero: emptying a listing is done by retiring it.
"""

from __future__ import annotations

from ams.domain.exceptions import EntityNotFoundError
from ams.domain.repository.unit_of_work import UnitOfWork
from ams.domain.service.stock_service import StockService


class RestockProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_id: str, quantity: int) -> None:
        with self._uow as uow:
            if not StockService(uow.products).set_stock(product_id, quantity):
                raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
            uow.commit()

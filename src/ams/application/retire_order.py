"""Application service: Retire Order use case.

Orders are never physically deleted; a retired order disappears from
every listing but stays on record.
"""

from __future__ import annotations

from ams.domain.exceptions import EntityNotFoundError
from ams.domain.repository.unit_of_work import UnitOfWork


class RetireOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: int) -> None:
        with self._uow as uow:
            order = uow.orders.get_by_id(order_id)
            if order is None:
                raise EntityNotFoundError(f"Order #{order_id} not found")
            order.retire()
            uow.orders.save(order)
            uow.commit()

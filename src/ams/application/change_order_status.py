"""Application service: Change Order Status use case."""

from __future__ import annotations

import logging

from ams.domain.exceptions import EntityNotFoundError, ValidationError
from ams.domain.model.order import OrderStatus
from ams.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class ChangeOrderStatusHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: int, status: str) -> None:
        try:
            new_status = OrderStatus(status.lower())
        except ValueError as exc:
            raise ValidationError(f"{status} is not a valid order status") from exc

        with self._uow as uow:
            order = uow.orders.get_by_id(order_id)
            if order is None:
                raise EntityNotFoundError(f"Order #{order_id} not found")
            previous = order.status
            order.change_status(new_status)
            uow.orders.save(order)
            uow.commit()

        logger.info("Order #%s: %s -> %s", order_id, previous.value, new_status.value)

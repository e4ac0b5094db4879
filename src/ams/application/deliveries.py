"""Application services: delivery use cases.

Delivery personnel pick up unassigned orders, and only the person an
order is assigned to can mark it delivered.
"""

from __future__ import annotations

import logging

from ams.application.dto import OrderDTO, order_to_dto
from ams.domain.exceptions import EntityNotFoundError, ValidationError
from ams.domain.model.order import Order
from ams.domain.model.user import Role
from ams.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


def _require_courier(uow: UnitOfWork, user_id: str) -> None:
    user = uow.users.get_by_id(user_id)
    if user is None:
        raise EntityNotFoundError(f"User with ID '{user_id}' not found")
    if user.role != Role.DELIVERY:
        raise ValidationError(f"User '{user.username}' is not delivery personnel")


def _require_order(uow: UnitOfWork, order_id: int) -> Order:
    order = uow.orders.get_by_id(order_id)
    if order is None:
        raise EntityNotFoundError(f"Order #{order_id} not found")
    return order


class AvailableDeliveriesHandler:
    """Pending or shipped orders nobody has picked up yet."""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> list[OrderDTO]:
        with self._uow as uow:
            return [
                order_to_dto(o) for o in uow.orders.list_all() if o.awaiting_delivery
            ]


class ListDeliveryOrdersHandler:
    """Orders assigned to one delivery person."""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, delivery_person_id: str) -> list[OrderDTO]:
        with self._uow as uow:
            return [
                order_to_dto(o)
                for o in uow.orders.list_all()
                if o.delivery_person_id == delivery_person_id
            ]


class AcceptDeliveryHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: int, delivery_person_id: str) -> OrderDTO:
        with self._uow as uow:
            _require_courier(uow, delivery_person_id)
            order = _require_order(uow, order_id)
            order.accept_delivery(delivery_person_id)
            uow.orders.save(order)
            uow.commit()

        logger.info("Order #%s accepted by courier %s", order_id, delivery_person_id)
        return order_to_dto(order)


class CompleteDeliveryHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: int, delivery_person_id: str) -> OrderDTO:
        with self._uow as uow:
            order = _require_order(uow, order_id)
            order.complete_delivery(delivery_person_id)
            uow.orders.save(order)
            uow.commit()

        logger.info("Order #%s delivered by courier %s", order_id, delivery_person_id)
        return order_to_dto(order)

"""Application services: order listing queries."""

from __future__ import annotations

from ams.application.dto import OrderDTO, order_to_dto
from ams.domain.repository.unit_of_work import UnitOfWork


class ListUserOrdersHandler:
    """A customer's own orders, newest first."""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, user_id: str) -> list[OrderDTO]:
        with self._uow as uow:
            return [order_to_dto(o) for o in uow.orders.list_by_user(user_id)]


class ListAllOrdersHandler:
    """Every active order, for administrators."""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> list[OrderDTO]:
        with self._uow as uow:
            return [order_to_dto(o) for o in uow.orders.list_all()]

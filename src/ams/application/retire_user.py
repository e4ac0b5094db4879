"""Application service: Retire User use case.

Retiring a user cascades, explicitly and in one unit of work:

- every product they listed is retired and pulled from all carts;
- their own cart is deleted;
- their support tickets are removed;
- workshops they booked that no artisan has accepted yet are removed,
  and workshops they host go back to pending;
- their custom requests are removed, and requests they took on are
  released for other artisans.

Their orders are kept; they are the history of what was sold.
"""

from __future__ import annotations

import logging

from ams.application.retire_product import withdraw_product
from ams.domain.exceptions import EntityNotFoundError
from ams.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class RetireUserHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, user_id: str) -> None:
        with self._uow as uow:
            user = uow.users.get_by_id(user_id)
            if user is None:
                raise EntityNotFoundError(f"User with ID '{user_id}' not found")

            user.retire()
            uow.users.save(user)

            products = uow.products.list_by_owner(user_id)
            for product in products:
                withdraw_product(uow, product)

            uow.carts.delete(user_id)

            for ticket in uow.tickets.list_by_user(user_id):
                ticket.retire()
                uow.tickets.save(ticket)

            self._clear_workshops(uow, user_id)
            self._clear_requests(uow, user_id)
            uow.commit()

        logger.info("User %s retired along with %d product(s)", user_id, len(products))

    @staticmethod
    def _clear_workshops(uow: UnitOfWork, user_id: str) -> None:
        for workshop in uow.workshops.list_all():
            if workshop.user_id == user_id and workshop.is_pending:
                workshop.retire()
            elif workshop.artisan_id == user_id:
                workshop.release()
            else:
                continue
            uow.workshops.save(workshop)

    @staticmethod
    def _clear_requests(uow: UnitOfWork, user_id: str) -> None:
        for request in uow.requests.list_all():
            if request.user_id == user_id:
                request.retire()
            elif request.artisan_id == user_id:
                request.release()
            else:
                continue
            uow.requests.save(request)

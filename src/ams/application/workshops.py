"""Application services: workshop use cases.

Customers book workshops; artisans browse the pending ones, accept
them, and may later withdraw a workshop they host.
"""

from __future__ import annotations

import logging

from ams.application.dto import WorkshopDTO, workshop_to_dto
from ams.domain.exceptions import EntityNotFoundError, ValidationError
from ams.domain.model.user import Role
from ams.domain.model.workshop import Workshop, WorkshopStatus
from ams.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


def _require_artisan(uow: UnitOfWork, user_id: str) -> None:
    user = uow.users.get_by_id(user_id)
    if user is None:
        raise EntityNotFoundError(f"User with ID '{user_id}' not found")
    if user.role != Role.ARTISAN:
        raise ValidationError(f"User '{user.username}' is not an artisan")


def _require_workshop(uow: UnitOfWork, workshop_id: str) -> Workshop:
    workshop = uow.workshops.get_by_id(workshop_id)
    if workshop is None:
        raise EntityNotFoundError(f"Workshop #{workshop_id} not found")
    return workshop


class BookWorkshopHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self, user_id: str, title: str, description: str, date: str, time: str
    ) -> WorkshopDTO:
        with self._uow as uow:
            if uow.users.get_by_id(user_id) is None:
                raise EntityNotFoundError(f"User with ID '{user_id}' not found")
            workshop = Workshop.book(
                uow.workshops.next_id(), user_id, title, description, date, time
            )
            uow.workshops.save(workshop)
            uow.commit()

        logger.info("Workshop %s booked by user %s", workshop.id, user_id)
        return workshop_to_dto(workshop)


class GetWorkshopHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, workshop_id: str) -> WorkshopDTO:
        with self._uow as uow:
            return workshop_to_dto(_require_workshop(uow, workshop_id))


class ListWorkshopsHandler:
    """Workshops filtered by status, host artisan or booking user.

    ``status=pending`` is what artisans browse for work.
    """

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        status: str | None = None,
        artisan_id: str | None = None,
        user_id: str | None = None,
    ) -> list[WorkshopDTO]:
        wanted = None
        if status is not None:
            try:
                wanted = WorkshopStatus(status.lower())
            except ValueError as exc:
                raise ValidationError(f"{status} is not a valid workshop status") from exc

        with self._uow as uow:
            return [
                workshop_to_dto(w)
                for w in uow.workshops.list_all()
                if (wanted is None or w.status == wanted)
                and (artisan_id is None or w.artisan_id == artisan_id)
                and (user_id is None or w.user_id == user_id)
            ]


class AcceptWorkshopHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, workshop_id: str, artisan_id: str) -> WorkshopDTO:
        with self._uow as uow:
            _require_artisan(uow, artisan_id)
            workshop = _require_workshop(uow, workshop_id)
            workshop.accept(artisan_id)
            uow.workshops.save(workshop)
            uow.commit()

        logger.info("Workshop %s accepted by artisan %s", workshop_id, artisan_id)
        return workshop_to_dto(workshop)


class RemoveWorkshopHandler:
    """Only the artisan hosting a workshop may remove it."""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, workshop_id: str, artisan_id: str) -> str:
        with self._uow as uow:
            workshop = uow.workshops.get_by_id(workshop_id)
            if workshop is None or workshop.artisan_id != artisan_id:
                raise EntityNotFoundError("Workshop not found or not authorized")
            workshop.retire()
            uow.workshops.save(workshop)
            uow.commit()

        logger.info("Workshop %s removed by artisan %s", workshop_id, artisan_id)
        return "Workshop removed successfully!"

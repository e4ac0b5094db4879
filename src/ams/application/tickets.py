"""Application services: support ticket use cases."""

from __future__ import annotations

import logging

from ams.application.dto import TicketDTO, ticket_to_dto
from ams.domain.exceptions import EntityNotFoundError, ValidationError
from ams.domain.model.ticket import Ticket, TicketStatus
from ams.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


def _require_ticket(uow: UnitOfWork, ticket_id: str) -> Ticket:
    ticket = uow.tickets.get_by_id(ticket_id)
    if ticket is None:
        raise EntityNotFoundError("Ticket not found")
    return ticket


class RaiseTicketHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self, user_id: str, subject: str, category: str, description: str
    ) -> TicketDTO:
        with self._uow as uow:
            if uow.users.get_by_id(user_id) is None:
                raise EntityNotFoundError(f"User with ID '{user_id}' not found")
            ticket = Ticket.raise_ticket(
                uow.tickets.next_id(), user_id, subject, category, description
            )
            uow.tickets.save(ticket)
            uow.commit()

        logger.info("Ticket %s raised by user %s", ticket.id, user_id)
        return ticket_to_dto(ticket)


class ListTicketsHandler:
    """Every active ticket, or only the ones a single user raised."""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, user_id: str | None = None) -> list[TicketDTO]:
        with self._uow as uow:
            if user_id is None:
                tickets = uow.tickets.list_all()
            else:
                tickets = uow.tickets.list_by_user(user_id)
            return [ticket_to_dto(t) for t in tickets]


class UpdateTicketStatusHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, ticket_id: str, status: str) -> TicketDTO:
        try:
            new_status = TicketStatus(status.lower())
        except ValueError as exc:
            raise ValidationError(f"{status} is not a valid ticket status") from exc

        with self._uow as uow:
            ticket = _require_ticket(uow, ticket_id)
            ticket.change_status(new_status)
            uow.tickets.save(ticket)
            uow.commit()

        logger.info("Ticket %s moved to %s", ticket_id, new_status.value)
        return ticket_to_dto(ticket)


class RemoveTicketHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, ticket_id: str) -> str:
        with self._uow as uow:
            ticket = _require_ticket(uow, ticket_id)
            ticket.retire()
            uow.tickets.save(ticket)
            uow.commit()

        logger.info("Ticket %s removed", ticket_id)
        return "Ticket removed successfully!"

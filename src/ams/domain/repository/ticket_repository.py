"""Abstract repository for Ticket aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ams.domain.model.ticket import Ticket


class TicketRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate the next unique ticket ID."""

    @abstractmethod
    def get_by_id(self, ticket_id: str) -> Ticket | None:
        """Return an active ticket by ID, or None."""

    @abstractmethod
    def list_all(self) -> list[Ticket]:
        """Return every active ticket, newest first."""

    @abstractmethod
    def list_by_user(self, user_id: str) -> list[Ticket]:
        """Return the active tickets a user raised."""

    @abstractmethod
    def save(self, ticket: Ticket) -> None:
        """Persist a new or updated ticket."""

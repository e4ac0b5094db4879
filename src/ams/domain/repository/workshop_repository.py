"""Abstract repository for Workshop aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ams.domain.model.workshop import Workshop


class WorkshopRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate the next unique workshop ID."""

    @abstractmethod
    def get_by_id(self, workshop_id: str) -> Workshop | None:
        """Return an active workshop by ID, or None."""

    @abstractmethod
    def list_all(self) -> list[Workshop]:
        """Return every active workshop."""

    @abstractmethod
    def save(self, workshop: Workshop) -> None:
        """Persist a new or updated workshop."""

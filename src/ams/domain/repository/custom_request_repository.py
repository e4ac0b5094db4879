"""Abstract repository for CustomRequest aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ams.domain.model.custom_request import CustomRequest


class CustomRequestRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate the next unique request ID."""

    @abstractmethod
    def get_by_id(self, request_id: str) -> CustomRequest | None:
        """Return an active request by ID, or None."""

    @abstractmethod
    def list_all(self) -> list[CustomRequest]:
        """Return every active request."""

    @abstractmethod
    def save(self, request: CustomRequest) -> None:
        """Persist a new or updated request."""

"""Abstract repository for User aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ams.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate the next unique user ID."""

    @abstractmethod
    def get_by_id(self, user_id: str) -> User | None:
        """Return an active user by ID, or None."""

    @abstractmethod
    def get_by_username(self, username: str) -> User | None:
        """Return an active user by exact username, or None."""

    @abstractmethod
    def get_by_email(self, email: str) -> User | None:
        """Return an active user by email (case-insensitive), or None."""

    @abstractmethod
    def save(self, user: User) -> None:
        """Persist a new or updated user."""

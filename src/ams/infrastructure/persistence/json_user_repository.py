"""JSON-file-backed implementation of UserRepository."""

from __future__ import annotations

from datetime import datetime

from ams.domain.model.lifecycle import RecordState
from ams.domain.model.user import Role, User
from ams.domain.repository.user_repository import UserRepository
from ams.infrastructure.persistence.json_collection import JsonCollection


class JsonUserRepository(UserRepository):

    def __init__(self, collection: JsonCollection) -> None:
        self._collection = collection

    # --- UserRepository interface ---------------------------------------------

    def next_id(self) -> str:
        ids = [int(raw["id"]) for raw in self._collection.records]
        return str(max(ids) + 1) if ids else "1"

    def get_by_id(self, user_id: str) -> User | None:
        return self._first(lambda raw: raw["id"] == user_id)

    def get_by_username(self, username: str) -> User | None:
        return self._first(lambda raw: raw["username"] == username)

    def get_by_email(self, email: str) -> User | None:
        return self._first(lambda raw: raw["email"] == email.lower())

    def save(self, user: User) -> None:
        self._collection.upsert("id", self._to_raw(user))

    # --- Serialization --------------------------------------------------------

    def _first(self, predicate) -> User | None:
        for raw in self._collection.records:
            if raw["state"] == RecordState.ACTIVE.value and predicate(raw):
                return self._to_domain(raw)
        return None

    @staticmethod
    def _to_raw(user: User) -> dict:
        return {
            "id": user.id,
            "username": user.username,
            "name": user.name,
            "email": user.email,
            "role": user.role.value,
            "state": user.state.value,
            "created_at": user.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> User:
        return User(
            id=raw["id"],
            username=raw["username"],
            name=raw["name"],
            email=raw["email"],
            role=Role(raw["role"]),
            state=RecordState(raw["state"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )

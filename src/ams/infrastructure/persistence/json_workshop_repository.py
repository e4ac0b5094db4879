"""JSON-file-backed implementation of WorkshopRepository."""

from __future__ import annotations

from datetime import datetime

from ams.domain.model.lifecycle import RecordState
from ams.domain.model.workshop import Workshop, WorkshopStatus
from ams.domain.repository.workshop_repository import WorkshopRepository
from ams.infrastructure.persistence.json_collection import JsonCollection


class JsonWorkshopRepository(WorkshopRepository):

    def __init__(self, collection: JsonCollection) -> None:
        self._collection = collection

    def next_id(self) -> str:
        ids = [int(raw["id"]) for raw in self._collection.records]
        return str(max(ids) + 1) if ids else "1"

    def get_by_id(self, workshop_id: str) -> Workshop | None:
        raw = self._collection.find("id", workshop_id)
        if raw is None or raw["state"] != RecordState.ACTIVE.value:
            return None
        return self._to_domain(raw)

    def list_all(self) -> list[Workshop]:
        return [
            self._to_domain(raw) for raw in self._collection.records
            if raw["state"] == RecordState.ACTIVE.value
        ]

    def save(self, workshop: Workshop) -> None:
        self._collection.upsert("id", self._to_raw(workshop))

    @staticmethod
    def _to_raw(workshop: Workshop) -> dict:
        return {
            "id": workshop.id,
            "user_id": workshop.user_id,
            "title": workshop.title,
            "description": workshop.description,
            "date": workshop.date,
            "time": workshop.time,
            "status": workshop.status.value,
            "artisan_id": workshop.artisan_id,
            "accepted_at": (
                workshop.accepted_at.isoformat() if workshop.accepted_at else None
            ),
            "state": workshop.state.value,
            "created_at": workshop.created_at.isoformat(),
            "updated_at": workshop.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Workshop:
        accepted_at = raw.get("accepted_at")
        return Workshop(
            id=raw["id"],
            user_id=raw["user_id"],
            title=raw["title"],
            description=raw["description"],
            date=raw["date"],
            time=raw["time"],
            status=WorkshopStatus(raw["status"]),
            artisan_id=raw.get("artisan_id"),
            accepted_at=datetime.fromisoformat(accepted_at) if accepted_at else None,
            state=RecordState(raw["state"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )

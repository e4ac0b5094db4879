"""JSON-file-backed implementation of CustomRequestRepository."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from ams.domain.model.custom_request import CustomRequest
from ams.domain.model.lifecycle import RecordState
from ams.domain.model.value_objects import Money
from ams.domain.repository.custom_request_repository import CustomRequestRepository
from ams.infrastructure.persistence.json_collection import JsonCollection


class JsonCustomRequestRepository(CustomRequestRepository):

    def __init__(self, collection: JsonCollection) -> None:
        self._collection = collection

    def next_id(self) -> str:
        ids = [int(raw["id"]) for raw in self._collection.records]
        return str(max(ids) + 1) if ids else "1"

    def get_by_id(self, request_id: str) -> CustomRequest | None:
        raw = self._collection.find("id", request_id)
        if raw is None or raw["state"] != RecordState.ACTIVE.value:
            return None
        return self._to_domain(raw)

    def list_all(self) -> list[CustomRequest]:
        return [
            self._to_domain(raw) for raw in self._collection.records
            if raw["state"] == RecordState.ACTIVE.value
        ]

    def save(self, request: CustomRequest) -> None:
        self._collection.upsert("id", self._to_raw(request))

    @staticmethod
    def _to_raw(request: CustomRequest) -> dict:
        return {
            "id": request.id,
            "user_id": request.user_id,
            "title": request.title,
            "type": request.kind,
            "image": request.image,
            "description": request.description,
            "budget": str(request.budget.amount),
            "currency": request.budget.currency,
            "required_by": request.required_by.isoformat(),
            "artisan_id": request.artisan_id,
            "state": request.state.value,
            "created_at": request.created_at.isoformat(),
            "updated_at": request.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> CustomRequest:
        return CustomRequest(
            id=raw["id"],
            user_id=raw["user_id"],
            title=raw["title"],
            kind=raw["type"],
            image=raw["image"],
            description=raw["description"],
            budget=Money(Decimal(raw["budget"]), raw.get("currency", "INR")),
            required_by=date.fromisoformat(raw["required_by"]),
            artisan_id=raw.get("artisan_id"),
            state=RecordState(raw["state"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )

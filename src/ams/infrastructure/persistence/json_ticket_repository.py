"""JSON-file-backed implementation of TicketRepository."""

from __future__ import annotations

from datetime import datetime

from ams.domain.model.lifecycle import RecordState
from ams.domain.model.ticket import Ticket, TicketStatus
from ams.domain.repository.ticket_repository import TicketRepository
from ams.infrastructure.persistence.json_collection import JsonCollection


class JsonTicketRepository(TicketRepository):

    def __init__(self, collection: JsonCollection) -> None:
        self._collection = collection

    def next_id(self) -> str:
        ids = [int(raw["id"]) for raw in self._collection.records]
        return str(max(ids) + 1) if ids else "1"

    def get_by_id(self, ticket_id: str) -> Ticket | None:
        raw = self._collection.find("id", ticket_id)
        if raw is None or raw["state"] != RecordState.ACTIVE.value:
            return None
        return self._to_domain(raw)

    def list_all(self) -> list[Ticket]:
        tickets = [
            self._to_domain(raw) for raw in self._collection.records
            if raw["state"] == RecordState.ACTIVE.value
        ]
        return sorted(tickets, key=lambda t: t.created_at, reverse=True)

    def list_by_user(self, user_id: str) -> list[Ticket]:
        return [t for t in self.list_all() if t.user_id == user_id]

    def save(self, ticket: Ticket) -> None:
        self._collection.upsert("id", self._to_raw(ticket))

    @staticmethod
    def _to_raw(ticket: Ticket) -> dict:
        return {
            "id": ticket.id,
            "user_id": ticket.user_id,
            "subject": ticket.subject,
            "category": ticket.category,
            "description": ticket.description,
            "status": ticket.status.value,
            "state": ticket.state.value,
            "created_at": ticket.created_at.isoformat(),
            "updated_at": ticket.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Ticket:
        return Ticket(
            id=raw["id"],
            user_id=raw["user_id"],
            subject=raw["subject"],
            category=raw["category"],
            description=raw["description"],
            status=TicketStatus(raw["status"]),
            state=RecordState(raw["state"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )

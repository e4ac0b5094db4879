"""Support ticket aggregate.

Any user can raise a ticket; managers and admins move it through
open -> in-progress -> closed and may remove it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from ams.domain.exceptions import ValidationError
from ams.domain.model.lifecycle import RecordState


class TicketStatus(Enum):
    OPEN = "open"
    IN_PROGRESS = "in-progress"
    CLOSED = "closed"


@dataclass
class Ticket:
    id: str
    user_id: str
    subject: str
    category: str
    description: str
    status: TicketStatus = TicketStatus.OPEN
    state: RecordState = RecordState.ACTIVE
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def raise_ticket(
        ticket_id: str, user_id: str, subject: str, category: str, description: str
    ) -> Ticket:
        for label, value in (
            ("Subject", subject), ("Category", category), ("Description", description)
        ):
            if not value or not value.strip():
                raise ValidationError(f"{label} is required")
        return Ticket(
            id=ticket_id,
            user_id=user_id,
            subject=subject.strip(),
            category=category.strip().lower(),
            description=description.strip(),
        )

    @property
    def is_active(self) -> bool:
        return self.state == RecordState.ACTIVE

    def change_status(self, status: TicketStatus) -> None:
        self._assert_active()
        self.status = status
        self._touch()

    def retire(self) -> None:
        self._assert_active()
        self.state = RecordState.RETIRED
        self._touch()

    def _assert_active(self) -> None:
        if not self.is_active:
            raise ValidationError(f"Ticket #{self.id} has been removed")

    def _touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)

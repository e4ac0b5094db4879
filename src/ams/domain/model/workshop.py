"""Workshop aggregate.

A customer books a workshop request; an artisan accepts it and becomes
its host.  If the host leaves the marketplace the workshop goes back to
pending so another artisan can pick it up.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from ams.domain.exceptions import ValidationError
from ams.domain.model.lifecycle import RecordState


class WorkshopStatus(Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"


@dataclass
class Workshop:
    id: str
    user_id: str
    title: str
    description: str
    date: str
    time: str
    status: WorkshopStatus = WorkshopStatus.PENDING
    artisan_id: str | None = None
    accepted_at: datetime | None = None
    state: RecordState = RecordState.ACTIVE
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def book(
        workshop_id: str, user_id: str, title: str, description: str, date: str, time: str
    ) -> Workshop:
        if not title or not title.strip():
            raise ValidationError("Workshop title is required")
        try:
            datetime.strptime(date, "%Y-%m-%d")
            datetime.strptime(time, "%H:%M")
        except ValueError as exc:
            raise ValidationError(
                f"Invalid workshop date/time {date!r} {time!r}, expected YYYY-MM-DD HH:MM"
            ) from exc
        return Workshop(
            id=workshop_id,
            user_id=user_id,
            title=title.strip(),
            description=description.strip(),
            date=date,
            time=time,
        )

    @property
    def is_active(self) -> bool:
        return self.state == RecordState.ACTIVE

    @property
    def is_pending(self) -> bool:
        return self.status == WorkshopStatus.PENDING

    def accept(self, artisan_id: str) -> None:
        self._assert_active()
        if not self.is_pending:
            raise ValidationError(f"Workshop #{self.id} is already accepted")
        self.status = WorkshopStatus.ACCEPTED
        self.artisan_id = artisan_id
        self.accepted_at = datetime.now(timezone.utc)
        self._touch()

    def release(self) -> None:
        """Drop the host and reopen the workshop for other artisans."""
        self.status = WorkshopStatus.PENDING
        self.artisan_id = None
        self.accepted_at = None
        self._touch()

    def retire(self) -> None:
        self._assert_active()
        self.state = RecordState.RETIRED
        self._touch()

    def _assert_active(self) -> None:
        if not self.is_active:
            raise ValidationError(f"Workshop #{self.id} has been removed")

    def _touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)

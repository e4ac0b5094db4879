"""Custom order request aggregate.

A customer describes a piece they want made, with a budget and a
deadline; an artisan takes the request on.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone

from ams.domain.exceptions import ValidationError
from ams.domain.model.lifecycle import RecordState
from ams.domain.model.value_objects import Money


@dataclass
class CustomRequest:
    id: str
    user_id: str
    title: str
    kind: str
    image: str
    description: str
    budget: Money
    required_by: date
    artisan_id: str | None = None
    state: RecordState = RecordState.ACTIVE
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def submit(
        request_id: str,
        user_id: str,
        title: str,
        kind: str,
        image: str,
        description: str,
        budget: Money,
        required_by: date,
    ) -> CustomRequest:
        if not title or not title.strip():
            raise ValidationError("Request title is required")
        if not kind or not kind.strip():
            raise ValidationError("Request type is required")
        if budget.amount <= 0:
            raise ValidationError("Budget must be greater than zero")
        return CustomRequest(
            id=request_id,
            user_id=user_id,
            title=title.strip(),
            kind=kind.strip().lower(),
            image=image,
            description=description.strip(),
            budget=budget.rounded(),
            required_by=required_by,
        )

    @property
    def is_active(self) -> bool:
        return self.state == RecordState.ACTIVE

    @property
    def is_accepted(self) -> bool:
        return self.artisan_id is not None

    def approve(self, artisan_id: str) -> None:
        self._assert_active()
        if self.is_accepted:
            raise ValidationError(f"Request #{self.id} is already taken")
        self.artisan_id = artisan_id
        self._touch()

    def release(self) -> None:
        self.artisan_id = None
        self._touch()

    def retire(self) -> None:
        self._assert_active()
        self.state = RecordState.RETIRED
        self._touch()

    def _assert_active(self) -> None:
        if not self.is_active:
            raise ValidationError(f"Request #{self.id} has been removed")

    def _touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)

"""User aggregate.

Only the parts of a user the marketplace rules depend on live here:
identity, role and lifecycle.  Credentials and verification are handled
outside this system.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from ams.domain.exceptions import ValidationError
from ams.domain.model.lifecycle import RecordState


class Role(Enum):
    ADMIN = "admin"
    MANAGER = "manager"
    ARTISAN = "artisan"
    CUSTOMER = "customer"
    DELIVERY = "delivery"


# Roles allowed to list products in the catalog
UPLOADER_ROLES = (Role.ARTISAN, Role.MANAGER)


@dataclass
class User:
    id: str
    username: str
    name: str
    email: str
    role: Role
    state: RecordState = RecordState.ACTIVE
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(user_id: str, username: str, name: str, email: str, role: str) -> User:
        if not username or not username.strip():
            raise ValidationError("Username is required")
        if not name or not name.strip():
            raise ValidationError("Name is required")
        if not email or "@" not in email:
            raise ValidationError(f"Invalid email address: {email!r}")
        try:
            parsed_role = Role(role.lower())
        except ValueError as exc:
            raise ValidationError(f"{role} is not a valid role") from exc
        return User(
            id=user_id,
            username=username.strip(),
            name=name.strip(),
            email=email.strip().lower(),
            role=parsed_role,
        )

    @property
    def is_active(self) -> bool:
        return self.state == RecordState.ACTIVE

    @property
    def can_upload_products(self) -> bool:
        return self.role in UPLOADER_ROLES

    def retire(self) -> None:
        if not self.is_active:
            raise ValidationError(f"User '{self.username}' is already retired")
        self.state = RecordState.RETIRED

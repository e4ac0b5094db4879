"""Application service: Register User use case."""

from __future__ import annotations

from ams.application.dto import UserDTO, user_to_dto
from ams.domain.exceptions import ValidationError
from ams.domain.model.user import User
from ams.domain.repository.unit_of_work import UnitOfWork


class RegisterUserHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, username: str, name: str, email: str, role: str) -> UserDTO:
        with self._uow as uow:
            if uow.users.get_by_username(username.strip()) is not None:
                raise ValidationError(f"Username '{username}' is already taken")
            if uow.users.get_by_email(email.strip()) is not None:
                raise ValidationError(f"Email '{email}' is already registered")

            user = User.create(
                user_id=uow.users.next_id(),
                username=username,
                name=name,
                email=email,
                role=role,
            )
            uow.users.save(user)
            uow.commit()

        return user_to_dto(user)

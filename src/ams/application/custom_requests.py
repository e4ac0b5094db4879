"""Application services: custom order request use cases."""

from __future__ import annotations

import logging
from datetime import date

from ams.application.dto import CustomRequestDTO, request_to_dto
from ams.domain.exceptions import EntityNotFoundError, ValidationError
from ams.domain.model.custom_request import CustomRequest
from ams.domain.model.user import Role
from ams.domain.model.value_objects import Money
from ams.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


def _require_request(uow: UnitOfWork, request_id: str) -> CustomRequest:
    request = uow.requests.get_by_id(request_id)
    if request is None:
        raise EntityNotFoundError(f"Request #{request_id} not found")
    return request


class SubmitRequestHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        user_id: str,
        title: str,
        kind: str,
        description: str,
        budget: str,
        required_by: str,
        image: str = "",
    ) -> CustomRequestDTO:
        try:
            deadline = date.fromisoformat(required_by)
        except ValueError as exc:
            raise ValidationError(
                f"Invalid date {required_by!r}, expected YYYY-MM-DD"
            ) from exc

        with self._uow as uow:
            if uow.users.get_by_id(user_id) is None:
                raise EntityNotFoundError(f"User with ID '{user_id}' not found")
            request = CustomRequest.submit(
                uow.requests.next_id(),
                user_id,
                title,
                kind,
                image,
                description,
                Money.of(budget),
                deadline,
            )
            uow.requests.save(request)
            uow.commit()

        logger.info("Custom request %s submitted by user %s", request.id, user_id)
        return request_to_dto(request)


class ListRequestsHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self, accepted: bool | None = None, artisan_id: str | None = None
    ) -> list[CustomRequestDTO]:
        with self._uow as uow:
            return [
                request_to_dto(r)
                for r in uow.requests.list_all()
                if (accepted is None or r.is_accepted == accepted)
                and (artisan_id is None or r.artisan_id == artisan_id)
            ]


class ApproveRequestHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, request_id: str, artisan_id: str) -> CustomRequestDTO:
        with self._uow as uow:
            artisan = uow.users.get_by_id(artisan_id)
            if artisan is None:
                raise EntityNotFoundError(f"User with ID '{artisan_id}' not found")
            if artisan.role != Role.ARTISAN:
                raise ValidationError(f"User '{artisan.username}' is not an artisan")
            request = _require_request(uow, request_id)
            request.approve(artisan_id)
            uow.requests.save(request)
            uow.commit()

        logger.info("Custom request %s taken by artisan %s", request_id, artisan_id)
        return request_to_dto(request)


class RemoveRequestHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, request_id: str) -> str:
        with self._uow as uow:
            request = _require_request(uow, request_id)
            request.retire()
            uow.requests.save(request)
            uow.commit()

        logger.info("Custom request %s removed", request_id)
        return "Request removed successfully!"

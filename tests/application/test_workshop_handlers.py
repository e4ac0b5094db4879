"""Tests for workshop and custom request use cases."""

import pytest

from ams.application.custom_requests import (
    ApproveRequestHandler,
    ListRequestsHandler,
    RemoveRequestHandler,
    SubmitRequestHandler,
)
from ams.application.workshops import (
    AcceptWorkshopHandler,
    BookWorkshopHandler,
    GetWorkshopHandler,
    ListWorkshopsHandler,
    RemoveWorkshopHandler,
)
from ams.domain.exceptions import EntityNotFoundError, ValidationError
from ams.domain.model.lifecycle import RecordState
from tests.factories import make_request, make_user, make_workshop
from tests.fakes import FakeUnitOfWork


def _users():
    return [
        make_user("10", "meera", role="artisan"),
        make_user("11", "kabir", role="artisan"),
        make_user("20", "ravi", role="customer"),
    ]


class TestWorkshops:

    def _setup(self) -> FakeUnitOfWork:
        return FakeUnitOfWork(
            users=_users(),
            workshops=[make_workshop("1", "20"), make_workshop("2", "20", artisan_id="10")],
        )

    def test_book(self):
        uow = self._setup()
        dto = BookWorkshopHandler(uow).handle("20", "Pottery", "Wheel basics", "2026-12-05", "15:00")
        assert dto.id == "3"
        assert dto.status == "pending"

    def test_book_unknown_user(self):
        with pytest.raises(EntityNotFoundError):
            BookWorkshopHandler(self._setup()).handle("99", "Pottery", "", "2026-12-05", "15:00")

    def test_get(self):
        assert GetWorkshopHandler(self._setup()).handle("2").artisan_id == "10"

    def test_list_pending(self):
        assert [w.id for w in ListWorkshopsHandler(self._setup()).handle("pending")] == ["1"]

    def test_list_hosted_by_artisan(self):
        dtos = ListWorkshopsHandler(self._setup()).handle(artisan_id="10")
        assert [w.id for w in dtos] == ["2"]

    def test_list_bad_status(self):
        with pytest.raises(ValidationError):
            ListWorkshopsHandler(self._setup()).handle("done")

    def test_accept(self):
        uow = self._setup()
        dto = AcceptWorkshopHandler(uow).handle("1", "11")
        assert dto.status == "accepted"
        assert dto.artisan_id == "11"

    def test_only_artisans_accept(self):
        uow = self._setup()
        with pytest.raises(ValidationError, match="not an artisan"):
            AcceptWorkshopHandler(uow).handle("1", "20")
        assert uow.workshops.get_by_id("1").is_pending

    def test_accepted_workshop_cannot_be_taken_over(self):
        with pytest.raises(ValidationError, match="already accepted"):
            AcceptWorkshopHandler(self._setup()).handle("2", "11")

    def test_host_removes(self):
        uow = self._setup()
        assert RemoveWorkshopHandler(uow).handle("2", "10") == "Workshop removed successfully!"
        assert uow.workshops.raw("2").state == RecordState.RETIRED

    def test_other_artisan_cannot_remove(self):
        uow = self._setup()
        with pytest.raises(EntityNotFoundError, match="not authorized"):
            RemoveWorkshopHandler(uow).handle("2", "11")
        assert uow.workshops.get_by_id("2") is not None


class TestCustomRequests:

    def _setup(self) -> FakeUnitOfWork:
        return FakeUnitOfWork(
            users=_users(),
            requests=[make_request("1", "20"), make_request("2", "20", artisan_id="10")],
        )

    def test_submit(self):
        uow = self._setup()
        dto = SubmitRequestHandler(uow).handle(
            "20", "Jhula", "Woodwork", "Teak swing", "12000", "2027-01-15"
        )
        assert dto.id == "3"
        assert dto.budget == "₹12000.00"
        assert dto.is_accepted is False

    def test_submit_bad_deadline(self):
        with pytest.raises(ValidationError, match="expected YYYY-MM-DD"):
            SubmitRequestHandler(self._setup()).handle(
                "20", "Jhula", "woodwork", "", "12000", "15/01/2027"
            )

    def test_submit_bad_budget(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            SubmitRequestHandler(self._setup()).handle(
                "20", "Jhula", "woodwork", "", "lots", "2027-01-15"
            )

    def test_list_filters(self):
        handler = ListRequestsHandler(self._setup())
        assert [r.id for r in handler.handle(accepted=False)] == ["1"]
        assert [r.id for r in handler.handle(artisan_id="10")] == ["2"]
        assert len(handler.handle()) == 2

    def test_approve(self):
        dto = ApproveRequestHandler(self._setup()).handle("1", "11")
        assert dto.artisan_id == "11"
        assert dto.is_accepted is True

    def test_customer_cannot_approve(self):
        with pytest.raises(ValidationError, match="not an artisan"):
            ApproveRequestHandler(self._setup()).handle("1", "20")

    def test_remove(self):
        uow = self._setup()
        assert RemoveRequestHandler(uow).handle("1") == "Request removed successfully!"
        assert uow.requests.get_by_id("1") is None

    def test_remove_unknown(self):
        with pytest.raises(EntityNotFoundError):
            RemoveRequestHandler(self._setup()).handle("99")

"""Unit tests for the Workshop and CustomRequest aggregates."""

from datetime import date

import pytest

from ams.domain.exceptions import ValidationError
from ams.domain.model.custom_request import CustomRequest
from ams.domain.model.value_objects import Money
from ams.domain.model.workshop import Workshop, WorkshopStatus
from tests.factories import make_request, make_workshop


class TestWorkshop:

    def test_booked_workshop_is_pending(self):
        workshop = make_workshop()
        assert workshop.is_pending
        assert workshop.artisan_id is None

    @pytest.mark.parametrize("day, time", [("14-11-2026", "10:30"), ("2026-11-14", "25:00")])
    def test_bad_date_or_time(self, day, time):
        with pytest.raises(ValidationError, match="Invalid workshop date/time"):
            Workshop.book("1", "20", "Weaving", "", day, time)

    def test_accept(self):
        workshop = make_workshop()
        workshop.accept("10")
        assert workshop.status == WorkshopStatus.ACCEPTED
        assert workshop.artisan_id == "10"
        assert workshop.accepted_at is not None

    def test_accept_twice_rejected(self):
        workshop = make_workshop(artisan_id="10")
        with pytest.raises(ValidationError, match="already accepted"):
            workshop.accept("11")

    def test_release_reopens(self):
        workshop = make_workshop(artisan_id="10")
        workshop.release()
        assert workshop.is_pending
        assert workshop.artisan_id is None
        assert workshop.accepted_at is None


class TestCustomRequest:

    def test_submit_rounds_budget(self):
        request = CustomRequest.submit(
            "1", "20", "Lamp", "Brass", "", "", Money.of("999.999"), date(2026, 12, 1)
        )
        assert request.budget == Money.of("1000.00")
        assert request.kind == "brass"
        assert not request.is_accepted

    def test_zero_budget_rejected(self):
        with pytest.raises(ValidationError, match="Budget"):
            CustomRequest.submit("1", "20", "Lamp", "brass", "", "", Money.zero(), date(2026, 12, 1))

    def test_approve_once(self):
        request = make_request(artisan_id="10")
        assert request.is_accepted
        with pytest.raises(ValidationError, match="already taken"):
            request.approve("11")

    def test_release(self):
        request = make_request(artisan_id="10")
        request.release()
        assert request.artisan_id is None

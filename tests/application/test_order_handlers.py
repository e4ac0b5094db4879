"""Tests for order queries, status changes, payments and the sales report."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from ams.application.change_order_status import ChangeOrderStatusHandler
from ams.application.list_orders import ListAllOrdersHandler, ListUserOrdersHandler
from ams.application.record_payment import RecordPaymentHandler
from ams.application.retire_order import RetireOrderHandler
from ams.application.sales_report import SalesReportHandler
from ams.application.show_order import ShowOrderHandler
from ams.domain.exceptions import EntityNotFoundError, ValidationError
from ams.domain.model.order import OrderStatus, PaymentStatus
from tests.factories import make_order, make_product
from tests.fakes import FakeUnitOfWork


def _at(year: int, month: int, day: int = 1) -> datetime:
    return datetime(year, month, day, 12, 0, tzinfo=timezone.utc)


def _setup(*orders) -> FakeUnitOfWork:
    return FakeUnitOfWork(orders=list(orders) or [make_order()])


class TestShowOrder:

    def test_found(self):
        uow = _setup(make_order("u1", "260.00", None, make_product(name="Clay Vase")))
        dto = ShowOrderHandler(uow).handle(1)

        assert dto.id == 1
        assert dto.total == "₹260.00"
        assert dto.status == "pending"
        assert dto.payment_status == "unpaid"
        assert [item.product_name for item in dto.items] == ["Clay Vase"]
        assert dto.items[0].unit_price == "₹100.00"

    def test_missing(self):
        with pytest.raises(EntityNotFoundError, match="#42"):
            ShowOrderHandler(_setup()).handle(42)


class TestListOrders:

    def test_user_orders_newest_first(self):
        uow = _setup(
            make_order("u1", "100.00", _at(2024, 1)),
            make_order("u2", "150.00", _at(2024, 2)),
            make_order("u1", "200.00", _at(2024, 3)),
        )
        dtos = ListUserOrdersHandler(uow).handle("u1")
        assert [d.total for d in dtos] == ["₹200.00", "₹100.00"]

    def test_all_orders_skip_retired(self):
        uow = _setup(make_order("u1"), make_order("u2"))
        uow.orders.get_by_id(1).retire()

        dtos = ListAllOrdersHandler(uow).handle()
        assert [d.id for d in dtos] == [2]


class TestChangeOrderStatus:

    def test_pending_to_shipped(self):
        uow = _setup()
        ChangeOrderStatusHandler(uow).handle(1, "SHIPPED")
        assert uow.orders.get_by_id(1).status == OrderStatus.SHIPPED

    def test_terminal_status_is_final(self):
        uow = _setup()
        handler = ChangeOrderStatusHandler(uow)
        handler.handle(1, "cancelled")

        with pytest.raises(ValidationError, match="Cannot move order"):
            handler.handle(1, "pending")
        assert uow.orders.get_by_id(1).status == OrderStatus.CANCELLED

    def test_unknown_status(self):
        with pytest.raises(ValidationError, match="not a valid order status"):
            ChangeOrderStatusHandler(_setup()).handle(1, "lost")

    def test_missing_order(self):
        with pytest.raises(EntityNotFoundError):
            ChangeOrderStatusHandler(_setup()).handle(9, "shipped")


class TestRetireOrder:

    def test_hidden_but_kept(self):
        uow = _setup()
        RetireOrderHandler(uow).handle(1)

        assert uow.orders.get_by_id(1) is None
        assert uow.orders.count_all() == 1

    def test_retiring_twice(self):
        uow = _setup()
        RetireOrderHandler(uow).handle(1)
        with pytest.raises(EntityNotFoundError):
            RetireOrderHandler(uow).handle(1)


class TestRecordPayment:

    def test_records_paid(self):
        uow = _setup()
        RecordPaymentHandler(uow).handle(1, " pay_123 ", "paid")

        order = uow.orders.get_by_id(1)
        assert order.payment_id == "pay_123"
        assert order.payment_status == PaymentStatus.PAID

    def test_failed_payment_can_be_retried(self):
        uow = _setup()
        handler = RecordPaymentHandler(uow)
        handler.handle(1, "pay_1", "failed")
        handler.handle(1, "pay_2", "paid")
        assert uow.orders.get_by_id(1).payment_id == "pay_2"

    def test_paid_order_cannot_be_paid_again(self):
        uow = _setup()
        handler = RecordPaymentHandler(uow)
        handler.handle(1, "pay_1", "paid")

        with pytest.raises(ValidationError, match="already paid"):
            handler.handle(1, "pay_2", "paid")
        assert uow.orders.get_by_id(1).payment_id == "pay_1"

    def test_unknown_status(self):
        with pytest.raises(ValidationError):
            RecordPaymentHandler(_setup()).handle(1, "pay_1", "refunded")


class TestSalesReport:

    def test_sums_per_month_across_years(self):
        uow = _setup(
            make_order("u1", "100.00", _at(2023, 1, 5)),
            make_order("u2", "50.50", _at(2024, 1, 20)),
            make_order("u1", "260.00", _at(2024, 3, 2)),
        )

        report = SalesReportHandler(uow).handle()

        assert len(report) == 12
        assert report[0].month == "Jan"
        assert report[0].sales == Decimal("150.50")
        assert report[1].sales == Decimal("0")
        assert report[2].month == "Mar"
        assert report[2].sales == Decimal("260.00")

    def test_retired_orders_excluded(self):
        uow = _setup(make_order("u1", "100.00", _at(2024, 5)))
        uow.orders.get_by_id(1).retire()
        assert SalesReportHandler(uow).handle()[4].sales == Decimal("0")

    def test_month_labels_are_fixed(self):
        report = SalesReportHandler(_setup()).handle()
        assert [r.month for r in report] == [
            "Jan", "Feb", "Mar", "Apr", "May", "Jun",
            "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
        ]

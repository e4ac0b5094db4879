"""Tests for the JSON-file persistence: commit, rollback and checkout on disk."""

import json
import os

import pytest

from ams.application.place_order import PlaceOrderHandler
from ams.domain.exceptions import TransactionAborted
from ams.infrastructure.persistence.json_unit_of_work import JsonUnitOfWork
from tests.factories import (
    make_cart,
    make_product,
    make_request,
    make_ticket,
    make_user,
    make_workshop,
)


def _read(data_dir, name):
    return json.loads((data_dir / f"{name}.json").read_text(encoding="utf-8"))


def _seed(data_dir, products=(), carts=(), users=()):
    with JsonUnitOfWork(data_dir) as uow:
        for p in products:
            uow.products.save(p)
        for c in carts:
            uow.carts.save(c)
        for u in users:
            uow.users.save(u)
        uow.commit()


class TestCommitAndRollback:

    def test_commit_persists(self, tmp_path):
        _seed(tmp_path, products=[make_product("1", name="Clay Vase")])

        with JsonUnitOfWork(tmp_path) as uow:
            product = uow.products.get_by_id("1")

        assert product.name == "Clay Vase"
        assert product.new_price.amount == make_product().new_price.amount
        assert _read(tmp_path, "products")[0]["new_price"] == "100.00"

    def test_leaving_without_commit_discards(self, tmp_path):
        with JsonUnitOfWork(tmp_path) as uow:
            uow.products.save(make_product("1"))

        assert _read(tmp_path, "products") == []

    def test_exception_discards_and_releases(self, tmp_path):
        uow = JsonUnitOfWork(tmp_path)
        with pytest.raises(ValueError):
            with uow:
                uow.users.save(make_user("1"))
                raise ValueError("boom")

        with uow:
            assert uow.users.get_by_id("1") is None

    def test_begin_twice_is_an_error(self, tmp_path):
        uow = JsonUnitOfWork(tmp_path)
        with uow:
            with pytest.raises(RuntimeError):
                uow.begin()

    def test_no_temp_files_left(self, tmp_path):
        _seed(tmp_path, products=[make_product("1")], carts=[make_cart("u1", ("1", 1))])
        assert not list(tmp_path.glob("*.tmp"))


class TestRetiredRecords:

    def test_retired_product_hidden_but_stored(self, tmp_path):
        _seed(tmp_path, products=[make_product("1"), make_product("2")])

        with JsonUnitOfWork(tmp_path) as uow:
            product = uow.products.get_by_id("1")
            product.retire()
            uow.products.save(product)
            uow.commit()

        with JsonUnitOfWork(tmp_path) as uow:
            assert uow.products.get_by_id("1") is None
            assert [p.id for p in uow.products.list_all()] == ["2"]
        assert _read(tmp_path, "products")[0]["state"] == "retired"

    def test_retired_user_hidden(self, tmp_path):
        user = make_user("1", "meera")
        user.retire()
        _seed(tmp_path, users=[user])

        with JsonUnitOfWork(tmp_path) as uow:
            assert uow.users.get_by_username("meera") is None


class TestCheckoutOnDisk:

    def _setup(self, tmp_path, quantity):
        _seed(
            tmp_path,
            products=[make_product("1", price="100.00", quantity=10)],
            carts=[make_cart("u1", ("1", quantity))],
        )
        return PlaceOrderHandler(JsonUnitOfWork(tmp_path))

    def test_success_writes_order_stock_and_cart(self, tmp_path):
        result = self._setup(tmp_path, 3).handle("u1")

        assert result.order_id == 1
        orders = _read(tmp_path, "orders")
        assert len(orders) == 1
        assert orders[0]["money"] == "365.00"
        assert orders[0]["status"] == "pending"
        assert orders[0]["products"][0]["quantity"] == 3
        assert orders[0]["products"][0]["product"]["name"] == "Clay Vase"
        assert _read(tmp_path, "products")[0]["quantity"] == 7
        assert _read(tmp_path, "carts") == []

    def test_failure_leaves_files_untouched(self, tmp_path):
        handler = self._setup(tmp_path, 11)
        before = {name: _read(tmp_path, name) for name in ("products", "carts", "orders")}

        with pytest.raises(TransactionAborted, match="Insufficient stock"):
            handler.handle("u1")

        after = {name: _read(tmp_path, name) for name in ("products", "carts", "orders")}
        assert after == before

    def test_order_reads_back(self, tmp_path):
        result = self._setup(tmp_path, 2).handle("u1")

        with JsonUnitOfWork(tmp_path) as uow:
            order = uow.orders.get_by_id(result.order_id)

        assert str(order.money) == "₹260.00"
        assert order.lines[0].product.quantity == 10
        assert order.subtotal.amount == 200


class TestFailedCommit:

    def test_failed_move_restores_earlier_files(self, tmp_path, monkeypatch):
        _seed(
            tmp_path,
            products=[make_product("1", price="100.00", quantity=10)],
            carts=[make_cart("u1", ("1", 3))],
        )
        real_replace = os.replace
        calls = []

        def replace_failing_second(src, dst):
            calls.append(dst)
            if len(calls) == 2:
                raise OSError("disk full")
            return real_replace(src, dst)

        monkeypatch.setattr(os, "replace", replace_failing_second)

        with pytest.raises(TransactionAborted, match="disk full") as info:
            PlaceOrderHandler(JsonUnitOfWork(tmp_path)).handle("u1")
        monkeypatch.undo()

        assert isinstance(info.value.reason, OSError)
        assert len(calls) == 2
        assert _read(tmp_path, "products")[0]["quantity"] == 10
        assert _read(tmp_path, "orders") == []
        assert _read(tmp_path, "carts")[0]["user_id"] == "u1"
        assert list(tmp_path.glob(".*.tmp")) == []

    def test_store_usable_after_failed_commit(self, tmp_path, monkeypatch):
        _seed(tmp_path, products=[make_product("1", quantity=10)])

        def failing_replace(src, dst):
            raise OSError("read-only file system")

        monkeypatch.setattr(os, "replace", failing_replace)
        uow = JsonUnitOfWork(tmp_path)
        with pytest.raises(OSError):
            with uow:
                uow.users.save(make_user("1"))
                uow.commit()
        monkeypatch.undo()

        with uow:
            assert uow.users.get_by_id("1") is None
            assert uow.products.get_by_id("1").quantity == 10


class TestMarketplaceRecordsOnDisk:

    def test_workshop_ticket_and_request_read_back(self, tmp_path):
        with JsonUnitOfWork(tmp_path) as uow:
            uow.tickets.save(make_ticket("1", "20"))
            uow.workshops.save(make_workshop("1", "20", artisan_id="10"))
            uow.requests.save(make_request("1", "20"))
            uow.commit()

        with JsonUnitOfWork(tmp_path) as uow:
            ticket = uow.tickets.list_by_user("20")[0]
            workshop = uow.workshops.get_by_id("1")
            request = uow.requests.get_by_id("1")

        assert ticket.subject == "Late parcel"
        assert workshop.artisan_id == "10"
        assert workshop.accepted_at is not None
        assert request.budget.amount == 4500
        assert request.required_by.isoformat() == "2026-12-01"
        assert _read(tmp_path, "workshops")[0]["status"] == "accepted"
        assert _read(tmp_path, "requests")[0]["type"] == "metalwork"

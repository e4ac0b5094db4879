"""Tests for the cart use cases: add, remove, change quantity, show."""

import pytest

from ams.application.add_to_cart import AddToCartHandler
from ams.application.edit_cart import (
    ChangeCartQuantityHandler,
    RemoveCartLineHandler,
    RemoveOneFromCartHandler,
)
from ams.application.show_cart import ShowCartHandler
from ams.domain.exceptions import EntityNotFoundError, ValidationError
from ams.domain.model.product import ProductStatus
from tests.factories import make_cart, make_product
from tests.fakes import FakeUnitOfWork


def _uow(*carts) -> FakeUnitOfWork:
    return FakeUnitOfWork(
        products=[
            make_product("1", name="Clay Vase", price="100.00", quantity=10),
            make_product("2", name="Brass Lamp", price="33.33", quantity=3),
            make_product("3", name="Loom Rug", quantity=4, status=ProductStatus.PENDING),
        ],
        carts=list(carts),
    )


class TestAddToCart:

    def test_first_add_creates_cart(self):
        uow = _uow()
        message = AddToCartHandler(uow).handle("u1", "1", 2)

        assert message == "Product added to cart!"
        assert uow.carts.get_by_user("u1").quantity_of("1") == 2
        assert uow.commits == 1

    def test_adding_again_updates_line(self):
        uow = _uow(make_cart("u1", ("1", 2)))
        message = AddToCartHandler(uow).handle("u1", "1", 3)

        assert message == "Cart updated!"
        assert uow.carts.get_by_user("u1").quantity_of("1") == 5

    def test_quantity_capped_at_stock(self):
        uow = _uow()
        AddToCartHandler(uow).handle("u1", "2", 5)
        assert uow.carts.get_by_user("u1").quantity_of("2") == 3

    def test_full_line_rejected(self):
        uow = _uow(make_cart("u1", ("2", 3)))
        with pytest.raises(ValidationError, match="Stock limit reached"):
            AddToCartHandler(uow).handle("u1", "2")
        assert uow.carts.get_by_user("u1").quantity_of("2") == 3

    def test_unapproved_product_cannot_be_added(self):
        uow = _uow()
        with pytest.raises(ValidationError):
            AddToCartHandler(uow).handle("u1", "3")
        assert uow.carts.get_by_user("u1") is None

    def test_unknown_product(self):
        with pytest.raises(EntityNotFoundError):
            AddToCartHandler(_uow()).handle("u1", "99")


class TestRemoveOneFromCart:

    def test_decrements_line(self):
        uow = _uow(make_cart("u1", ("1", 2)))
        assert RemoveOneFromCartHandler(uow).handle("u1", "1") == "Cart updated!"
        assert uow.carts.get_by_user("u1").quantity_of("1") == 1

    def test_drops_line_at_one_unit(self):
        uow = _uow(make_cart("u1", ("1", 1), ("2", 1)))
        message = RemoveOneFromCartHandler(uow).handle("u1", "1")

        assert message == "Product removed from cart!"
        assert uow.carts.get_by_user("u1").product_ids() == ["2"]

    def test_deletes_cart_when_last_unit_goes(self):
        uow = _uow(make_cart("u1", ("1", 1)))
        assert RemoveOneFromCartHandler(uow).handle("u1", "1") == "Cart deleted!"
        assert uow.carts.get_by_user("u1") is None

    def test_no_cart(self):
        with pytest.raises(EntityNotFoundError):
            RemoveOneFromCartHandler(_uow()).handle("u1", "1")


class TestRemoveCartLine:

    def test_removes_whole_line(self):
        uow = _uow(make_cart("u1", ("1", 4), ("2", 1)))
        message = RemoveCartLineHandler(uow).handle("u1", "1")

        assert message == "Product removed from cart!"
        assert uow.carts.get_by_user("u1").quantity_of("1") == 0

    def test_last_line_clears_cart(self):
        uow = _uow(make_cart("u1", ("1", 4)))
        assert RemoveCartLineHandler(uow).handle("u1", "1") == "Cart cleared!"
        assert uow.carts.get_by_user("u1") is None

    def test_product_not_in_cart(self):
        uow = _uow(make_cart("u1", ("1", 4)))
        with pytest.raises(ValidationError, match="not in the cart"):
            RemoveCartLineHandler(uow).handle("u1", "2")


class TestChangeCartQuantity:

    def test_sets_exact_amount(self):
        uow = _uow(make_cart("u1", ("1", 1)))
        assert ChangeCartQuantityHandler(uow).handle("u1", "1", 4) == "Cart updated!"
        assert uow.carts.get_by_user("u1").quantity_of("1") == 4

    def test_caps_at_stock(self):
        uow = _uow(make_cart("u1", ("1", 1)))
        message = ChangeCartQuantityHandler(uow).handle("u1", "1", 20)

        assert message == "Inventory limit reached!"
        assert uow.carts.get_by_user("u1").quantity_of("1") == 10

    def test_zero_is_rejected(self):
        uow = _uow(make_cart("u1", ("1", 1)))
        with pytest.raises(ValidationError):
            ChangeCartQuantityHandler(uow).handle("u1", "1", 0)


class TestShowCart:

    def test_no_cart_is_empty(self):
        dto = ShowCartHandler(_uow()).handle("u1")
        assert dto.items == []
        assert dto.amount == "₹0.00"
        assert dto.item_count == 0

    def test_lines_and_amount(self):
        uow = _uow(make_cart("u1", ("1", 2), ("2", 1)))
        dto = ShowCartHandler(uow).handle("u1")

        assert [line.product_name for line in dto.items] == ["Clay Vase", "Brass Lamp"]
        assert dto.items[0].line_total == "₹200.00"
        assert dto.amount == "₹233.33"
        assert dto.item_count == 2

    def test_retired_product_is_skipped(self):
        uow = _uow(make_cart("u1", ("1", 2), ("2", 1)))
        uow.products.get_by_id("2").retire()

        dto = ShowCartHandler(uow).handle("u1")
        assert [line.product_id for line in dto.items] == ["1"]
        assert dto.amount == "₹200.00"

"""Unit tests for the Cart aggregate."""

import pytest

from ams.domain.exceptions import ValidationError
from ams.domain.model.cart import Cart, CartItem
from tests.factories import make_cart


class TestCartAdd:

    def test_add_creates_line(self):
        cart = Cart(user_id="u1")
        assert cart.add("1", 2, available=10) == 2
        assert cart.quantity_of("1") == 2

    def test_add_increments_existing_line(self):
        cart = make_cart("u1", ("1", 2))
        cart.add("1", 3, available=10)
        assert cart.quantity_of("1") == 5
        assert len(cart.items) == 1

    def test_add_caps_at_available_stock(self):
        cart = make_cart("u1", ("1", 4))
        assert cart.add("1", 5, available=6) == 6

    def test_add_when_cart_already_holds_all_stock(self):
        cart = make_cart("u1", ("1", 6))
        with pytest.raises(ValidationError, match="Stock limit reached"):
            cart.add("1", 1, available=6)

    def test_add_product_without_stock(self):
        with pytest.raises(ValidationError, match="Stock limit reached"):
            Cart(user_id="u1").add("1", 1, available=0)

    def test_lines_keep_insertion_order(self):
        cart = Cart(user_id="u1")
        cart.add("2", 1, available=5)
        cart.add("1", 1, available=5)
        assert cart.product_ids() == ["2", "1"]


class TestCartRemove:

    def test_remove_one_decrements(self):
        cart = make_cart("u1", ("1", 3))
        cart.remove_one("1")
        assert cart.quantity_of("1") == 2

    def test_remove_one_drops_last_unit(self):
        cart = make_cart("u1", ("1", 1), ("2", 1))
        cart.remove_one("1")
        assert cart.product_ids() == ["2"]

    def test_remove_line_empties_cart(self):
        cart = make_cart("u1", ("1", 5))
        cart.remove_line("1")
        assert cart.is_empty

    def test_remove_unknown_product(self):
        with pytest.raises(ValidationError, match="not in the cart"):
            make_cart("u1", ("1", 1)).remove_line("9")

    def test_discard_is_silent_for_unknown_product(self):
        assert make_cart("u1", ("1", 1)).discard("9") is False


class TestCartSetQuantity:

    def test_sets_exact_amount(self):
        cart = make_cart("u1", ("1", 1))
        assert cart.set_quantity("1", 4, available=10) is False
        assert cart.quantity_of("1") == 4

    def test_caps_at_available(self):
        cart = make_cart("u1", ("1", 1))
        assert cart.set_quantity("1", 40, available=10) is True
        assert cart.quantity_of("1") == 10

    def test_zero_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            make_cart("u1", ("1", 1)).set_quantity("1", 0, available=10)


def test_cart_item_quantity_must_be_positive():
    with pytest.raises(ValidationError, match="must be positive"):
        CartItem(product_id="1", quantity=0)

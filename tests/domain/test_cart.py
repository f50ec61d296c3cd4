"""Unit tests for the Cart aggregate and its lines."""

from dataclasses import FrozenInstanceError

import pytest

from pos.domain.exceptions import (
    IndexOutOfRangeError,
    InvalidQuantityError,
    UnknownProductError,
)
from pos.domain.model.cart import Cart, CartLine
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money, Quantity
from tests.fakes import make_catalog


def _cart() -> Cart:
    return Cart(make_catalog())


class TestCartAddItem:

    def test_add_appends_one_line(self):
        cart = _cart()
        cart.add_item("Latte", 2)
        assert len(cart) == 1
        line = cart.items()[0]
        assert line.product_name == "Latte"
        assert line.quantity.value == 2
        assert line.line_total == Money.of("8.00")

    @pytest.mark.parametrize("name,qty", [("Latte", 1), ("Muffin", 3), ("Green Tea", 7)])
    def test_line_total_is_qty_times_catalog_price(self, name, qty):
        catalog = make_catalog()
        cart = Cart(catalog)
        cart.add_item(name, qty)
        assert cart.items()[-1].line_total == catalog.get(name).price * qty

    def test_snapshots_price_and_image(self):
        cart = _cart()
        cart.add_item("Muffin", 1)
        line = cart.items()[0]
        assert line.unit_price == Money.of("5.00")
        assert line.image == "/images/muffin.png"

    def test_same_product_twice_gives_two_lines(self):
        cart = _cart()
        cart.add_item("Latte", 1)
        cart.add_item("Latte", 2)
        assert [line.quantity.value for line in cart.items()] == [1, 2]

    def test_preserves_insertion_order(self):
        cart = _cart()
        for name in ("Muffin", "Latte", "Espresso"):
            cart.add_item(name, 1)
        assert [line.product_name for line in cart.items()] == ["Muffin", "Latte", "Espresso"]

    def test_unknown_product_rejected(self):
        cart = _cart()
        with pytest.raises(UnknownProductError, match="Bagel"):
            cart.add_item("Bagel", 1)
        assert len(cart) == 0

    @pytest.mark.parametrize("qty", [0, -1, -100])
    def test_non_positive_quantity_rejected(self, qty):
        cart = _cart()
        cart.add_item("Latte", 1)
        with pytest.raises(InvalidQuantityError):
            cart.add_item("Latte", qty)
        assert len(cart) == 1

    def test_unknown_product_checked_before_quantity(self):
        with pytest.raises(UnknownProductError):
            _cart().add_item("Bagel", 0)


class TestCartRemoveItem:

    def test_remove_middle_line_shifts_indices(self):
        cart = _cart()
        for name in ("Latte", "Muffin", "Espresso"):
            cart.add_item(name, 1)
        cart.remove_item(1)
        assert [line.product_name for line in cart.items()] == ["Latte", "Espresso"]

    @pytest.mark.parametrize("index", [-1, 2, 99])
    def test_out_of_range_rejected_and_cart_unchanged(self, index):
        cart = _cart()
        cart.add_item("Latte", 1)
        cart.add_item("Muffin", 1)
        with pytest.raises(IndexOutOfRangeError, match="Invalid item index"):
            cart.remove_item(index)
        assert len(cart) == 2

    def test_remove_from_empty_cart_rejected(self):
        with pytest.raises(IndexOutOfRangeError):
            _cart().remove_item(0)


class TestCartUpdateQuantity:

    def test_update_quantity(self):
        cart = _cart()
        cart.add_item("Latte", 1)
        cart.update_quantity(0, 4)
        assert cart.items()[0].line_total == Money.of("16.00")

    def test_update_to_zero_rejected_and_line_unchanged(self):
        cart = _cart()
        cart.add_item("Latte", 3)
        with pytest.raises(InvalidQuantityError):
            cart.update_quantity(0, 0)
        assert cart.items()[0].quantity.value == 3

    def test_update_bad_index_rejected(self):
        cart = _cart()
        with pytest.raises(IndexOutOfRangeError):
            cart.update_quantity(0, 1)


class TestCartClearAndQueries:

    def test_clear_empties_cart(self):
        cart = _cart()
        cart.add_item("Latte", 1)
        cart.clear()
        assert cart.is_empty
        assert cart.items() == ()

    def test_clear_twice_is_harmless(self):
        cart = _cart()
        cart.add_item("Latte", 1)
        cart.clear()
        cart.clear()
        assert len(cart) == 0

    def test_subtotal_of_empty_cart_is_zero(self):
        assert _cart().subtotal() == Money.zero()

    def test_subtotal_sums_lines(self):
        cart = Cart(make_catalog([
            Product("Cookie", "Pastry", Money.of("3.00")),
            Product("Muffin", "Pastry", Money.of("5.00")),
        ]))
        cart.add_item("Cookie", 2)
        cart.add_item("Muffin", 1)
        assert cart.subtotal() == Money.of("11.00")

    def test_items_cannot_be_edited_in_place(self):
        cart = _cart()
        cart.add_item("Latte", 1)
        line = cart.items()[0]
        with pytest.raises(FrozenInstanceError):
            line.quantity = Quantity(50)
        assert cart.items()[0].quantity.value == 1

    def test_update_quantity_leaves_earlier_lines_alone(self):
        cart = _cart()
        before = cart.add_item("Latte", 1)
        cart.update_quantity(0, 9)
        assert before.quantity.value == 1
        assert cart.items()[0].quantity.value == 9
        assert cart.subtotal() == Money.of("36.00")


class TestCartLine:

    def test_line_total(self):
        line = CartLine("Latte", Quantity(3), Money.of("4.00"))
        assert line.line_total == Money.of("12.00")

    def test_with_quantity_returns_new_line(self):
        line = CartLine("Latte", Quantity(3), Money.of("4.00"))
        changed = line.with_quantity(5)
        assert changed.quantity == Quantity(5)
        assert changed.unit_price == Money.of("4.00")
        assert line.quantity == Quantity(3)

    def test_with_quantity_never_to_zero(self):
        line = CartLine("Latte", Quantity(3), Money.of("4.00"))
        with pytest.raises(InvalidQuantityError):
            line.with_quantity(0)
        assert line.quantity == Quantity(3)

"""Unit tests for the Cart aggregate and its consistency rules."""

import random

import pytest

from marketplace.domain.exceptions import ValidationError
from marketplace.domain.model.cart import Cart, CartLineItem
from marketplace.domain.model.value_objects import Money, Quantity
from tests.builders import make_product


def _assert_consistent(cart: Cart) -> None:
    assert cart.total_quantity == sum(line.quantity.value for line in cart.lines)
    assert cart.total_price == Money.total(line.line_total for line in cart.lines)


class TestEmptyCart:

    def test_empty_cart_has_zero_totals(self):
        cart = Cart.empty()
        assert cart.is_empty
        assert cart.total_quantity == 0
        assert cart.total_price == Money.zero()
        assert cart.lines == []


class TestAddItem:

    def test_new_line_snapshots_product(self):
        product = make_product("1", price="12.50", title="Lamp", seller_id="s9")
        cart = Cart.empty().add_item(product, Quantity(2))

        line = cart.items["1"]
        assert line.title == "Lamp"
        assert line.seller_id == "s9"
        assert line.unit_price == Money.of("12.50")
        assert line.line_total == Money.of("25.00")
        assert cart.total_quantity == 2
        assert cart.total_price == Money.of("25.00")

    def test_same_product_merges_into_one_line(self):
        product = make_product("1", price="10.00")
        cart = Cart.empty().add_item(product, Quantity(2)).add_item(product, Quantity(3))

        assert len(cart.lines) == 1
        assert cart.items["1"].quantity == Quantity(5)
        assert cart.items["1"].line_total == Money.of("50.00")
        assert cart.total_quantity == 5

    def test_existing_line_keeps_original_price(self):
        product = make_product("1", price="10.00")
        cart = Cart.empty().add_item(product, Quantity(1))

        product.price = Money.of("99.00")
        cart = cart.add_item(product, Quantity(1))

        assert cart.items["1"].unit_price == Money.of("10.00")
        assert cart.total_price == Money.of("20.00")

    def test_unavailable_product_rejected(self):
        product = make_product("1", is_available=False)
        with pytest.raises(ValidationError, match="not available"):
            Cart.empty().add_item(product, Quantity(1))

    def test_receiver_is_not_mutated(self):
        before = Cart.empty().add_item(make_product("1"), Quantity(1))
        after = before.add_item(make_product("2"), Quantity(1))

        assert before.total_quantity == 1
        assert after.total_quantity == 2

    def test_lines_keep_insertion_order(self):
        cart = (
            Cart.empty()
            .add_item(make_product("2"), Quantity(1))
            .add_item(make_product("1"), Quantity(1))
            .add_item(make_product("2"), Quantity(1))
        )
        assert [line.product_id for line in cart.lines] == ["2", "1"]


class TestUpdateItem:

    def test_sets_quantity_and_recomputes(self):
        cart = Cart.empty().add_item(make_product("1", price="4.00"), Quantity(5))
        cart = cart.update_item("1", Quantity(2))

        assert cart.items["1"].quantity == Quantity(2)
        assert cart.items["1"].line_total == Money.of("8.00")
        assert cart.total_quantity == 2
        assert cart.total_price == Money.of("8.00")

    def test_absent_product_is_a_noop(self):
        cart = Cart.empty().add_item(make_product("1"), Quantity(1))
        updated = cart.update_item("missing", Quantity(3))

        assert updated is cart
        assert updated == cart


class TestRemoveItem:

    def test_example_from_two_lines(self):
        cart = (
            Cart.empty()
            .add_item(make_product("P1", price="10"), Quantity(2))
            .add_item(make_product("P2", price="25"), Quantity(1))
        )
        assert cart.total_price == Money.of("45")

        cart = cart.remove_item("P1")
        assert cart.total_price == Money.of("25")
        assert cart.total_quantity == 1
        assert list(cart.items) == ["P2"]

    def test_absent_product_is_a_noop(self):
        cart = Cart.empty().add_item(make_product("1"), Quantity(1))
        assert cart.remove_item("missing") is cart

    def test_removing_last_line_empties_cart(self):
        cart = Cart.empty().add_item(make_product("1"), Quantity(3)).remove_item("1")
        assert cart.is_empty
        assert cart.total_price == Money.zero()


class TestTotalsAreAlwaysDerived:

    def test_random_mutation_sequences_stay_consistent(self):
        rng = random.Random(1234)
        products = [make_product(str(i), price=f"{i}.{i}9") for i in range(1, 6)]
        cart = Cart.empty()

        for _ in range(300):
            product = rng.choice(products)
            op = rng.choice(["add", "update", "remove"])
            if op == "add":
                cart = cart.add_item(product, Quantity(rng.randint(1, 4)))
            elif op == "update":
                cart = cart.update_item(product.id, Quantity(rng.randint(1, 9)))
            else:
                cart = cart.remove_item(product.id)
            _assert_consistent(cart)

    def test_from_lines_merges_duplicates_and_recomputes(self):
        line = CartLineItem(
            product_id="1",
            seller_id="s1",
            title="Mug",
            unit_price=Money.of("3.00"),
            quantity=Quantity(2),
        )
        cart = Cart.from_lines([line, line])

        assert cart.items["1"].quantity == Quantity(4)
        assert cart.total_price == Money.of("12.00")

    def test_mismatched_key_rejected(self):
        line = CartLineItem("1", "s1", "Mug", Money.of("3.00"), Quantity(1))
        with pytest.raises(ValidationError, match="does not match"):
            Cart({"2": line})

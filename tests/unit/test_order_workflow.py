"""Unit tests for OrderWorkflow.place_order.

Tests cover:
1. Successful placement: totals, snapshots, stock decrement, cart cleared
2. Failure ordering: user, empty cart, missing product, insufficient stock
3. All-or-nothing: a rejected placement changes no stock and keeps the cart
4. Shipping address defaulting
"""

import pytest

from storefront.core.errors import (
    BadRequestError,
    EmptyCartError,
    InsufficientStockError,
    NotFoundError,
)
from storefront.models.order import OrderStatus
from storefront.models.product import ProductUpdate


def stock_snapshot(store):
    return {p.id: p.stock for p in store.products.get_all_products()}


class TestPlaceOrderSuccess:
    """Tests for successful order placement."""

    def test_macbook_scenario(self, store, workflow):
        """Two MacBooks at 2499.99 total 4999.98 and leave 8 in stock."""
        store.carts.add_item("1", "1", 2)

        order = workflow.place_order("1")

        assert order.total_amount == pytest.approx(4999.98)
        assert store.products.get_product("1").stock == 8
        assert store.carts.get_cart("1").items == []
        assert order.status == OrderStatus.PENDING

    def test_total_is_sum_of_lines(self, store, workflow, make_product):
        """Total equals the sum of price times quantity over all lines."""
        make_product("a", price=12.5, stock=10)
        make_product("b", price=3.99, stock=10)
        make_product("c", price=100.0, stock=1)
        store.carts.add_item("2", "a", 3)
        store.carts.add_item("2", "b", 7)
        store.carts.add_item("2", "c", 1)

        order = workflow.place_order("2")

        expected = sum(line.price * line.quantity for line in order.items)
        assert order.total_amount == pytest.approx(expected)
        assert order.total_amount == pytest.approx(12.5 * 3 + 3.99 * 7 + 100.0)

    def test_every_line_decrements_stock(self, store, workflow, make_product):
        """Each product loses exactly its line quantity; others are untouched."""
        make_product("a", stock=4)
        make_product("b", stock=9)
        store.carts.add_item("1", "a", 4)
        store.carts.add_item("1", "b", 2)
        before = stock_snapshot(store)

        workflow.place_order("1")

        after = stock_snapshot(store)
        assert after["a"] == 0
        assert after["b"] == 7
        for product_id in before:
            if product_id not in ("a", "b"):
                assert after[product_id] == before[product_id]

    def test_lines_snapshot_price_and_name(self, store, workflow):
        """Later product edits do not change an existing order."""
        store.carts.add_item("1", "2", 1)
        order = workflow.place_order("1")

        store.products.update_product("2", ProductUpdate(name="Renamed", price=1.0))

        stored = store.orders.get_order(order.id)
        assert stored.items[0].product_name == "iPhone 15 Pro"
        assert stored.items[0].price == pytest.approx(999.99)
        assert stored.total_amount == pytest.approx(999.99)

    def test_order_is_persisted(self, store, workflow):
        """The created order can be read back by ID and by user."""
        store.carts.add_item("1", "3", 2)

        order = workflow.place_order("1")

        assert store.orders.get_order(order.id) is order
        assert [o.id for o in store.orders.get_orders_by_user("1")] == [order.id]

    def test_order_ids_are_unique(self, store, workflow):
        """Consecutive placements get distinct IDs."""
        ids = set()
        for _ in range(5):
            store.carts.add_item("1", "3", 1)
            ids.add(workflow.place_order("1").id)
        assert len(ids) == 5

    def test_cart_is_emptied_not_deleted(self, store, workflow):
        """The cart still exists after placement, with no lines."""
        store.carts.add_item("1", "3", 1)
        cart_id = store.carts.get_cart("1").id

        workflow.place_order("1")

        cart = store.carts.get_cart("1")
        assert cart is not None
        assert cart.id == cart_id
        assert cart.items == []


class TestPlaceOrderFailures:
    """Tests for rejected placements and their ordering."""

    def test_unknown_user(self, workflow):
        with pytest.raises(NotFoundError) as exc_info:
            workflow.place_order("no-such-user")
        assert exc_info.value.entity == "user"

    def test_empty_cart(self, store, workflow):
        """Empty cart fails and leaves stock unchanged."""
        before = stock_snapshot(store)

        with pytest.raises(EmptyCartError):
            workflow.place_order("1")

        assert stock_snapshot(store) == before
        assert store.orders.list_orders() == []

    def test_user_without_cart_counts_as_empty(self, store, workflow):
        """A user whose cart was never created has an empty cart."""
        store.carts.delete_cart("2")

        with pytest.raises(EmptyCartError):
            workflow.place_order("2")

    def test_missing_product(self, store, workflow):
        store.carts.add_item("1", "3", 1)
        store.carts.add_item("1", "ghost", 1)

        with pytest.raises(NotFoundError) as exc_info:
            workflow.place_order("1")

        assert exc_info.value.entity == "product"
        assert exc_info.value.entity_id == "ghost"
        assert store.products.get_product("3").stock == 100

    def test_missing_product_reported_before_insufficient_stock(self, store, workflow):
        """Product existence is checked for every line before any stock check."""
        store.carts.add_item("1", "1", 50)
        store.carts.add_item("1", "ghost", 1)

        with pytest.raises(NotFoundError):
            workflow.place_order("1")

    def test_insufficient_stock_changes_nothing(self, store, workflow, make_product):
        """A failing last line leaves earlier lines' stock untouched."""
        make_product("a", stock=10)
        make_product("b", stock=2)
        store.carts.add_item("1", "a", 5)
        store.carts.add_item("1", "3", 1)
        store.carts.add_item("1", "b", 3)
        before = stock_snapshot(store)

        with pytest.raises(InsufficientStockError) as exc_info:
            workflow.place_order("1")

        assert exc_info.value.product_id == "b"
        assert exc_info.value.available == 2
        assert exc_info.value.requested == 3
        assert stock_snapshot(store) == before
        assert len(store.carts.get_cart("1").items) == 3
        assert store.orders.list_orders() == []

    def test_stock_lowered_after_adding_to_cart(self, store, workflow):
        """Stock is rechecked at placement, not only when adding to the cart."""
        store.carts.add_item("1", "1", 5)
        store.products.update_product("1", ProductUpdate(stock=4))

        with pytest.raises(InsufficientStockError):
            workflow.place_order("1")

        assert store.products.get_product("1").stock == 4


class TestShippingAddress:
    """Tests for shipping address selection."""

    def test_explicit_address_is_used(self, store, workflow, shipping_address):
        store.carts.add_item("1", "3", 1)

        order = workflow.place_order("1", shipping_address)

        assert order.shipping_address == shipping_address

    def test_defaults_to_user_address(self, store, workflow):
        store.carts.add_item("1", "3", 1)

        order = workflow.place_order("1")

        assert order.shipping_address.street == "123 Test St"

    def test_address_snapshot_is_independent(self, store, workflow):
        """Changing the user's address later does not touch the order."""
        store.carts.add_item("1", "3", 1)
        order = workflow.place_order("1")

        store.users.get_user("1").address.street = "999 Elsewhere"

        assert order.shipping_address.street == "123 Test St"

    def test_no_address_anywhere(self, store, workflow, alice_id):
        """Without any address the placement fails before writing."""
        store.carts.add_item(alice_id, "3", 1)

        with pytest.raises(BadRequestError):
            workflow.place_order(alice_id)

        assert store.products.get_product("3").stock == 100
        assert len(store.carts.get_cart(alice_id).items) == 1

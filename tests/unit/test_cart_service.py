"""Unit tests for CartService."""

import pytest

from storefront.core.errors import InsufficientStockError, NotFoundError


class TestGetCart:
    def test_lazily_created(self, store, cart_service):
        """A user without a cart gets an empty one on first access."""
        store.carts.delete_cart("1")

        cart = cart_service.get_cart("1")

        assert cart.id == "cart-1"
        assert cart.user_id == "1"
        assert cart.items == []
        assert store.carts.get_cart("1") is cart

    def test_unknown_user(self, cart_service):
        with pytest.raises(NotFoundError):
            cart_service.get_cart("nobody")


class TestAddItem:
    def test_appends_new_line(self, cart_service):
        cart = cart_service.add_item("1", "2", 3)

        assert [(i.product_id, i.quantity) for i in cart.items] == [("2", 3)]

    def test_merges_duplicate_product(self, cart_service):
        """Adding a product twice increments the existing line."""
        cart_service.add_item("1", "2", 3)
        cart = cart_service.add_item("1", "2", 4)

        assert len(cart.items) == 1
        assert cart.items[0].quantity == 7

    def test_keeps_insertion_order(self, cart_service):
        cart_service.add_item("1", "3", 1)
        cart_service.add_item("1", "1", 1)
        cart = cart_service.add_item("1", "3", 1)

        assert [i.product_id for i in cart.items] == ["3", "1"]

    def test_unknown_product(self, cart_service):
        with pytest.raises(NotFoundError) as exc_info:
            cart_service.add_item("1", "missing", 1)
        assert exc_info.value.entity == "product"

    def test_insufficient_stock(self, store, cart_service):
        with pytest.raises(InsufficientStockError):
            cart_service.add_item("1", "1", 11)
        assert store.carts.get_cart("1").items == []

    def test_exact_stock_is_allowed(self, cart_service):
        cart = cart_service.add_item("1", "1", 10)
        assert cart.items[0].quantity == 10


class TestUpdateItem:
    def test_sets_absolute_quantity(self, cart_service):
        cart_service.add_item("1", "3", 5)

        cart = cart_service.update_item("1", "3", 2)

        assert cart.items[0].quantity == 2

    def test_stock_check_uses_new_quantity(self, cart_service):
        """Stock is compared against the new total, not the increment."""
        cart_service.add_item("1", "1", 8)

        cart = cart_service.update_item("1", "1", 10)
        assert cart.items[0].quantity == 10

        with pytest.raises(InsufficientStockError):
            cart_service.update_item("1", "1", 11)

    def test_missing_line(self, cart_service):
        with pytest.raises(NotFoundError) as exc_info:
            cart_service.update_item("1", "3", 1)
        assert exc_info.value.entity == "cart item"

    def test_missing_product(self, cart_service):
        with pytest.raises(NotFoundError) as exc_info:
            cart_service.update_item("1", "missing", 1)
        assert exc_info.value.entity == "product"


class TestRemoveAndClear:
    def test_remove_item(self, cart_service):
        cart_service.add_item("1", "3", 1)
        cart_service.add_item("1", "2", 1)

        cart = cart_service.remove_item("1", "3")

        assert [i.product_id for i in cart.items] == ["2"]

    def test_remove_twice_reports_not_found(self, cart_service):
        cart_service.add_item("1", "3", 1)
        cart_service.remove_item("1", "3")

        with pytest.raises(NotFoundError):
            cart_service.remove_item("1", "3")

    def test_clear_twice_is_noop(self, cart_service):
        cart_service.add_item("1", "3", 1)

        cart_service.clear("1")
        cart = cart_service.clear("1")

        assert cart.items == []

    def test_clear_creates_missing_cart(self, store, cart_service):
        store.carts.delete_cart("2")

        cart = cart_service.clear("2")

        assert cart.items == []

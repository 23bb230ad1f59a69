"""Cart mutations with product and stock checks"""

import logging

from ..core.errors import InsufficientStockError, NotFoundError
from ..database.store import DataStore
from ..models.cart import Cart
from ..models.product import Product

logger = logging.getLogger(__name__)


class CartService:
    """Validating front for CartDatabase"""

    def __init__(self, store: DataStore):
        self.store = store

    def _require_user(self, user_id: str) -> None:
        if not self.store.users.get_user(user_id):
            raise NotFoundError("user", user_id)

    def _require_product(self, product_id: str) -> Product:
        product = self.store.products.get_product(product_id)
        if not product:
            raise NotFoundError("product", product_id)
        return product

    @staticmethod
    def _check_stock(product: Product, quantity: int) -> None:
        if product.stock < quantity:
            raise InsufficientStockError(
                product_id=product.id,
                product_name=product.name,
                available=product.stock,
                requested=quantity,
            )

    def get_cart(self, user_id: str) -> Cart:
        """Return the user's cart, creating an empty one on first access"""
        with self.store.lock:
            self._require_user(user_id)
            return self.store.carts.get_or_create_cart(user_id)

    def add_item(self, user_id: str, product_id: str, quantity: int) -> Cart:
        with self.store.lock:
            self._require_user(user_id)
            product = self._require_product(product_id)
            self._check_stock(product, quantity)
            cart = self.store.carts.add_item(user_id, product_id, quantity)

        logger.debug(f"Added {quantity}x {product_id} to cart of user {user_id}")
        return cart

    def update_item(self, user_id: str, product_id: str, quantity: int) -> Cart:
        """Set a line to an absolute quantity"""
        with self.store.lock:
            self._require_user(user_id)
            product = self._require_product(product_id)

            cart = self.store.carts.get_or_create_cart(user_id)
            if not self.store.carts.find_item(cart, product_id):
                raise NotFoundError("cart item", product_id)

            self._check_stock(product, quantity)
            return self.store.carts.update_item_quantity(user_id, product_id, quantity)

    def remove_item(self, user_id: str, product_id: str) -> Cart:
        with self.store.lock:
            self._require_user(user_id)
            self.store.carts.get_or_create_cart(user_id)
            cart = self.store.carts.remove_item(user_id, product_id)
            if cart is None:
                raise NotFoundError("cart item", product_id)
            return cart

    def clear(self, user_id: str) -> Cart:
        """Empty the cart; clearing an empty cart is a no-op"""
        with self.store.lock:
            self._require_user(user_id)
            return self.store.carts.clear_cart(user_id)

"""Cart storage for the storefront"""

from typing import Optional

from ..models.cart import Cart, CartItem
from ..models.common import utcnow


class CartDatabase:
    """In-memory cart storage keyed by user ID"""

    def __init__(self):
        self.carts: dict[str, Cart] = {}

    def create_cart(self, user_id: str) -> Cart:
        """Create an empty cart for a user"""
        now = utcnow()
        cart = Cart(
            id=f"cart-{user_id}",
            user_id=user_id,
            items=[],
            created_at=now,
            updated_at=now,
        )
        self.carts[user_id] = cart
        return cart

    def get_cart(self, user_id: str) -> Optional[Cart]:
        """Get a user's cart if one exists"""
        return self.carts.get(user_id)

    def get_or_create_cart(self, user_id: str) -> Cart:
        """Get existing cart or create new one"""
        cart = self.carts.get(user_id)
        if cart:
            return cart
        return self.create_cart(user_id)

    def find_item(self, cart: Cart, product_id: str) -> Optional[CartItem]:
        return next(
            (item for item in cart.items if item.product_id == product_id),
            None,
        )

    def add_item(self, user_id: str, product_id: str, quantity: int) -> Cart:
        """Add an item, merging with an existing line for the same product"""
        cart = self.get_or_create_cart(user_id)

        existing_item = self.find_item(cart, product_id)
        if existing_item:
            existing_item.quantity += quantity
        else:
            cart.items.append(CartItem(product_id=product_id, quantity=quantity))

        cart.updated_at = utcnow()
        return cart

    def update_item_quantity(self, user_id: str, product_id: str, quantity: int) -> Optional[Cart]:
        """Set a line to an absolute quantity; returns None if the line is absent"""
        cart = self.get_cart(user_id)
        if not cart:
            return None

        item = self.find_item(cart, product_id)
        if not item:
            return None

        item.quantity = quantity
        cart.updated_at = utcnow()
        return cart

    def remove_item(self, user_id: str, product_id: str) -> Optional[Cart]:
        """Remove a line; returns None if the line is absent"""
        cart = self.get_cart(user_id)
        if not cart or not self.find_item(cart, product_id):
            return None

        cart.items = [i for i in cart.items if i.product_id != product_id]
        cart.updated_at = utcnow()
        return cart

    def clear_cart(self, user_id: str) -> Cart:
        """Clear all items from cart"""
        cart = self.get_or_create_cart(user_id)
        if cart.items:
            cart.items = []
            cart.updated_at = utcnow()
        return cart

    def delete_cart(self, user_id: str) -> bool:
        """Delete a cart"""
        if user_id in self.carts:
            del self.carts[user_id]
            return True
        return False

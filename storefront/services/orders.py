"""
Order workflow

Converts a user's cart into an order and drives the order status state
machine. All validation for a placement happens before the first write, so a
rejected placement leaves stock, cart and orders untouched.
"""

import logging
import uuid
from typing import Optional

from ..core.errors import (
    BadRequestError,
    EmptyCartError,
    InsufficientStockError,
    InvalidStateTransitionError,
    NotFoundError,
)
from ..database.store import DataStore
from ..models.common import Address, utcnow
from ..models.order import Order, OrderItem, OrderStatus
from ..models.product import Product

logger = logging.getLogger(__name__)


# Current status -> statuses it may move to. Terminal states map to nothing.
ALLOWED_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.PROCESSING, OrderStatus.CANCELLED}),
    OrderStatus.PROCESSING: frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.DELIVERED, OrderStatus.CANCELLED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}


def can_transition(current: OrderStatus, new: OrderStatus) -> bool:
    return new in ALLOWED_TRANSITIONS[current]


def is_terminal(status: OrderStatus) -> bool:
    return not ALLOWED_TRANSITIONS[status]


def new_order_id() -> str:
    return f"ORD-{uuid.uuid4().hex.upper()}"


class OrderWorkflow:
    """Order placement and status transitions over a DataStore"""

    def __init__(self, store: DataStore):
        self.store = store

    def place_order(self, user_id: str, shipping_address: Optional[Address] = None) -> Order:
        """
        Place an order from the user's cart.

        Raises:
            NotFoundError: user, or a product referenced by the cart, is missing
            EmptyCartError: the cart has no lines
            InsufficientStockError: a line asks for more than is in stock
            BadRequestError: no shipping address given and none on file
        """
        with self.store.lock:
            user = self.store.users.get_user(user_id)
            if not user:
                raise NotFoundError("user", user_id)

            cart = self.store.carts.get_or_create_cart(user_id)
            if not cart.items:
                raise EmptyCartError(user_id)

            # Resolve every product before checking any stock
            products: list[Product] = []
            for item in cart.items:
                product = self.store.products.get_product(item.product_id)
                if not product:
                    raise NotFoundError("product", item.product_id)
                products.append(product)

            for item, product in zip(cart.items, products):
                if product.stock < item.quantity:
                    logger.warning(
                        f"Rejected order for user {user_id}: product {product.id} "
                        f"has {product.stock} in stock, {item.quantity} requested"
                    )
                    raise InsufficientStockError(
                        product_id=product.id,
                        product_name=product.name,
                        available=product.stock,
                        requested=item.quantity,
                    )

            address = shipping_address or user.address
            if address is None:
                raise BadRequestError(
                    "Shipping address is required",
                    {"userId": user_id},
                )

            # Validation complete: commit
            order_items: list[OrderItem] = []
            total_amount = 0.0
            for item, product in zip(cart.items, products):
                order_items.append(
                    OrderItem(
                        product_id=product.id,
                        product_name=product.name,
                        quantity=item.quantity,
                        price=product.price,
                    )
                )
                total_amount += product.price * item.quantity

            for item in cart.items:
                self.store.products.update_stock(item.product_id, -item.quantity)

            now = utcnow()
            order = Order(
                id=new_order_id(),
                user_id=user_id,
                items=order_items,
                total_amount=round(total_amount, 2),
                status=OrderStatus.PENDING,
                shipping_address=address.model_copy(),
                created_at=now,
                updated_at=now,
            )
            self.store.orders.create_order(order)
            self.store.carts.clear_cart(user_id)

        logger.info(
            f"Order {order.id} created for user {user_id}: "
            f"{len(order.items)} line(s), total {order.total_amount:.2f}"
        )
        return order

    def update_status(self, order_id: str, new_status: OrderStatus) -> Order:
        """
        Move an order to ``new_status``.

        Raises:
            NotFoundError: no such order
            InvalidStateTransitionError: the move is not allowed from the current status
        """
        with self.store.lock:
            order = self.store.orders.get_order(order_id)
            if not order:
                raise NotFoundError("order", order_id)

            current = order.status
            if not can_transition(current, new_status):
                raise InvalidStateTransitionError(current.value, new_status.value)

            self.store.orders.update_status(order_id, new_status)

        logger.info(f"Order {order_id} status: {current.value} -> {new_status.value}")
        return order

"""Order storage for the storefront"""

from typing import Optional

from ..models.common import utcnow
from ..models.order import Order, OrderStatus


class OrderDatabase:
    """In-memory order storage"""

    def __init__(self):
        self.orders: dict[str, Order] = {}

    def create_order(self, order: Order) -> Order:
        """Persist a new order"""
        self.orders[order.id] = order
        return order

    def get_order(self, order_id: str) -> Optional[Order]:
        """Get an order by ID"""
        return self.orders.get(order_id)

    def update_status(self, order_id: str, status: OrderStatus) -> Optional[Order]:
        """Update order status"""
        order = self.get_order(order_id)
        if not order:
            return None

        order.status = status
        order.updated_at = utcnow()
        return order

    def list_orders(
        self,
        user_id: Optional[str] = None,
        status: Optional[OrderStatus] = None,
    ) -> list[Order]:
        """List orders, newest first"""
        # Reverse insertion order first so equal timestamps also come out newest first
        orders = list(reversed(self.orders.values()))
        if user_id:
            orders = [o for o in orders if o.user_id == user_id]
        if status:
            orders = [o for o in orders if o.status == status]
        orders.sort(key=lambda o: o.created_at, reverse=True)
        return orders

    def get_orders_by_user(self, user_id: str) -> list[Order]:
        return self.list_orders(user_id=user_id)

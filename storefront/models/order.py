"""Order models for the storefront"""

from datetime import datetime
from enum import Enum
from typing import Optional

from .common import Address, ApiModel, Pagination


class OrderStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class OrderItem(ApiModel):
    """Order line; price and product name are snapshotted at placement"""
    product_id: str
    product_name: str
    quantity: int
    price: float


class Order(ApiModel):
    """Placed order"""
    id: str
    user_id: str
    items: list[OrderItem]
    total_amount: float
    status: OrderStatus = OrderStatus.PENDING
    shipping_address: Address
    created_at: datetime
    updated_at: datetime


class OrderCreateRequest(ApiModel):
    """Request to place an order from the user's cart"""
    user_id: str
    # Falls back to the user's stored address when omitted
    shipping_address: Optional[Address] = None


class OrderStatusUpdateRequest(ApiModel):
    status: OrderStatus


class OrderListResponse(Pagination):
    orders: list[Order]

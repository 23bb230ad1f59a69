"""Cart models for the storefront"""

from datetime import datetime

from pydantic import Field

from .common import ApiModel


class CartItem(ApiModel):
    """Line in a shopping cart, unique per product"""
    product_id: str
    quantity: int = Field(gt=0)


class Cart(ApiModel):
    """Shopping cart, one per user"""
    id: str
    user_id: str
    items: list[CartItem] = []
    created_at: datetime
    updated_at: datetime


class AddToCartRequest(ApiModel):
    """Request to add item to cart"""
    product_id: str
    quantity: int = Field(default=1, gt=0)


class UpdateCartItemRequest(ApiModel):
    """Request to set a cart line to an absolute quantity"""
    quantity: int = Field(gt=0)

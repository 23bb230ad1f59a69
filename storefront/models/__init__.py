# Storefront Models

from .common import Address, ApiModel, HealthResponse, Pagination, paginate, utcnow
from .product import Product, ProductCreate, ProductUpdate, ProductListResponse
from .category import Category, CategoryWithChildren, CategoryCreate, CategoryUpdate
from .user import User, UserCreate, UserUpdate
from .cart import Cart, CartItem, AddToCartRequest, UpdateCartItemRequest
from .order import (
    Order,
    OrderItem,
    OrderStatus,
    OrderCreateRequest,
    OrderStatusUpdateRequest,
    OrderListResponse,
)
from .auth import AuthUser, LoginRequest, LoginResponse, CurrentUserResponse, MessageResponse

__all__ = [
    "Address",
    "ApiModel",
    "HealthResponse",
    "Pagination",
    "paginate",
    "utcnow",
    "Product",
    "ProductCreate",
    "ProductUpdate",
    "ProductListResponse",
    "Category",
    "CategoryWithChildren",
    "CategoryCreate",
    "CategoryUpdate",
    "User",
    "UserCreate",
    "UserUpdate",
    "Cart",
    "CartItem",
    "AddToCartRequest",
    "UpdateCartItemRequest",
    "Order",
    "OrderItem",
    "OrderStatus",
    "OrderCreateRequest",
    "OrderStatusUpdateRequest",
    "OrderListResponse",
    "AuthUser",
    "LoginRequest",
    "LoginResponse",
    "CurrentUserResponse",
    "MessageResponse",
]

# API Routes

from .auth import router as auth_router
from .products import router as products_router
from .categories import router as categories_router
from .users import router as users_router
from .carts import router as cart_router
from .orders import router as orders_router

__all__ = [
    "auth_router",
    "products_router",
    "categories_router",
    "users_router",
    "cart_router",
    "orders_router",
]

# Database modules

from .products import ProductDatabase
from .categories import CategoryDatabase
from .users import UserDatabase
from .carts import CartDatabase
from .orders import OrderDatabase
from .store import DataStore
from .seed import seed_store

__all__ = [
    "ProductDatabase",
    "CategoryDatabase",
    "UserDatabase",
    "CartDatabase",
    "OrderDatabase",
    "DataStore",
    "seed_store",
]

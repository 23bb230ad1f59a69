"""Aggregate in-memory store shared by the services and routes"""

import threading

from .carts import CartDatabase
from .categories import CategoryDatabase
from .orders import OrderDatabase
from .products import ProductDatabase
from .users import UserDatabase


class DataStore:
    """
    One repository per entity kind plus the lock guarding multi-step updates.

    Each application builds its own instance, so tests get isolated state.
    Workflows that read, validate and then write across repositories must
    hold ``lock`` for the whole sequence.
    """

    def __init__(self):
        self.lock = threading.RLock()
        self.products = ProductDatabase()
        self.categories = CategoryDatabase()
        self.users = UserDatabase()
        self.carts = CartDatabase()
        self.orders = OrderDatabase()

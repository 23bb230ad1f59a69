"""Dependency injection for routes."""
from fastapi import Request

from .database.store import DataStore
from .security.auth import AuthStore
from .services.carts import CartService
from .services.orders import OrderWorkflow


def get_store(request: Request) -> DataStore:
    """Get the data store from app state."""
    return request.app.state.store


def get_auth_store(request: Request) -> AuthStore:
    """Get the auth store from app state."""
    return request.app.state.auth_store


def get_cart_service(request: Request) -> CartService:
    return CartService(get_store(request))


def get_order_workflow(request: Request) -> OrderWorkflow:
    return OrderWorkflow(get_store(request))

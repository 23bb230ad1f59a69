"""Pytest configuration for tests."""

import pytest
from fastapi.testclient import TestClient

from storefront.core.config import Settings
from storefront.database import DataStore, seed_store
from storefront.database.seed import ALICE_ID
from storefront.main import create_app
from storefront.models.common import Address, utcnow
from storefront.models.product import Product
from storefront.security.auth import DEFAULT_ACCOUNTS, AuthStore
from storefront.services.carts import CartService
from storefront.services.orders import OrderWorkflow


@pytest.fixture
def settings():
    """Test settings with the demo data set enabled."""
    return Settings(seed_data=True, debug=False, token_ttl_seconds=3600)


@pytest.fixture
def store():
    """Fresh seeded store per test."""
    return seed_store(DataStore())


@pytest.fixture
def empty_store():
    """Store without any seed data."""
    return DataStore()


@pytest.fixture
def auth_store(settings):
    return AuthStore(accounts=DEFAULT_ACCOUNTS, token_ttl_seconds=settings.token_ttl_seconds)


@pytest.fixture
def workflow(store):
    return OrderWorkflow(store)


@pytest.fixture
def cart_service(store):
    return CartService(store)


@pytest.fixture
def make_product(store):
    """Factory adding a product to the seeded store."""

    def _make(product_id: str, price: float = 10.0, stock: int = 5, name: str = None) -> Product:
        now = utcnow()
        return store.products.add_product(
            Product(
                id=product_id,
                name=name or f"Product {product_id}",
                description="",
                price=price,
                stock=stock,
                created_at=now,
                updated_at=now,
            )
        )

    return _make


@pytest.fixture
def shipping_address():
    return Address(
        street="1 Shipping Way",
        city="Portland",
        state="OR",
        postal_code="97201",
        country="US",
    )


@pytest.fixture
def app(settings, store, auth_store):
    return create_app(settings=settings, store=store, auth_store=auth_store)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers(client):
    """Authorization header for alice."""
    response = client.post(
        "/auth/login",
        json={"email": "alice@example.com", "password": "password123"},
    )
    assert response.status_code == 200
    token = response.json()["accessToken"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def alice_id():
    return ALICE_ID

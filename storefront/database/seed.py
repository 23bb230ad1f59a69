"""Demo catalog, users and carts loaded into a fresh store"""

from ..models.category import Category
from ..models.common import Address, utcnow
from ..models.product import Product
from ..models.user import User
from .store import DataStore

# Store users backing the seeded auth accounts share their IDs
ALICE_ID = "550e8400-e29b-41d4-a716-446655440001"
BOB_ID = "550e8400-e29b-41d4-a716-446655440002"


def seed_store(store: DataStore) -> DataStore:
    """Populate ``store`` with the demo data set"""
    now = utcnow()

    categories = [
        Category(id="1", name="Electronics", parent_id=None, created_at=now, updated_at=now),
        Category(id="2", name="Laptops", parent_id="1", created_at=now, updated_at=now),
        Category(id="3", name="Smartphones", parent_id="1", created_at=now, updated_at=now),
        Category(id="4", name="Clothing", parent_id=None, created_at=now, updated_at=now),
    ]
    for category in categories:
        store.categories.add_category(category)

    products = [
        Product(
            id="1",
            name='MacBook Pro 16"',
            description="Apple MacBook Pro with M3 chip",
            price=2499.99,
            stock=10,
            category_id="2",
            image_urls=["https://example.com/macbook.jpg"],
            created_at=now,
            updated_at=now,
        ),
        Product(
            id="2",
            name="iPhone 15 Pro",
            description="Latest iPhone with titanium design",
            price=999.99,
            stock=25,
            category_id="3",
            image_urls=["https://example.com/iphone.jpg"],
            created_at=now,
            updated_at=now,
        ),
        Product(
            id="3",
            name="T-Shirt",
            description="Comfortable cotton t-shirt",
            price=29.99,
            stock=100,
            category_id="4",
            image_urls=["https://example.com/tshirt.jpg"],
            created_at=now,
            updated_at=now,
        ),
    ]
    for product in products:
        store.products.add_product(product)

    users = [
        User(
            id="1",
            email="user1@example.com",
            name="Test User 1",
            address=Address(
                street="123 Test St",
                city="Test City",
                state="TC",
                postal_code="12345",
                country="USA",
            ),
            created_at=now,
            updated_at=now,
        ),
        User(
            id="2",
            email="user2@example.com",
            name="Test User 2",
            address=Address(
                street="456 Demo Ave",
                city="Demo City",
                state="DC",
                postal_code="67890",
                country="USA",
            ),
            created_at=now,
            updated_at=now,
        ),
        User(id=ALICE_ID, email="alice@example.com", name="Alice Johnson", created_at=now, updated_at=now),
        User(id=BOB_ID, email="bob@example.com", name="Bob Smith", created_at=now, updated_at=now),
    ]
    for user in users:
        store.users.add_user(user)
        store.carts.create_cart(user.id)

    return store

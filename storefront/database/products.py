"""Product storage for the storefront"""

import uuid
from typing import Optional

from ..models.common import utcnow
from ..models.product import Product, ProductCreate, ProductUpdate


class ProductDatabase:
    """In-memory product database"""

    def __init__(self):
        self.products: dict[str, Product] = {}

    def get_product(self, product_id: str) -> Optional[Product]:
        """Get a product by ID"""
        return self.products.get(product_id)

    def get_all_products(self) -> list[Product]:
        """Get all products"""
        return list(self.products.values())

    def search_products(
        self,
        search: Optional[str] = None,
        category_id: Optional[str] = None,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
    ) -> list[Product]:
        """Filter products by text, category and price range."""
        results = list(self.products.values())

        if search:
            search_lower = search.lower()
            results = [
                p for p in results
                if search_lower in p.name.lower() or search_lower in p.description.lower()
            ]

        if category_id:
            results = [p for p in results if p.category_id == category_id]

        if min_price is not None:
            results = [p for p in results if p.price >= min_price]
        if max_price is not None:
            results = [p for p in results if p.price <= max_price]

        return results

    def add_product(self, product: Product) -> Product:
        """Store a fully-formed product, replacing any with the same ID"""
        self.products[product.id] = product
        return product

    def create_product(self, data: ProductCreate) -> Product:
        """Create a new product"""
        now = utcnow()
        product = Product(
            id=str(uuid.uuid4()),
            name=data.name,
            description=data.description,
            price=data.price,
            stock=data.stock,
            category_id=data.category_id,
            image_urls=list(data.image_urls),
            created_at=now,
            updated_at=now,
        )
        return self.add_product(product)

    def update_product(self, product_id: str, update: ProductUpdate) -> Optional[Product]:
        """Apply the patchable fields present in ``update``"""
        product = self.get_product(product_id)
        if not product:
            return None

        fields = update.model_fields_set
        if "name" in fields and update.name is not None:
            product.name = update.name
        if "description" in fields and update.description is not None:
            product.description = update.description
        if "price" in fields and update.price is not None:
            product.price = update.price
        if "stock" in fields and update.stock is not None:
            product.stock = update.stock
        if "category_id" in fields:
            product.category_id = update.category_id
        if "image_urls" in fields and update.image_urls is not None:
            product.image_urls = list(update.image_urls)

        product.updated_at = utcnow()
        return product

    def update_stock(self, product_id: str, quantity_change: int) -> bool:
        """
        Update product stock.

        Args:
            product_id: Product to update
            quantity_change: Positive to add, negative to remove

        Returns:
            True if successful
        """
        product = self.products.get(product_id)
        if not product:
            return False

        new_quantity = product.stock + quantity_change
        if new_quantity < 0:
            return False

        product.stock = new_quantity
        product.updated_at = utcnow()
        return True

    def delete_product(self, product_id: str) -> Optional[Product]:
        """Delete a product, returning it if it existed"""
        return self.products.pop(product_id, None)

"""Category storage for the storefront"""

import uuid
from typing import Optional

from ..models.category import Category, CategoryCreate, CategoryUpdate, CategoryWithChildren
from ..models.common import utcnow


class CategoryDatabase:
    """In-memory category storage"""

    def __init__(self):
        self.categories: dict[str, Category] = {}

    def get_category(self, category_id: str) -> Optional[Category]:
        return self.categories.get(category_id)

    def get_all_categories(self) -> list[Category]:
        return list(self.categories.values())

    def add_category(self, category: Category) -> Category:
        self.categories[category.id] = category
        return category

    def create_category(self, data: CategoryCreate) -> Category:
        now = utcnow()
        category = Category(
            id=str(uuid.uuid4()),
            name=data.name,
            parent_id=data.parent_id,
            created_at=now,
            updated_at=now,
        )
        return self.add_category(category)

    def update_category(self, category_id: str, update: CategoryUpdate) -> Optional[Category]:
        """Apply name/parent changes; an explicit null parent moves the category to the root"""
        category = self.get_category(category_id)
        if not category:
            return None

        fields = update.model_fields_set
        if "name" in fields and update.name is not None:
            category.name = update.name
        if "parent_id" in fields:
            category.parent_id = update.parent_id

        category.updated_at = utcnow()
        return category

    def delete_category(self, category_id: str) -> Optional[Category]:
        return self.categories.pop(category_id, None)

    def build_tree(self) -> list[CategoryWithChildren]:
        """
        Nest categories under their parents.

        Roots are categories without a parent. Categories whose parent no
        longer exists are left out of the tree.
        """
        nodes = {
            category.id: CategoryWithChildren(**category.model_dump(), children=[])
            for category in self.categories.values()
        }

        roots: list[CategoryWithChildren] = []
        for node in nodes.values():
            if node.parent_id is None:
                roots.append(node)
            else:
                parent = nodes.get(node.parent_id)
                if parent:
                    parent.children.append(node)

        return roots

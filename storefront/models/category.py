"""Category models for the storefront"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .common import ApiModel


class Category(ApiModel):
    """Catalog category; parent_id links categories into a tree"""
    id: str
    name: str
    parent_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class CategoryWithChildren(Category):
    children: list["CategoryWithChildren"] = []


class CategoryCreate(ApiModel):
    name: str = Field(min_length=1)
    parent_id: Optional[str] = None


class CategoryUpdate(ApiModel):
    name: Optional[str] = Field(default=None, min_length=1)
    parent_id: Optional[str] = None

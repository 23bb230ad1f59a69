"""Product models for the storefront"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .common import ApiModel, Pagination


class Product(ApiModel):
    """Product in the catalog"""
    id: str
    name: str
    description: str = ""
    price: float = Field(ge=0)
    stock: int = Field(ge=0)
    category_id: Optional[str] = None
    image_urls: list[str] = []
    created_at: datetime
    updated_at: datetime


class ProductCreate(ApiModel):
    """Request to create a product"""
    name: str = Field(min_length=1)
    description: str = ""
    price: float = Field(ge=0)
    stock: int = Field(default=0, ge=0)
    category_id: Optional[str] = None
    image_urls: list[str] = []


class ProductUpdate(ApiModel):
    """Patchable product fields; omitted fields are left unchanged"""
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)
    stock: Optional[int] = Field(default=None, ge=0)
    category_id: Optional[str] = None
    image_urls: Optional[list[str]] = None


class ProductListResponse(Pagination):
    """Response from product search"""
    products: list[Product]

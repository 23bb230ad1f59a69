"""User models for the storefront"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .common import Address, ApiModel


class User(ApiModel):
    """Registered shopper"""
    id: str
    email: str
    name: str
    address: Optional[Address] = None
    created_at: datetime
    updated_at: datetime


class UserCreate(ApiModel):
    email: str = Field(min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    name: str = Field(min_length=1)
    address: Optional[Address] = None


class UserUpdate(ApiModel):
    email: Optional[str] = Field(default=None, min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    name: Optional[str] = Field(default=None, min_length=1)
    address: Optional[Address] = None

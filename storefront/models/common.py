"""Shared model plumbing for the storefront API"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ApiModel(BaseModel):
    """Base model: camelCase on the wire, snake_case in Python"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Address(ApiModel):
    """Postal address used for users and order shipping"""
    street: str
    city: str
    state: str
    postal_code: str
    country: str = "US"


class HealthResponse(ApiModel):
    status: str = "ok"
    service: str


class Pagination(ApiModel):
    """Pagination envelope fields shared by list responses"""
    total: int
    limit: int
    offset: int


def paginate(items: list, limit: int, offset: int) -> list:
    return items[offset : offset + limit]



# Core modules

from .config import Settings, get_settings
from .errors import (
    ApiError,
    BadRequestError,
    EmptyCartError,
    ErrorCode,
    InsufficientStockError,
    InvalidStateTransitionError,
    NotFoundError,
    UnauthorizedError,
)

__all__ = [
    "Settings",
    "get_settings",
    "ApiError",
    "BadRequestError",
    "EmptyCartError",
    "ErrorCode",
    "InsufficientStockError",
    "InvalidStateTransitionError",
    "NotFoundError",
    "UnauthorizedError",
]

"""
API error taxonomy.

Services raise these; the exception handlers registered by the app factory
render them as ``{"error": {"code", "message", "details"}}`` bodies with the
status code carried by the error.
"""

import logging
from enum import Enum
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ErrorCode(str, Enum):
    BAD_REQUEST = "BAD_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    NOT_FOUND = "NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    EMPTY_CART = "EMPTY_CART"
    INSUFFICIENT_STOCK = "INSUFFICIENT_STOCK"
    INVALID_STATE_TRANSITION = "INVALID_STATE_TRANSITION"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ApiError(Exception):
    """Base class for errors surfaced to API clients"""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        status_code: int,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        error: dict[str, Any] = {"code": self.code.value, "message": self.message}
        if self.details is not None:
            error["details"] = self.details
        return {"error": error}


class NotFoundError(ApiError):
    def __init__(self, entity: str, entity_id: Optional[str] = None):
        message = f"{entity.capitalize()} not found"
        if entity_id is not None:
            message = f"{entity.capitalize()} {entity_id} not found"
        super().__init__(
            ErrorCode.NOT_FOUND,
            message,
            404,
            {"entity": entity, "id": entity_id} if entity_id is not None else {"entity": entity},
        )
        self.entity = entity
        self.entity_id = entity_id


class EmptyCartError(ApiError):
    def __init__(self, user_id: str):
        super().__init__(ErrorCode.EMPTY_CART, "Cart is empty", 400, {"userId": user_id})
        self.user_id = user_id


class InsufficientStockError(ApiError):
    def __init__(self, product_id: str, product_name: str, available: int, requested: int):
        super().__init__(
            ErrorCode.INSUFFICIENT_STOCK,
            f"Insufficient stock for product {product_name}. Available: {available}",
            400,
            {"productId": product_id, "available": available, "requested": requested},
        )
        self.product_id = product_id
        self.available = available
        self.requested = requested


class InvalidStateTransitionError(ApiError):
    def __init__(self, from_status: str, to_status: str):
        super().__init__(
            ErrorCode.INVALID_STATE_TRANSITION,
            f"Cannot transition from {from_status} to {to_status}",
            400,
            {"from": from_status, "to": to_status},
        )
        self.from_status = from_status
        self.to_status = to_status


class UnauthorizedError(ApiError):
    def __init__(self, message: str = "Unauthorized"):
        super().__init__(ErrorCode.UNAUTHORIZED, message, 401)


class BadRequestError(ApiError):
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(ErrorCode.BAD_REQUEST, message, 400, details)


def register_exception_handlers(app: FastAPI, debug: bool = False) -> None:
    """Attach the JSON error renderers to an application"""

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=headers)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = [
            {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
            for err in exc.errors()
        ]
        return JSONResponse(
            status_code=400,
            content={
                "error": {
                    "code": ErrorCode.VALIDATION_ERROR.value,
                    "message": "Validation failed",
                    "details": errors,
                }
            },
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        error: dict[str, Any] = {
            "code": ErrorCode.INTERNAL_ERROR.value,
            "message": "An unexpected error occurred",
        }
        if debug:
            error["details"] = str(exc)
        return JSONResponse(status_code=500, content={"error": error})

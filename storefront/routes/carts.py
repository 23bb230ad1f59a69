"""Cart API routes"""

from fastapi import APIRouter, Depends, Response

from ..dependencies import get_cart_service
from ..models.cart import AddToCartRequest, Cart, UpdateCartItemRequest
from ..security.auth import require_auth
from ..services.carts import CartService

router = APIRouter(prefix="/carts", tags=["Cart"], dependencies=[Depends(require_auth)])


@router.get("/users/{user_id}", response_model=Cart)
async def get_cart(user_id: str, carts: CartService = Depends(get_cart_service)):
    """Get a user's cart"""
    return carts.get_cart(user_id)


@router.post("/users/{user_id}/items", response_model=Cart)
async def add_to_cart(
    user_id: str,
    request: AddToCartRequest,
    carts: CartService = Depends(get_cart_service),
):
    """Add an item to the cart"""
    return carts.add_item(user_id, request.product_id, request.quantity)


@router.patch("/users/{user_id}/items/{product_id}", response_model=Cart)
async def update_cart_item(
    user_id: str,
    product_id: str,
    request: UpdateCartItemRequest,
    carts: CartService = Depends(get_cart_service),
):
    """Update item quantity in cart"""
    return carts.update_item(user_id, product_id, request.quantity)


@router.delete("/users/{user_id}/items/{product_id}", status_code=204, response_class=Response)
async def remove_from_cart(
    user_id: str,
    product_id: str,
    carts: CartService = Depends(get_cart_service),
):
    """Remove an item from the cart"""
    carts.remove_item(user_id, product_id)
    return Response(status_code=204)


@router.delete("/users/{user_id}/items", status_code=204, response_class=Response)
async def clear_cart(user_id: str, carts: CartService = Depends(get_cart_service)):
    """Clear all items from cart"""
    carts.clear(user_id)
    return Response(status_code=204)

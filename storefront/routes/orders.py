"""Order API routes"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from ..core.errors import NotFoundError
from ..database.store import DataStore
from ..dependencies import get_order_workflow, get_store
from ..models.common import paginate
from ..models.order import (
    Order,
    OrderCreateRequest,
    OrderListResponse,
    OrderStatus,
    OrderStatusUpdateRequest,
)
from ..security.auth import require_auth
from ..services.orders import OrderWorkflow

router = APIRouter(prefix="/orders", tags=["Orders"], dependencies=[Depends(require_auth)])


@router.get("", response_model=OrderListResponse)
async def list_orders(
    user_id: Optional[str] = Query(None, alias="userId"),
    status: Optional[OrderStatus] = Query(None),
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    store: DataStore = Depends(get_store),
):
    """List orders, newest first"""
    orders = store.orders.list_orders(user_id=user_id, status=status)
    return OrderListResponse(
        orders=paginate(orders, limit, offset),
        total=len(orders),
        limit=limit,
        offset=offset,
    )


@router.get("/users/{user_id}", response_model=OrderListResponse)
async def list_user_orders(
    user_id: str,
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    store: DataStore = Depends(get_store),
):
    """List a user's orders, newest first"""
    orders = store.orders.get_orders_by_user(user_id)
    return OrderListResponse(
        orders=paginate(orders, limit, offset),
        total=len(orders),
        limit=limit,
        offset=offset,
    )


@router.get("/{order_id}", response_model=Order)
async def get_order(order_id: str, store: DataStore = Depends(get_store)):
    """Get order details"""
    order = store.orders.get_order(order_id)
    if not order:
        raise NotFoundError("order", order_id)
    return order


@router.post("", response_model=Order, status_code=201)
async def create_order(
    request: OrderCreateRequest,
    workflow: OrderWorkflow = Depends(get_order_workflow),
):
    """
    Place an order from the user's cart.

    Stock for every line is checked before anything is written; on success
    the stock is decremented and the cart emptied.
    """
    return workflow.place_order(request.user_id, request.shipping_address)


@router.patch("/{order_id}/status", response_model=Order)
async def update_order_status(
    order_id: str,
    request: OrderStatusUpdateRequest,
    workflow: OrderWorkflow = Depends(get_order_workflow),
):
    """Move an order along its status lifecycle"""
    return workflow.update_status(order_id, request.status)

"""User API routes"""

import logging

from fastapi import APIRouter, Depends, Response

from ..core.errors import NotFoundError
from ..database.store import DataStore
from ..dependencies import get_store
from ..models.user import User, UserCreate, UserUpdate
from ..security.auth import require_auth

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["Users"], dependencies=[Depends(require_auth)])


@router.get("", response_model=list[User])
async def list_users(store: DataStore = Depends(get_store)):
    """List all users"""
    return store.users.get_all_users()


@router.get("/{user_id}", response_model=User)
async def get_user(user_id: str, store: DataStore = Depends(get_store)):
    user = store.users.get_user(user_id)
    if not user:
        raise NotFoundError("user", user_id)
    return user


@router.post("", response_model=User, status_code=201)
async def create_user(request: UserCreate, store: DataStore = Depends(get_store)):
    """Register a user along with an empty cart"""
    with store.lock:
        user = store.users.create_user(request)
        store.carts.create_cart(user.id)
    logger.info(f"User {user.id} created")
    return user


@router.put("/{user_id}", response_model=User)
async def update_user(
    user_id: str,
    request: UserUpdate,
    store: DataStore = Depends(get_store),
):
    with store.lock:
        user = store.users.update_user(user_id, request)
    if not user:
        raise NotFoundError("user", user_id)
    return user


@router.delete("/{user_id}", status_code=204, response_class=Response)
async def delete_user(user_id: str, store: DataStore = Depends(get_store)):
    """Delete a user and their cart; placed orders are kept"""
    with store.lock:
        deleted = store.users.delete_user(user_id)
        if deleted:
            store.carts.delete_cart(user_id)
    if not deleted:
        raise NotFoundError("user", user_id)
    return Response(status_code=204)

"""Category API routes"""

from fastapi import APIRouter, Depends, Response

from ..core.errors import NotFoundError
from ..database.store import DataStore
from ..dependencies import get_store
from ..models.category import Category, CategoryCreate, CategoryUpdate, CategoryWithChildren

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get("", response_model=list[Category])
async def list_categories(store: DataStore = Depends(get_store)):
    """List all categories"""
    return store.categories.get_all_categories()


@router.get("/tree", response_model=list[CategoryWithChildren])
async def category_tree(store: DataStore = Depends(get_store)):
    """Categories nested under their parents"""
    return store.categories.build_tree()


@router.get("/{category_id}", response_model=Category)
async def get_category(category_id: str, store: DataStore = Depends(get_store)):
    category = store.categories.get_category(category_id)
    if not category:
        raise NotFoundError("category", category_id)
    return category


@router.post("", response_model=Category, status_code=201)
async def create_category(request: CategoryCreate, store: DataStore = Depends(get_store)):
    with store.lock:
        return store.categories.create_category(request)


@router.put("/{category_id}", response_model=Category)
async def update_category(
    category_id: str,
    request: CategoryUpdate,
    store: DataStore = Depends(get_store),
):
    with store.lock:
        category = store.categories.update_category(category_id, request)
    if not category:
        raise NotFoundError("category", category_id)
    return category


@router.delete("/{category_id}", status_code=204, response_class=Response)
async def delete_category(category_id: str, store: DataStore = Depends(get_store)):
    with store.lock:
        deleted = store.categories.delete_category(category_id)
    if not deleted:
        raise NotFoundError("category", category_id)
    return Response(status_code=204)

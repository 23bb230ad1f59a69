"""Product API routes"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response

from ..core.errors import NotFoundError
from ..database.store import DataStore
from ..dependencies import get_store
from ..models.common import paginate
from ..models.product import Product, ProductCreate, ProductListResponse, ProductUpdate

router = APIRouter(prefix="/products", tags=["Products"])


@router.get("", response_model=ProductListResponse)
async def list_products(
    search: Optional[str] = Query(None, description="Search name and description"),
    category_id: Optional[str] = Query(None, alias="categoryId", description="Filter by category"),
    min_price: Optional[float] = Query(None, alias="minPrice", ge=0, description="Minimum price"),
    max_price: Optional[float] = Query(None, alias="maxPrice", ge=0, description="Maximum price"),
    limit: int = Query(10, ge=1, le=100, description="Max results"),
    offset: int = Query(0, ge=0, description="Offset for pagination"),
    store: DataStore = Depends(get_store),
):
    """Search products in the catalog"""
    products = store.products.search_products(
        search=search,
        category_id=category_id,
        min_price=min_price,
        max_price=max_price,
    )

    return ProductListResponse(
        products=paginate(products, limit, offset),
        total=len(products),
        limit=limit,
        offset=offset,
    )


@router.get("/{product_id}", response_model=Product)
async def get_product(product_id: str, store: DataStore = Depends(get_store)):
    """Get a product by ID"""
    product = store.products.get_product(product_id)
    if not product:
        raise NotFoundError("product", product_id)
    return product


@router.post("", response_model=Product, status_code=201)
async def create_product(request: ProductCreate, store: DataStore = Depends(get_store)):
    """Add a product to the catalog"""
    with store.lock:
        return store.products.create_product(request)


@router.put("/{product_id}", response_model=Product)
async def update_product(
    product_id: str,
    request: ProductUpdate,
    store: DataStore = Depends(get_store),
):
    """Update a product; omitted fields are left unchanged"""
    with store.lock:
        product = store.products.update_product(product_id, request)
    if not product:
        raise NotFoundError("product", product_id)
    return product


@router.delete("/{product_id}", status_code=204, response_class=Response)
async def delete_product(product_id: str, store: DataStore = Depends(get_store)):
    """Remove a product from the catalog"""
    with store.lock:
        deleted = store.products.delete_product(product_id)
    if not deleted:
        raise NotFoundError("product", product_id)
    return Response(status_code=204)

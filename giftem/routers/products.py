from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query

from giftem.dependencies import get_product_service
from giftem.models.api.products import ProductCategory, ProductResponse
from giftem.services.product_service import ProductService

router = APIRouter()


@router.get("", response_model=List[ProductResponse])
async def list_products(
    q: Optional[str] = Query(
        None, description="Search name, description and tags (case-insensitive)"
    ),
    category: Optional[ProductCategory] = Query(
        None, description="Filter by category"
    ),
    limit: Optional[int] = Query(
        50, description="Maximum number of products to return", ge=1, le=1000
    ),
    offset: Optional[int] = Query(0, description="Number of products to skip", ge=0),
    service: ProductService = Depends(get_product_service),
) -> List[ProductResponse]:
    """
    List catalog products with optional filtering.

    Query parameters:
    - q: Substring to search for
    - category: Category name, e.g. "Electronics"
    - limit: Maximum number of products to return (default: 50, max: 1000)
    - offset: Number of products to skip (default: 0)
    """
    try:
        return service.list_products(
            query=q, category=category, limit=limit, offset=offset
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: UUID, service: ProductService = Depends(get_product_service)
) -> ProductResponse:
    product = service.get_product(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return product

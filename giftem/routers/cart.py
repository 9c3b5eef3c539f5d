from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from giftem.dependencies import get_cart_service, get_product_service
from giftem.models.api.cart import (
    AddToCartRequest,
    AddToWishlistRequest,
    CartItemResponse,
    CartResponse,
    UpdateQuantityRequest,
    WishlistItemResponse,
)
from giftem.services.cart_service import CartService
from giftem.services.product_service import ProductService

router = APIRouter()


def _cart_response(service: CartService) -> CartResponse:
    return CartResponse(items=service.get_cart_items(), total_price=service.total_price)


@router.get("", response_model=CartResponse)
async def get_cart(service: CartService = Depends(get_cart_service)) -> CartResponse:
    """Get the cart lines and their total price."""
    return _cart_response(service)


@router.post("/items", response_model=CartItemResponse)
async def add_to_cart(
    request: AddToCartRequest,
    service: CartService = Depends(get_cart_service),
    product_service: ProductService = Depends(get_product_service),
) -> CartItemResponse:
    """Add units of a product to the cart."""
    if product_service.get_product(request.product_id) is None:
        raise HTTPException(status_code=404, detail="Product not found")
    try:
        return await service.add_to_cart(
            product_id=request.product_id,
            quantity=request.quantity,
            is_for_gift=request.is_for_gift,
            gift_recipient_id=request.gift_recipient_id,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.patch("/items/{item_id}", response_model=CartResponse)
async def update_quantity(
    item_id: UUID,
    request: UpdateQuantityRequest,
    service: CartService = Depends(get_cart_service),
) -> CartResponse:
    """Set a line's quantity; 0 or less removes the line."""
    await service.update_quantity(item_id, request.quantity)
    return _cart_response(service)


@router.delete("/items/{item_id}", response_model=CartResponse)
async def remove_from_cart(
    item_id: UUID, service: CartService = Depends(get_cart_service)
) -> CartResponse:
    await service.remove_from_cart(item_id)
    return _cart_response(service)


@router.get("/wishlist", response_model=List[WishlistItemResponse])
async def get_wishlist(
    service: CartService = Depends(get_cart_service),
) -> List[WishlistItemResponse]:
    return service.get_wishlist()


@router.post("/wishlist", response_model=WishlistItemResponse)
async def add_to_wishlist(
    request: AddToWishlistRequest,
    service: CartService = Depends(get_cart_service),
    product_service: ProductService = Depends(get_product_service),
) -> WishlistItemResponse:
    if product_service.get_product(request.product_id) is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return await service.add_to_wishlist(request.product_id)


@router.delete("/wishlist/{product_id}", response_model=List[WishlistItemResponse])
async def remove_from_wishlist(
    product_id: UUID, service: CartService = Depends(get_cart_service)
) -> List[WishlistItemResponse]:
    await service.remove_from_wishlist(product_id)
    return service.get_wishlist()

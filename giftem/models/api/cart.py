from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class AddToCartRequest(BaseModel):
    """Request model for adding a product to the cart."""

    product_id: UUID
    quantity: int = Field(1, description="Number of units to add")
    is_for_gift: bool = False
    gift_recipient_id: Optional[UUID] = Field(
        default=None, description="User the item is bought for"
    )


class UpdateQuantityRequest(BaseModel):
    quantity: int = Field(..., description="New quantity; 0 or less removes the line")


class AddToWishlistRequest(BaseModel):
    product_id: UUID


class CartItemResponse(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    product_id: UUID
    quantity: int = 1
    is_for_gift: bool = False
    gift_recipient_id: Optional[UUID] = None

    model_config = ConfigDict(frozen=True)


class WishlistItemResponse(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    product_id: UUID
    added_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = ConfigDict(frozen=True)


class CartResponse(BaseModel):
    """Response model for the whole cart."""

    items: List[CartItemResponse]
    total_price: float

from typing import Optional
from uuid import UUID

from giftem.models.api.cart import CartItemResponse, WishlistItemResponse
from giftem.repositories.base_repository import BaseRepository


class CartRepository(BaseRepository[CartItemResponse]):
    """Repository for cart lines."""

    def get_line(
        self, product_id: UUID, is_for_gift: bool
    ) -> Optional[CartItemResponse]:
        """Find the line for a product, split by the gift flag."""
        return next(
            (
                item
                for item in self.records
                if item.product_id == product_id and item.is_for_gift == is_for_gift
            ),
            None,
        )


class WishlistRepository(BaseRepository[WishlistItemResponse]):
    """Repository for wishlist entries, at most one per product."""

    def get_by_product_id(self, product_id: UUID) -> Optional[WishlistItemResponse]:
        return next((w for w in self.records if w.product_id == product_id), None)

    def delete_by_product_id(self, product_id: UUID) -> bool:
        before = len(self.records)
        self.records = [w for w in self.records if w.product_id != product_id]
        return len(self.records) != before

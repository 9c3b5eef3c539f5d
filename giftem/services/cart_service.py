import logging
from typing import List, Optional
from uuid import UUID

from giftem.models.api.cart import CartItemResponse, WishlistItemResponse
from giftem.repositories.cart_repository import CartRepository, WishlistRepository
from giftem.repositories.product_repository import ProductRepository
from giftem.repositories.settings_repository import SettingsStore
from giftem.scheduling import Scheduler

logger = logging.getLogger(__name__)

CART_KEY = "cart"
WISHLIST_KEY = "wishlist"


class CartService:
    """Service for the shopping cart and wishlist."""

    def __init__(
        self,
        product_repo: ProductRepository,
        scheduler: Scheduler,
        settings_store: Optional[SettingsStore] = None,
    ):
        self.product_repo = product_repo
        self.scheduler = scheduler
        self.settings_store = settings_store
        self.cart_repo = CartRepository()
        self.wishlist_repo = WishlistRepository()

    async def load(self) -> None:
        if self.settings_store is None:
            return
        cart = await self.settings_store.load(CART_KEY)
        if cart:
            self.cart_repo.replace_all(CartItemResponse.model_validate(i) for i in cart)
        wishlist = await self.settings_store.load(WISHLIST_KEY)
        if wishlist:
            self.wishlist_repo.replace_all(
                WishlistItemResponse.model_validate(i) for i in wishlist
            )
        logger.info(
            "Loaded %d cart lines and %d wishlist items from local mirror",
            len(self.cart_repo),
            len(self.wishlist_repo),
        )

    async def _save_cart(self) -> None:
        if self.settings_store is not None:
            await self.settings_store.save(
                CART_KEY, [i.model_dump(mode="json") for i in self.cart_repo.records]
            )

    async def _save_wishlist(self) -> None:
        if self.settings_store is not None:
            await self.settings_store.save(
                WISHLIST_KEY,
                [i.model_dump(mode="json") for i in self.wishlist_repo.records],
            )

    # Cart

    def get_cart_items(self) -> List[CartItemResponse]:
        return self.cart_repo.get_all()

    @property
    def total_price(self) -> float:
        """Sum of price times quantity over lines whose product still exists."""
        total = 0.0
        for item in self.cart_repo.records:
            product = self.product_repo.get_by_id(item.product_id)
            if product is not None:
                total += product.price * item.quantity
        return round(total, 2)

    async def add_to_cart(
        self,
        product_id: UUID,
        quantity: int = 1,
        is_for_gift: bool = False,
        gift_recipient_id: Optional[UUID] = None,
    ) -> CartItemResponse:
        """Add units of a product, merging into the line with the same gift flag."""
        if quantity <= 0:
            raise ValueError("Quantity must be positive")

        existing = self.cart_repo.get_line(product_id, is_for_gift)
        if existing is not None:
            item = existing.model_copy(
                update={"quantity": existing.quantity + quantity}
            )
            self.cart_repo.update(item)
        else:
            item = self.cart_repo.create(
                CartItemResponse(
                    product_id=product_id,
                    quantity=quantity,
                    is_for_gift=is_for_gift,
                    gift_recipient_id=gift_recipient_id,
                )
            )

        await self._save_cart()
        return item

    async def remove_from_cart(self, item_id: UUID) -> None:
        if self.cart_repo.delete(item_id):
            await self._save_cart()

    async def update_quantity(self, item_id: UUID, quantity: int) -> None:
        item = self.cart_repo.get_by_id(item_id)
        if item is None:
            return
        if quantity > 0:
            self.cart_repo.update(item.model_copy(update={"quantity": quantity}))
            await self._save_cart()
        else:
            await self.remove_from_cart(item_id)

    # Wishlist

    def get_wishlist(self) -> List[WishlistItemResponse]:
        return self.wishlist_repo.get_all()

    def is_in_wishlist(self, product_id: UUID) -> bool:
        return self.wishlist_repo.get_by_product_id(product_id) is not None

    async def add_to_wishlist(self, product_id: UUID) -> WishlistItemResponse:
        existing = self.wishlist_repo.get_by_product_id(product_id)
        if existing is not None:
            return existing
        item = self.wishlist_repo.create(
            WishlistItemResponse(product_id=product_id, added_at=self.scheduler.now())
        )
        await self._save_wishlist()
        return item

    async def remove_from_wishlist(self, product_id: UUID) -> None:
        if self.wishlist_repo.delete_by_product_id(product_id):
            await self._save_wishlist()

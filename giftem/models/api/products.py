from enum import Enum
from typing import List, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, computed_field


class ProductCategory(str, Enum):
    ELECTRONICS = "Electronics"
    FASHION = "Fashion"
    HOME = "Home & Living"
    BEAUTY = "Beauty"
    SPORTS = "Sports & Outdoors"
    BOOKS = "Books"
    TOYS = "Toys & Games"
    FOOD = "Food & Beverage"
    OTHER = "Other"


class ProductResponse(BaseModel):
    """Catalog entry."""

    id: UUID = Field(default_factory=uuid4)
    name: str
    description: str
    price: float
    original_price: Optional[float] = None
    currency: str = "USD"
    image_urls: List[str] = Field(default_factory=list)
    category: ProductCategory
    seller_id: str
    rating: float = 0.0
    review_count: int = 0
    is_available: bool = True
    tags: List[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def discount_percentage(self) -> Optional[int]:
        if self.original_price is None or self.original_price <= self.price:
            return None
        return int((self.original_price - self.price) / self.original_price * 100)

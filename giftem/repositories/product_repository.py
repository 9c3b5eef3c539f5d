from typing import List

from giftem.models.api.products import ProductCategory, ProductResponse
from giftem.repositories.base_repository import BaseRepository


class ProductRepository(BaseRepository[ProductResponse]):
    """Repository for catalog operations."""

    def search(self, query: str) -> List[ProductResponse]:
        """Case-insensitive substring match on name, description and tags."""
        if not query:
            return list(self.records)
        needle = query.casefold()
        return [
            product
            for product in self.records
            if needle in product.name.casefold()
            or needle in product.description.casefold()
            or any(needle in tag.casefold() for tag in product.tags)
        ]

    def get_by_category(self, category: ProductCategory) -> List[ProductResponse]:
        return [p for p in self.records if p.category == category]

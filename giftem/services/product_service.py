from typing import List, Optional
from uuid import UUID

from giftem.models.api.products import ProductCategory, ProductResponse
from giftem.repositories.product_repository import ProductRepository


class ProductService:
    """Service for browsing and searching the catalog."""

    def __init__(self, product_repo: ProductRepository):
        self.product_repo = product_repo

    def list_products(
        self,
        query: Optional[str] = None,
        category: Optional[ProductCategory] = None,
        limit: Optional[int] = 50,
        offset: Optional[int] = 0,
    ) -> List[ProductResponse]:
        """
        List products with optional filtering:

        1. Substring search over name, description and tags
        2. Narrow to one category if provided
        3. Apply pagination
        """
        # Validate parameters
        if limit is not None and (limit <= 0 or limit > 1000):
            raise ValueError("Limit must be between 1 and 1000")
        if offset is not None and offset < 0:
            raise ValueError("Offset must be non-negative")

        # Use default values if None
        limit = limit or 50
        offset = offset or 0

        products = self.product_repo.search(query or "")
        if category is not None:
            products = [p for p in products if p.category == category]

        return products[offset : offset + limit]

    def get_product(self, product_id: UUID) -> Optional[ProductResponse]:
        return self.product_repo.get_by_id(product_id)

    def search_products(self, query: str) -> List[ProductResponse]:
        return self.product_repo.search(query)

    def get_products_by_category(
        self, category: ProductCategory
    ) -> List[ProductResponse]:
        return self.product_repo.get_by_category(category)

"""
Product Repository Interface.
Defines specific data access operations for Products.
"""

from typing import List, Optional, Tuple
from datetime import datetime

from app.domain.repositories.base import BaseRepository
from app.domain.models.product import Product
from app.domain.schemas.common import PageRequest
from app.domain.schemas.product import ProductFilter


class ProductRepository(BaseRepository[Product]):
    """Interface for Product-specific operations."""

    def exists_by_name(self, name: str, exclude_id: Optional[int] = None) -> bool:
        """Check whether the product name is taken, optionally ignoring one row."""
        ...

    def find_page_filtered(self, filters: ProductFilter, page_request: PageRequest) -> Tuple[List[Product], int]:
        """Get a page of products matching a name keyword and/or price range."""
        ...

    def update_stock(self, id: int, stock: int, updated_at: datetime) -> int:
        """Set the stock column with a single UPDATE; returns rows affected."""
        ...

    def count_by_category(self, category_id: int) -> int:
        """Count products referencing a category."""
        ...

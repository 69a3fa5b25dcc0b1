"""
SQLAlchemy Implementation of Product Repository.
"""

from typing import List, Optional, Tuple
from datetime import datetime

from sqlalchemy import func, update

from app.domain.models.product import Product
from app.domain.repositories.product_repository import ProductRepository
from app.infrastructure.repositories.base_repository import SQLAlchemyRepository
from app.domain.schemas.common import PageRequest
from app.domain.schemas.product import ProductFilter


class SQLAlchemyProductRepository(SQLAlchemyRepository[Product], ProductRepository):
    """Product repository implementation using SQLAlchemy."""

    def exists_by_name(self, name: str, exclude_id: Optional[int] = None) -> bool:
        criteria = [Product.name == name]
        if exclude_id is not None:
            criteria.append(Product.id != exclude_id)
        return self._exists(*criteria)

    def find_page_filtered(self, filters: ProductFilter, page_request: PageRequest) -> Tuple[List[Product], int]:
        """Get products with filtering and pagination."""
        query = self.db.query(Product)

        if filters.name:
            query = query.filter(Product.name.icontains(filters.name, autoescape=True))
        if filters.min_price is not None:
            query = query.filter(Product.price >= filters.min_price)
        if filters.max_price is not None:
            query = query.filter(Product.price <= filters.max_price)

        return self._paginate(query, page_request)

    def update_stock(self, id: int, stock: int, updated_at: datetime) -> int:
        """Single-column UPDATE; the row is never loaded into the session."""
        result = self.db.execute(
            update(Product)
            .where(Product.id == id)
            .values(stock=stock, updated_at=updated_at)
            .execution_options(synchronize_session=False)
        )
        self._commit()
        return result.rowcount

    def count_by_category(self, category_id: int) -> int:
        return (
            self.db.query(func.count(Product.id))
            .filter(Product.category_id == category_id)
            .scalar()
            or 0
        )

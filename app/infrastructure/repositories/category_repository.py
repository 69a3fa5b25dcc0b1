"""
SQLAlchemy Implementation of Category Repository.
"""

from typing import Optional

from app.domain.models.category import Category
from app.domain.repositories.category_repository import CategoryRepository
from app.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyCategoryRepository(SQLAlchemyRepository[Category], CategoryRepository):
    """Category repository implementation using SQLAlchemy."""

    def exists_by_name(self, name: str, exclude_id: Optional[int] = None) -> bool:
        criteria = [Category.name == name]
        if exclude_id is not None:
            criteria.append(Category.id != exclude_id)
        return self._exists(*criteria)

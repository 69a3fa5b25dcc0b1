"""
Category Repository Interface.
Defines specific data access operations for Categories.
"""

from typing import Optional

from app.domain.repositories.base import BaseRepository
from app.domain.models.category import Category


class CategoryRepository(BaseRepository[Category]):
    """Interface for Category-specific operations."""

    def exists_by_name(self, name: str, exclude_id: Optional[int] = None) -> bool:
        """Check whether the category name is taken, optionally ignoring one row."""
        ...

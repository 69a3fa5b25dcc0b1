"""
Base Repository Interface.
Defines the standard contract for data access operations.
"""

from typing import List, Optional, Protocol, Tuple, TypeVar

from app.domain.schemas.common import PageRequest

T = TypeVar("T")


class BaseRepository(Protocol[T]):
    """Interface for generic CRUD operations."""

    def get_by_id(self, id: int) -> Optional[T]:
        """Get a single entity by ID."""
        ...

    def exists_by_id(self, id: int) -> bool:
        """Check whether a row with this ID exists."""
        ...

    def find_page(self, page_request: PageRequest) -> Tuple[List[T], int]:
        """Get one sorted page of entities plus the total row count."""
        ...

    def save(self, entity: T) -> T:
        """Insert or update an entity and commit."""
        ...

    def delete(self, entity: T) -> None:
        """Delete an entity and commit."""
        ...

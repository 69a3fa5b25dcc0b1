"""
User Repository Interface.
Defines specific data access operations for Users.
"""

from typing import Optional

from app.domain.repositories.base import BaseRepository
from app.domain.models.user import User


class UserRepository(BaseRepository[User]):
    """Interface for User-specific operations."""

    def find_by_username(self, username: str) -> Optional[User]:
        ...

    def find_by_email(self, email: str) -> Optional[User]:
        ...

    def exists_by_username(self, username: str, exclude_id: Optional[int] = None) -> bool:
        """Check whether the username is taken, optionally ignoring one row."""
        ...

    def exists_by_email(self, email: str, exclude_id: Optional[int] = None) -> bool:
        """Check whether the email is taken, optionally ignoring one row."""
        ...

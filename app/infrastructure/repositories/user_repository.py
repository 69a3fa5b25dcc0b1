"""
SQLAlchemy Implementation of User Repository.
"""

from typing import Optional

from sqlalchemy import func

from app.domain.models.user import User
from app.domain.repositories.user_repository import UserRepository
from app.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyUserRepository(SQLAlchemyRepository[User], UserRepository):
    """User repository implementation using SQLAlchemy.

    E-mail addresses are matched case-insensitively for both lookup and
    uniqueness checks.
    """

    def find_by_username(self, username: str) -> Optional[User]:
        return self.db.query(User).filter(User.username == username).first()

    def find_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(func.lower(User.email) == email.lower()).first()

    def exists_by_username(self, username: str, exclude_id: Optional[int] = None) -> bool:
        criteria = [User.username == username]
        if exclude_id is not None:
            criteria.append(User.id != exclude_id)
        return self._exists(*criteria)

    def exists_by_email(self, email: str, exclude_id: Optional[int] = None) -> bool:
        criteria = [func.lower(User.email) == email.lower()]
        if exclude_id is not None:
            criteria.append(User.id != exclude_id)
        return self._exists(*criteria)

"""
API Dependencies.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from app.infrastructure.database import get_db
from app.domain.models.category import Category
from app.domain.models.product import Product
from app.domain.models.user import User
from app.domain.repositories.category_repository import CategoryRepository
from app.domain.repositories.product_repository import ProductRepository
from app.domain.repositories.user_repository import UserRepository
from app.infrastructure.repositories.category_repository import SQLAlchemyCategoryRepository
from app.infrastructure.repositories.product_repository import SQLAlchemyProductRepository
from app.infrastructure.repositories.user_repository import SQLAlchemyUserRepository


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    """Get user repository instance."""
    return SQLAlchemyUserRepository(db, User)


def get_product_repository(db: Session = Depends(get_db)) -> ProductRepository:
    """Get product repository instance."""
    return SQLAlchemyProductRepository(db, Product)


def get_category_repository(db: Session = Depends(get_db)) -> CategoryRepository:
    """Get category repository instance."""
    return SQLAlchemyCategoryRepository(db, Category)

"""
SQLAlchemy implementation of the Base Repository.
"""

from typing import Generic, List, Optional, Tuple, Type, TypeVar

from sqlalchemy import exists
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.domain.repositories.base import BaseRepository
from app.domain.schemas.common import PageRequest
from app.infrastructure.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class SQLAlchemyRepository(BaseRepository[ModelType], Generic[ModelType]):
    """Generic repository implementation for SQLAlchemy models."""

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def get_by_id(self, id: int) -> Optional[ModelType]:
        return self.db.get(self.model, id)

    def exists_by_id(self, id: int) -> bool:
        return self.db.query(exists().where(self.model.id == id)).scalar()

    def find_page(self, page_request: PageRequest) -> Tuple[List[ModelType], int]:
        return self._paginate(self.db.query(self.model), page_request)

    def save(self, entity: ModelType) -> ModelType:
        self.db.add(entity)
        self._commit()
        self.db.refresh(entity)
        return entity

    def delete(self, entity: ModelType) -> None:
        self.db.delete(entity)
        self._commit()

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise

    def _paginate(self, query, page_request: PageRequest) -> Tuple[List[ModelType], int]:
        total = query.count()
        column = getattr(self.model, page_request.sort_field)
        order = column.desc() if page_request.descending else column.asc()
        items = (
            query.order_by(order)
            .offset(page_request.page * page_request.size)
            .limit(page_request.size)
            .all()
        )
        return items, total

    def _exists(self, *criteria) -> bool:
        return self.db.query(exists().where(*criteria)).scalar()

"""Category domain model — maps to the 'categories' table."""

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), unique=True, nullable=False, index=True)
    description = Column(String(500), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    products = relationship("Product", back_populates="category", lazy="noload")

    def __repr__(self):
        return f"<Category {self.id} - {self.name}>"

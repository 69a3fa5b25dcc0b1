"""Pydantic schemas for the Product and Category domain."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field, model_validator

from app.domain.schemas.common import CamelModel, Money, non_blank


class CategoryRequest(CamelModel):
    name: non_blank(2, 100)
    description: Optional[str] = Field(default=None, max_length=500)


class CategoryResponse(CamelModel):
    id: int
    name: str
    description: Optional[str] = None


class ProductRequest(CamelModel):
    name: non_blank(max_length=150)
    description: Optional[str] = Field(default=None, max_length=500)
    price: Decimal = Field(gt=0, max_digits=10, decimal_places=2)
    stock: int = Field(ge=0)
    category_id: int


class ProductStockRequest(CamelModel):
    stock: int = Field(ge=0)


class ProductResponse(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    price: Money
    stock: int
    category: CategoryResponse
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProductFilter(CamelModel):
    name: Optional[str] = None
    min_price: Optional[Decimal] = Field(default=None, ge=0)
    max_price: Optional[Decimal] = Field(default=None, ge=0)

    @model_validator(mode="after")
    def check_price_range(self) -> "ProductFilter":
        if self.min_price is not None and self.max_price is not None and self.min_price > self.max_price:
            raise ValueError("minPrice must not exceed maxPrice")
        return self

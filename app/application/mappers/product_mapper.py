"""Translation between Product/Category entities and their DTOs."""

from datetime import datetime

from app.domain.models.category import Category
from app.domain.models.product import Product
from app.domain.schemas.product import (
    CategoryRequest,
    CategoryResponse,
    ProductRequest,
    ProductResponse,
)


def to_category_response(category: Category) -> CategoryResponse:
    return CategoryResponse.model_validate(category)


def to_product_response(product: Product) -> ProductResponse:
    return ProductResponse.model_validate(product)


def from_category_request(request: CategoryRequest, now: datetime) -> Category:
    return Category(
        name=request.name,
        description=request.description,
        created_at=now,
        updated_at=now,
    )


def apply_category_request(category: Category, request: CategoryRequest, now: datetime) -> Category:
    category.name = request.name
    category.description = request.description
    category.updated_at = now
    return category


def from_product_request(request: ProductRequest, category: Category, now: datetime) -> Product:
    return Product(
        name=request.name,
        description=request.description,
        price=request.price,
        stock=request.stock,
        category=category,
        created_at=now,
        updated_at=now,
    )


def apply_product_request(product: Product, request: ProductRequest, category: Category, now: datetime) -> Product:
    product.name = request.name
    product.description = request.description
    product.price = request.price
    product.stock = request.stock
    product.category = category
    product.updated_at = now
    return product

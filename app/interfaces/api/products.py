"""Products API routes — CRUD, filtered listing and stock updates."""

from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status
from pydantic import ValidationError

from app.core.exceptions import ValidationFailed
from app.interfaces.api.deps import pagination
from app.interfaces.deps import get_category_repository, get_product_repository
from app.domain.repositories.category_repository import CategoryRepository
from app.domain.repositories.product_repository import ProductRepository
from app.domain.schemas.common import Page, PageRequest
from app.domain.schemas.product import ProductFilter, ProductRequest, ProductResponse, ProductStockRequest
from app.application.services import product_service

router = APIRouter(prefix="/api/v1/products", tags=["Products"])

PRODUCT_SORTABLE = ("id", "name", "price", "stock", "created_at", "updated_at")


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create_product(
    body: ProductRequest,
    request: Request,
    response: Response,
    repo: ProductRepository = Depends(get_product_repository),
    category_repo: CategoryRepository = Depends(get_category_repository),
):
    created = product_service.create_product(repo, category_repo, body)
    response.headers["Location"] = str(request.url_for("get_product", product_id=created.id))
    return created


@router.get("", response_model=Page[ProductResponse])
def list_products(
    name: Optional[str] = None,
    min_price: Optional[Decimal] = Query(None, ge=0),
    max_price: Optional[Decimal] = Query(None, ge=0),
    page_request: PageRequest = Depends(pagination(PRODUCT_SORTABLE)),
    repo: ProductRepository = Depends(get_product_repository),
):
    try:
        filters = ProductFilter(name=name, min_price=min_price, max_price=max_price)
    except ValidationError as exc:
        raise ValidationFailed({
            ".".join(str(p) for p in err["loc"]) or "priceRange": err["msg"] for err in exc.errors()
        })
    return product_service.list_products(repo, filters, page_request)


@router.get("/{product_id}", response_model=ProductResponse, name="get_product")
def get_product(product_id: int, repo: ProductRepository = Depends(get_product_repository)):
    return product_service.get_product(repo, product_id)


@router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: int,
    body: ProductRequest,
    repo: ProductRepository = Depends(get_product_repository),
    category_repo: CategoryRepository = Depends(get_category_repository),
):
    return product_service.update_product(repo, category_repo, product_id, body)


@router.patch("/{product_id}/stock", response_model=ProductResponse)
def update_stock(
    product_id: int,
    body: ProductStockRequest,
    repo: ProductRepository = Depends(get_product_repository),
):
    return product_service.update_stock(repo, product_id, body.stock)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(product_id: int, repo: ProductRepository = Depends(get_product_repository)):
    product_service.delete_product(repo, product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

"""Categories API routes — CRUD for product categories."""

from fastapi import APIRouter, Depends, Request, Response, status

from app.interfaces.api.deps import pagination
from app.interfaces.deps import get_category_repository, get_product_repository
from app.domain.repositories.category_repository import CategoryRepository
from app.domain.repositories.product_repository import ProductRepository
from app.domain.schemas.common import Page, PageRequest
from app.domain.schemas.product import CategoryRequest, CategoryResponse
from app.application.services import category_service

router = APIRouter(prefix="/api/v1/categories", tags=["Categories"])

CATEGORY_SORTABLE = ("id", "name", "created_at", "updated_at")


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
def create_category(
    body: CategoryRequest,
    request: Request,
    response: Response,
    repo: CategoryRepository = Depends(get_category_repository),
):
    created = category_service.create_category(repo, body)
    response.headers["Location"] = str(request.url_for("get_category", category_id=created.id))
    return created


@router.get("", response_model=Page[CategoryResponse])
def list_categories(
    page_request: PageRequest = Depends(pagination(CATEGORY_SORTABLE)),
    repo: CategoryRepository = Depends(get_category_repository),
):
    return category_service.list_categories(repo, page_request)


@router.get("/{category_id}", response_model=CategoryResponse, name="get_category")
def get_category(category_id: int, repo: CategoryRepository = Depends(get_category_repository)):
    return category_service.get_category(repo, category_id)


@router.put("/{category_id}", response_model=CategoryResponse)
def update_category(
    category_id: int,
    body: CategoryRequest,
    repo: CategoryRepository = Depends(get_category_repository),
):
    return category_service.update_category(repo, category_id, body)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(
    category_id: int,
    repo: CategoryRepository = Depends(get_category_repository),
    product_repo: ProductRepository = Depends(get_product_repository),
):
    category_service.delete_category(repo, product_repo, category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

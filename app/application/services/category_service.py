"""Category service — create, read, replace and delete categories."""

import structlog

from app.application.mappers import product_mapper
from app.core.clock import get_current_datetime
from app.core.exceptions import CategoryAlreadyExists, CategoryInUse, CategoryNotFound
from app.core.log_codes import LogCode
from app.domain.models.category import Category
from app.domain.repositories.category_repository import CategoryRepository
from app.domain.repositories.product_repository import ProductRepository
from app.domain.schemas.common import Page, PageRequest
from app.domain.schemas.product import CategoryRequest, CategoryResponse

logger = structlog.get_logger(__name__)


def create_category(repo: CategoryRepository, request: CategoryRequest) -> CategoryResponse:
    logger.info("Creating category", name=request.name)
    if repo.exists_by_name(request.name):
        logger.warning("Category rejected - name already exists", code=str(LogCode.CATEGORY_NAME_ALREADY_EXISTS), name=request.name)
        raise CategoryAlreadyExists.for_name()

    category = repo.save(product_mapper.from_category_request(request, get_current_datetime()))
    logger.info("Category created successfully", category_id=category.id)
    return product_mapper.to_category_response(category)


def get_category(repo: CategoryRepository, category_id: int) -> CategoryResponse:
    return product_mapper.to_category_response(load_category(repo, category_id))


def list_categories(repo: CategoryRepository, page_request: PageRequest) -> Page[CategoryResponse]:
    categories, total = repo.find_page(page_request)
    return Page[CategoryResponse].of(
        [product_mapper.to_category_response(c) for c in categories], page_request, total
    )


def update_category(repo: CategoryRepository, category_id: int, request: CategoryRequest) -> CategoryResponse:
    """Full replacement of name and description."""
    logger.info("Updating category", category_id=category_id)
    if repo.exists_by_name(request.name, exclude_id=category_id):
        logger.warning("Update rejected - name already exists", code=str(LogCode.CATEGORY_NAME_ALREADY_EXISTS), name=request.name)
        raise CategoryAlreadyExists.for_name()

    category = load_category(repo, category_id)
    product_mapper.apply_category_request(category, request, get_current_datetime())
    category = repo.save(category)
    logger.info("Category updated successfully", category_id=category_id)
    return product_mapper.to_category_response(category)


def delete_category(repo: CategoryRepository, product_repo: ProductRepository, category_id: int) -> None:
    """Delete a category that no product references any more."""
    logger.info("Deleting category", category_id=category_id)
    category = load_category(repo, category_id)

    in_use = product_repo.count_by_category(category_id)
    if in_use:
        logger.warning("Delete rejected - category in use", code=str(LogCode.CATEGORY_IN_USE), category_id=category_id, products=in_use)
        raise CategoryInUse.for_id(category_id, in_use)

    repo.delete(category)
    logger.info("Category deleted successfully", category_id=category_id)


def load_category(repo: CategoryRepository, category_id: int) -> Category:
    category = repo.get_by_id(category_id)
    if category is None:
        logger.warning("Category not found", code=str(LogCode.CATEGORY_NOT_FOUND), category_id=category_id)
        raise CategoryNotFound.for_id(category_id)
    return category

"""Product service — product CRUD, filtered listing and the stock fast path."""

import structlog

from app.application.mappers import product_mapper
from app.application.services.category_service import load_category
from app.core.clock import get_current_datetime
from app.core.exceptions import ProductAlreadyExists, ProductNotFound
from app.core.log_codes import LogCode
from app.domain.models.product import Product
from app.domain.repositories.category_repository import CategoryRepository
from app.domain.repositories.product_repository import ProductRepository
from app.domain.schemas.common import Page, PageRequest
from app.domain.schemas.product import ProductFilter, ProductRequest, ProductResponse

logger = structlog.get_logger(__name__)


def create_product(
    repo: ProductRepository, category_repo: CategoryRepository, request: ProductRequest
) -> ProductResponse:
    """Create a product under an existing category. Name is checked first."""
    logger.info("Creating product", name=request.name, category_id=request.category_id)

    if repo.exists_by_name(request.name):
        logger.warning("Product rejected - name already exists", code=str(LogCode.PRODUCT_NAME_ALREADY_EXISTS), name=request.name)
        raise ProductAlreadyExists.for_name()
    category = load_category(category_repo, request.category_id)

    product = repo.save(product_mapper.from_product_request(request, category, get_current_datetime()))
    logger.info("Product created successfully", product_id=product.id)
    return product_mapper.to_product_response(product)


def get_product(repo: ProductRepository, product_id: int) -> ProductResponse:
    logger.debug("Looking up product by id", product_id=product_id)
    return product_mapper.to_product_response(_load(repo, product_id))


def list_products(repo: ProductRepository, filters: ProductFilter, page_request: PageRequest) -> Page[ProductResponse]:
    """Get products with optional name keyword and price range, paginated."""
    products, total = repo.find_page_filtered(filters, page_request)
    return Page[ProductResponse].of(
        [product_mapper.to_product_response(p) for p in products], page_request, total
    )


def update_product(
    repo: ProductRepository, category_repo: CategoryRepository, product_id: int, request: ProductRequest
) -> ProductResponse:
    """Full replacement of every product field."""
    logger.info("Updating product", product_id=product_id)

    if repo.exists_by_name(request.name, exclude_id=product_id):
        logger.warning("Update rejected - name already exists", code=str(LogCode.PRODUCT_NAME_ALREADY_EXISTS), name=request.name)
        raise ProductAlreadyExists.for_name()
    product = _load(repo, product_id)
    category = load_category(category_repo, request.category_id)

    product_mapper.apply_product_request(product, request, category, get_current_datetime())
    product = repo.save(product)
    logger.info("Product updated successfully", product_id=product_id)
    return product_mapper.to_product_response(product)


def update_stock(repo: ProductRepository, product_id: int, stock: int) -> ProductResponse:
    """Set the stock through a single UPDATE instead of load-modify-save.

    The affected row count doubles as the existence check.
    """
    logger.info("Updating stock", product_id=product_id, stock=stock)
    affected = repo.update_stock(product_id, stock, get_current_datetime())
    if affected == 0:
        logger.warning("Stock update rejected - product not found", code=str(LogCode.PRODUCT_NOT_FOUND), product_id=product_id)
        raise ProductNotFound.for_id(product_id)
    return product_mapper.to_product_response(_load(repo, product_id))


def delete_product(repo: ProductRepository, product_id: int) -> None:
    logger.info("Deleting product", product_id=product_id)
    if not repo.exists_by_id(product_id):
        logger.warning("Delete rejected - product not found", code=str(LogCode.PRODUCT_NOT_FOUND), product_id=product_id)
        raise ProductNotFound.for_id(product_id)
    repo.delete(_load(repo, product_id))
    logger.info("Product deleted successfully", product_id=product_id)


def _load(repo: ProductRepository, product_id: int) -> Product:
    product = repo.get_by_id(product_id)
    if product is None:
        logger.warning("Product not found", code=str(LogCode.PRODUCT_NOT_FOUND), product_id=product_id)
        raise ProductNotFound.for_id(product_id)
    return product

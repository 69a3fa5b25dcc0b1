"""
Unit tests for the category and product services.
"""
from decimal import Decimal
from unittest.mock import MagicMock, patch

import pytest

from app.application.services import category_service, product_service
from app.core.exceptions import (
    CategoryAlreadyExists,
    CategoryInUse,
    CategoryNotFound,
    ProductAlreadyExists,
    ProductNotFound,
)
from app.domain.models.category import Category
from app.domain.models.product import Product
from app.domain.repositories.category_repository import CategoryRepository
from app.domain.repositories.product_repository import ProductRepository
from app.domain.schemas.common import PageRequest
from app.domain.schemas.product import CategoryRequest, ProductFilter, ProductRequest


def make_category(**overrides) -> Category:
    fields = dict(id=10, name="Books", description="Paper and ink", created_at=None, updated_at=None)
    fields.update(overrides)
    return Category(**fields)


def make_product(category=None, **overrides) -> Product:
    fields = dict(id=1, name="Dune", description="Sci-fi", price=Decimal("19.99"), stock=5,
                  created_at=None, updated_at=None)
    fields.update(overrides)
    product = Product(**fields)
    product.category = category or make_category()
    return product


def product_request(**overrides) -> ProductRequest:
    data = dict(name="Dune", description="Sci-fi", price=Decimal("19.99"), stock=5, category_id=10)
    data.update(overrides)
    return ProductRequest(**data)


def _assign_id(entity):
    if entity.id is None:
        entity.id = 1
    return entity


@pytest.fixture
def product_repo():
    repo = MagicMock(spec=ProductRepository)
    repo.exists_by_name.return_value = False
    repo.save.side_effect = _assign_id
    return repo


@pytest.fixture
def category_repo():
    repo = MagicMock(spec=CategoryRepository)
    repo.exists_by_name.return_value = False
    repo.save.side_effect = _assign_id
    return repo


class TestCategoryService:
    def test_create_category(self, category_repo, clock):
        with patch("app.application.services.category_service.get_current_datetime", return_value=clock[0]):
            result = category_service.create_category(category_repo, CategoryRequest(name="Books"))

        assert result.id == 1
        assert result.name == "Books"
        saved = category_repo.save.call_args.args[0]
        assert saved.created_at == saved.updated_at == clock[0]

    def test_create_duplicate_name(self, category_repo):
        category_repo.exists_by_name.return_value = True

        with pytest.raises(CategoryAlreadyExists):
            category_service.create_category(category_repo, CategoryRequest(name="Books"))

        category_repo.save.assert_not_called()

    def test_update_keeps_own_name(self, category_repo):
        category = make_category()
        category_repo.get_by_id.return_value = category

        result = category_service.update_category(
            category_repo, 10, CategoryRequest(name="Books", description="Updated")
        )

        category_repo.exists_by_name.assert_called_once_with("Books", exclude_id=10)
        assert result.description == "Updated"

    def test_update_not_found(self, category_repo):
        category_repo.get_by_id.return_value = None

        with pytest.raises(CategoryNotFound, match="id : 42"):
            category_service.update_category(category_repo, 42, CategoryRequest(name="Books"))

    def test_delete_referenced_category_is_rejected(self, category_repo, product_repo):
        category_repo.get_by_id.return_value = make_category()
        product_repo.count_by_category.return_value = 3

        with pytest.raises(CategoryInUse) as exc_info:
            category_service.delete_category(category_repo, product_repo, 10)

        assert exc_info.value.details == {"productCount": 3}
        category_repo.delete.assert_not_called()

    def test_delete_unreferenced_category(self, category_repo, product_repo):
        category = make_category()
        category_repo.get_by_id.return_value = category
        product_repo.count_by_category.return_value = 0

        category_service.delete_category(category_repo, product_repo, 10)

        category_repo.delete.assert_called_once_with(category)


class TestProductService:
    def test_create_product(self, product_repo, category_repo):
        category_repo.get_by_id.return_value = make_category()

        result = product_service.create_product(product_repo, category_repo, product_request())

        assert result.id == 1
        assert result.price == Decimal("19.99")
        assert result.category.name == "Books"
        product_repo.save.assert_called_once()

    def test_create_duplicate_name_skips_category_lookup(self, product_repo, category_repo):
        product_repo.exists_by_name.return_value = True

        with pytest.raises(ProductAlreadyExists):
            product_service.create_product(product_repo, category_repo, product_request())

        category_repo.get_by_id.assert_not_called()
        product_repo.save.assert_not_called()

    def test_create_with_unknown_category(self, product_repo, category_repo):
        category_repo.get_by_id.return_value = None

        with pytest.raises(CategoryNotFound):
            product_service.create_product(product_repo, category_repo, product_request(category_id=77))

        product_repo.save.assert_not_called()

    def test_list_products_passes_filters_through(self, product_repo):
        product_repo.find_page_filtered.return_value = ([make_product()], 1)
        filters = ProductFilter(name="dun", max_price=Decimal("50"))
        page_request = PageRequest(page=0, size=5, sort_field="price", descending=True)

        page = product_service.list_products(product_repo, filters, page_request)

        product_repo.find_page_filtered.assert_called_once_with(filters, page_request)
        assert page.total_elements == 1
        assert page.content[0].name == "Dune"

    def test_update_product_excludes_itself_from_name_check(self, product_repo, category_repo):
        product = make_product()
        product_repo.get_by_id.return_value = product
        category_repo.get_by_id.return_value = make_category(id=11, name="Classics")

        result = product_service.update_product(
            product_repo, category_repo, 1, product_request(price=Decimal("25.00"), category_id=11)
        )

        product_repo.exists_by_name.assert_called_once_with("Dune", exclude_id=1)
        assert result.price == Decimal("25.00")
        assert result.category.name == "Classics"

    def test_update_product_not_found(self, product_repo, category_repo):
        product_repo.get_by_id.return_value = None

        with pytest.raises(ProductNotFound):
            product_service.update_product(product_repo, category_repo, 5, product_request())

    def test_update_stock_uses_bulk_update(self, product_repo, clock):
        product_repo.update_stock.return_value = 1
        product_repo.get_by_id.return_value = make_product(stock=42)

        with patch("app.application.services.product_service.get_current_datetime", return_value=clock[4]):
            result = product_service.update_stock(product_repo, 1, 42)

        product_repo.update_stock.assert_called_once_with(1, 42, clock[4])
        product_repo.save.assert_not_called()
        assert result.stock == 42

    def test_update_stock_on_missing_product(self, product_repo):
        product_repo.update_stock.return_value = 0

        with pytest.raises(ProductNotFound, match="id : 404"):
            product_service.update_stock(product_repo, 404, 3)

        product_repo.get_by_id.assert_not_called()

    def test_delete_missing_product(self, product_repo):
        product_repo.exists_by_id.return_value = False

        with pytest.raises(ProductNotFound):
            product_service.delete_product(product_repo, 9)

        product_repo.delete.assert_not_called()

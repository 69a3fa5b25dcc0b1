"""
Repository tests against in-memory SQLite.
"""
from decimal import Decimal

import pytest
from sqlalchemy.exc import IntegrityError

from app.core.clock import get_current_datetime
from app.domain.models.category import Category
from app.domain.models.product import Product
from app.domain.models.user import User, UserRole
from app.domain.schemas.common import PageRequest
from app.domain.schemas.product import ProductFilter
from app.infrastructure.repositories.category_repository import SQLAlchemyCategoryRepository
from app.infrastructure.repositories.product_repository import SQLAlchemyProductRepository
from app.infrastructure.repositories.user_repository import SQLAlchemyUserRepository

pytestmark = pytest.mark.integration


def make_user(username, email, role=UserRole.CUSTOMER) -> User:
    now = get_current_datetime()
    return User(username=username, email=email, password_hash="x", role=role,
                active=True, created_at=now, updated_at=now)


@pytest.fixture
def users(db_session):
    return SQLAlchemyUserRepository(db_session, User)


@pytest.fixture
def products(db_session):
    return SQLAlchemyProductRepository(db_session, Product)


@pytest.fixture
def category(db_session):
    now = get_current_datetime()
    return SQLAlchemyCategoryRepository(db_session, Category).save(
        Category(name="Books", created_at=now, updated_at=now)
    )


def add_product(products, category, name, price, stock=1) -> Product:
    now = get_current_datetime()
    return products.save(Product(name=name, price=Decimal(price), stock=stock, category=category,
                                 created_at=now, updated_at=now))


class TestUserRepository:
    def test_existence_checks_can_exclude_a_row(self, users):
        alice = users.save(make_user("alice", "alice@x.com"))

        assert users.exists_by_username("alice")
        assert not users.exists_by_username("alice", exclude_id=alice.id)
        assert users.exists_by_email("alice@x.com")
        assert not users.exists_by_email("alice@x.com", exclude_id=alice.id)
        assert not users.exists_by_email("bob@x.com")

    def test_finders(self, users):
        alice = users.save(make_user("alice", "alice@x.com"))

        assert users.find_by_username("alice").id == alice.id
        assert users.find_by_email("alice@x.com").id == alice.id
        assert users.find_by_username("nobody") is None
        assert users.exists_by_id(alice.id)
        assert not users.exists_by_id(alice.id + 1)

    def test_email_matching_ignores_case(self, users):
        alice = users.save(make_user("alice", "Alice@x.com"))

        assert users.find_by_email("alice@X.COM").id == alice.id
        assert users.exists_by_email("ALICE@x.com")
        assert not users.exists_by_email("ALICE@x.com", exclude_id=alice.id)

    def test_unique_constraint_backs_the_service_check(self, users, db_session):
        users.save(make_user("alice", "alice@x.com"))

        with pytest.raises(IntegrityError):
            users.save(make_user("alice", "other@x.com"))

        # The session is usable again after the rollback
        assert users.exists_by_username("alice")

    def test_find_page(self, users):
        for name in ("carol", "alice", "bob"):
            users.save(make_user(name, f"{name}@x.com"))

        items, total = users.find_page(PageRequest(page=1, size=2, sort_field="username"))

        assert total == 3
        assert [u.username for u in items] == ["carol"]


class TestProductRepository:
    def test_update_stock_touches_one_row(self, products, category, db_session):
        product = add_product(products, category, "Dune", "19.99", stock=5)
        later = get_current_datetime()

        affected = products.update_stock(product.id, 42, later)

        assert affected == 1
        db_session.expire_all()
        assert products.get_by_id(product.id).stock == 42

    def test_update_stock_missing_row(self, products):
        assert products.update_stock(12345, 1, get_current_datetime()) == 0

    def test_filtered_page(self, products, category):
        add_product(products, category, "Dune", "19.99")
        add_product(products, category, "Dune Messiah", "9.50")
        add_product(products, category, "100% Cotton", "5.00")

        items, total = products.find_page_filtered(
            ProductFilter(name="dune", max_price=Decimal("10")), PageRequest(sort_field="name")
        )
        percent, _ = products.find_page_filtered(ProductFilter(name="%"), PageRequest())

        assert total == 1
        assert [p.name for p in items] == ["Dune Messiah"]
        assert [p.name for p in percent] == ["100% Cotton"]

    def test_count_by_category(self, products, category):
        add_product(products, category, "Dune", "19.99")
        add_product(products, category, "Emma", "7.00")

        assert products.count_by_category(category.id) == 2
        assert products.count_by_category(category.id + 1) == 0

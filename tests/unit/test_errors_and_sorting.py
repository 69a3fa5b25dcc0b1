"""
Unit tests for domain exceptions, log code classification and sort parsing.
"""
import pytest

from app.core.exceptions import (
    CategoryInUse,
    ProductNotFound,
    UserAlreadyExists,
    UserNotFound,
    ValidationFailed,
)
from app.core.log_codes import LogCode
from app.interfaces.api.deps import parse_sort


class TestExceptions:
    def test_not_found_messages(self):
        assert UserNotFound.for_id().message == "User not found with provided ID"
        assert UserNotFound.for_username("bob").message == "User not found with username : bob"
        assert UserNotFound.for_email("b@x.com").message == "User not found with email : b@x.com"
        assert UserNotFound.for_id().status_code == 404

    def test_conflict_log_code_follows_message(self):
        assert UserAlreadyExists.for_username().log_code is LogCode.USERNAME_ALREADY_EXISTS
        assert UserAlreadyExists.for_email().log_code is LogCode.EMAIL_ALREADY_EXISTS
        assert UserAlreadyExists("USERNAME clash").log_code is LogCode.USERNAME_ALREADY_EXISTS
        assert UserAlreadyExists.for_email().status_code == 409

    def test_product_side_codes(self):
        assert ProductNotFound.for_id(3).log_code is LogCode.PRODUCT_NOT_FOUND
        assert CategoryInUse.for_id(1, 2).status_code == 409

    def test_log_code_renders_as_code(self):
        assert str(LogCode.USER_NOT_FOUND) == "USR-001"
        assert LogCode.USER_NOT_FOUND.description == "User not found"


class TestParseSort:
    SORTABLE = {"id", "username", "created_at"}

    @pytest.mark.parametrize("raw, expected", [
        ("id", ("id", False)),
        ("username,desc", ("username", True)),
        ("createdAt,ASC", ("created_at", False)),
        (" created_at , desc ", ("created_at", True)),
    ])
    def test_valid(self, raw, expected):
        assert parse_sort(raw, self.SORTABLE) == expected

    @pytest.mark.parametrize("raw", ["password", "id,sideways"])
    def test_invalid(self, raw):
        with pytest.raises(ValidationFailed) as exc_info:
            parse_sort(raw, self.SORTABLE)

        assert "sort" in exc_info.value.details["errors"]

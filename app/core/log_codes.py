"""
Structured log codes for observability and monitoring.

Convention: ``<PREFIX>-<NNN>`` where the prefix names the service domain
(``USR`` user-service, ``PRD`` product-service) and the number range the
failure class:

- ``0xx`` resource not found
- ``1xx`` conflict / uniqueness
- ``2xx`` validation
- ``3xx`` business rule veto
- ``9xx`` unexpected / internal

They are attached to log events as the ``code`` key so log platforms can group
alerts on them.
"""

from enum import Enum


class LogCode(str, Enum):
    # --- user-service ---
    USER_NOT_FOUND = "USR-001"
    USERNAME_ALREADY_EXISTS = "USR-100"
    EMAIL_ALREADY_EXISTS = "USR-101"
    USER_VALIDATION_FAILED = "USR-200"
    OPERATION_NOT_PERMITTED = "USR-300"
    USER_INTERNAL_ERROR = "USR-900"

    # --- product-service ---
    PRODUCT_NOT_FOUND = "PRD-001"
    CATEGORY_NOT_FOUND = "PRD-002"
    PRODUCT_NAME_ALREADY_EXISTS = "PRD-100"
    CATEGORY_NAME_ALREADY_EXISTS = "PRD-101"
    CATEGORY_IN_USE = "PRD-102"
    PRODUCT_VALIDATION_FAILED = "PRD-200"
    PRODUCT_INTERNAL_ERROR = "PRD-900"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    def __str__(self) -> str:
        return self.value


_DESCRIPTIONS = {
    LogCode.USER_NOT_FOUND: "User not found",
    LogCode.USERNAME_ALREADY_EXISTS: "Username already exists",
    LogCode.EMAIL_ALREADY_EXISTS: "Email already exists",
    LogCode.USER_VALIDATION_FAILED: "Validation failed",
    LogCode.OPERATION_NOT_PERMITTED: "Operation not permitted",
    LogCode.USER_INTERNAL_ERROR: "Unhandled internal error",
    LogCode.PRODUCT_NOT_FOUND: "Product not found",
    LogCode.CATEGORY_NOT_FOUND: "Category not found",
    LogCode.PRODUCT_NAME_ALREADY_EXISTS: "Product name already exists",
    LogCode.CATEGORY_NAME_ALREADY_EXISTS: "Category name already exists",
    LogCode.CATEGORY_IN_USE: "Category still referenced by products",
    LogCode.PRODUCT_VALIDATION_FAILED: "Validation failed",
    LogCode.PRODUCT_INTERNAL_ERROR: "Unhandled internal error",
}

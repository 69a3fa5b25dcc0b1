"""
Global exception handling for the application.
Standardizes error responses using Problem Details for HTTP APIs (RFC 7807).
"""

from typing import Any, Dict, Optional

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from app.config import get_settings
from app.core.clock import get_current_datetime
from app.core.log_codes import LogCode

settings = get_settings()
logger = structlog.get_logger(__name__)

PROBLEM_JSON = "application/problem+json"


class AppError(Exception):
    """Base class for all application exceptions."""

    title = "Internal Server Error"
    type_suffix = "internal-server-error"
    log_code: Optional[LogCode] = None

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class EntityNotFoundException(AppError):
    """Resource not found error."""

    title = "Resource not found"

    def __init__(self, message: str = "Entity not found", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_404_NOT_FOUND, details)


class ConflictException(AppError):
    """Uniqueness or referential conflict."""

    title = "Data conflict"
    type_suffix = "data-conflict"

    def __init__(self, message: str = "Data conflict", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_409_CONFLICT, details)


class OperationNotPermitted(AppError):
    """Business rule veto."""

    title = "Operation not permitted"
    type_suffix = "operation-not-permitted"
    log_code = LogCode.OPERATION_NOT_PERMITTED

    def __init__(self, message: str = "Operation not permitted", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_403_FORBIDDEN, details)


class ValidationFailed(AppError):
    """Input rejected outside of the declarative request models (e.g. sort keys)."""

    title = "Invalid input data"
    type_suffix = "validation-error"

    def __init__(self, errors: Dict[str, str]):
        super().__init__("Validation failed", status.HTTP_400_BAD_REQUEST, {"errors": errors})


# --- user-service ---

class UserNotFound(EntityNotFoundException):
    type_suffix = "user-not-found"
    log_code = LogCode.USER_NOT_FOUND

    @classmethod
    def for_id(cls) -> "UserNotFound":
        return cls("User not found with provided ID")

    @classmethod
    def for_username(cls, username: str) -> "UserNotFound":
        return cls(f"User not found with username : {username}")

    @classmethod
    def for_email(cls, email: str) -> "UserNotFound":
        return cls(f"User not found with email : {email}")


class UserAlreadyExists(ConflictException):
    type_suffix = "user-already-exists"

    @classmethod
    def for_username(cls) -> "UserAlreadyExists":
        return cls("Username already in use")

    @classmethod
    def for_email(cls) -> "UserAlreadyExists":
        return cls("Email already associated")

    @property
    def log_code(self) -> LogCode:
        if "username" in self.message.lower():
            return LogCode.USERNAME_ALREADY_EXISTS
        return LogCode.EMAIL_ALREADY_EXISTS


# --- product-service ---

class ProductNotFound(EntityNotFoundException):
    type_suffix = "product-not-found"
    log_code = LogCode.PRODUCT_NOT_FOUND

    @classmethod
    def for_id(cls, product_id: int) -> "ProductNotFound":
        return cls(f"Product not found with id : {product_id}")


class CategoryNotFound(EntityNotFoundException):
    type_suffix = "category-not-found"
    log_code = LogCode.CATEGORY_NOT_FOUND

    @classmethod
    def for_id(cls, category_id: int) -> "CategoryNotFound":
        return cls(f"Category not found with id : {category_id}")


class ProductAlreadyExists(ConflictException):
    type_suffix = "product-already-exists"
    log_code = LogCode.PRODUCT_NAME_ALREADY_EXISTS

    @classmethod
    def for_name(cls) -> "ProductAlreadyExists":
        return cls("Product name already in use")


class CategoryAlreadyExists(ConflictException):
    type_suffix = "category-already-exists"
    log_code = LogCode.CATEGORY_NAME_ALREADY_EXISTS

    @classmethod
    def for_name(cls) -> "CategoryAlreadyExists":
        return cls("Category name already in use")


class CategoryInUse(ConflictException):
    type_suffix = "category-in-use"
    log_code = LogCode.CATEGORY_IN_USE

    @classmethod
    def for_id(cls, category_id: int, product_count: int) -> "CategoryInUse":
        return cls(
            f"Category {category_id} is still referenced by {product_count} product(s)",
            {"productCount": product_count},
        )


# --- problem body ---

def problem_response(
    request: Request,
    status_code: int,
    title: str,
    detail: str,
    type_suffix: str,
    extra: Optional[Dict[str, Any]] = None,
) -> JSONResponse:
    """Build an RFC 7807 problem response stamped with the owning service."""
    content: Dict[str, Any] = {
        "type": settings.ERROR_TYPE_BASE_URL + type_suffix,
        "title": title,
        "status": status_code,
        "detail": detail,
        "instance": request.url.path,
        "service": getattr(request.app.state, "service_name", "unknown-service"),
        "timestamp": get_current_datetime().isoformat(),
    }
    if extra:
        content.update(extra)
    return JSONResponse(status_code=status_code, content=content, media_type=PROBLEM_JSON)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Handle domain errors raised by the service layer."""
    if isinstance(exc, ValidationFailed):
        code = request.app.state.log_codes["validation"]
        logger.warning(code.description, code=str(code), errors=exc.details["errors"])
        return problem_response(
            request, exc.status_code, exc.title, exc.message, exc.type_suffix,
            extra={"errors": exc.details["errors"]},
        )

    code = exc.log_code
    if code is not None:
        logger.warning(code.description, code=str(code), detail=exc.message)
    extra = {k: v for k, v in exc.details.items() if k not in ("errors",)}
    return problem_response(request, exc.status_code, exc.title, exc.message, exc.type_suffix, extra=extra)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Shape declarative validation failures as a 400 problem with a field map."""
    errors: Dict[str, str] = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(loc) or "request"
        # Keep the first message reported for a field
        errors.setdefault(field, error.get("msg", "Generic Error"))

    code = request.app.state.log_codes["validation"]
    logger.warning(code.description, code=str(code), errors=errors)
    return problem_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        "Invalid input data",
        "Validation failed",
        "validation-error",
        extra={"errors": errors},
    )


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """A unique or foreign key constraint fired at commit time."""
    logger.warning("Storage constraint violated", error=str(exc.orig))
    return problem_response(
        request,
        status.HTTP_409_CONFLICT,
        "Data conflict",
        "The request conflicts with existing data",
        "data-conflict",
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all uncaught exceptions globally."""
    code = request.app.state.log_codes["internal"]
    logger.error(code.description, code=str(code), exc_info=exc)
    return problem_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal Server Error",
        "An unexpected error occurred. Contact support if the problem persists",
        "internal-server-error",
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register every problem-detail handler on the application."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(Exception, global_exception_handler)

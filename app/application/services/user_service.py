"""User service — registration, lookup, partial/full update and deletion."""

import structlog

from app.application.mappers import user_mapper
from app.core.clock import get_current_datetime
from app.core.exceptions import OperationNotPermitted, UserAlreadyExists, UserNotFound
from app.core.log_codes import LogCode
from app.core.security import hash_password
from app.domain.models.user import User, UserRole
from app.domain.repositories.user_repository import UserRepository
from app.domain.schemas.common import Page, PageRequest, has_text
from app.domain.schemas.user import UserCreate, UserPatch, UserPut, UserPutResponse, UserResponse

logger = structlog.get_logger(__name__)


# --- create ---

def create_user(repo: UserRepository, request: UserCreate) -> UserResponse:
    """Register a new customer. Username is checked before email."""
    logger.info("Creating user", username=request.username, email=request.email)

    if repo.exists_by_username(request.username):
        logger.warning(
            "Registration rejected - username already exists",
            code=str(LogCode.USERNAME_ALREADY_EXISTS),
            username=request.username,
        )
        raise UserAlreadyExists.for_username()
    if repo.exists_by_email(request.email):
        logger.warning(
            "Registration rejected - email already exists",
            code=str(LogCode.EMAIL_ALREADY_EXISTS),
            email=request.email,
        )
        raise UserAlreadyExists.for_email()

    user = user_mapper.from_create_request(request, hash_password(request.password), get_current_datetime())
    user = repo.save(user)

    logger.info("User created successfully", user_id=user.id, username=user.username)
    return user_mapper.to_response(user)


# --- read ---

def get_all_users(repo: UserRepository, page_request: PageRequest) -> Page[UserResponse]:
    logger.debug(
        "Fetching users",
        page=page_request.page,
        size=page_request.size,
        sort=page_request.sort_field,
        descending=page_request.descending,
    )
    users, total = repo.find_page(page_request)
    page = Page[UserResponse].of([user_mapper.to_response(u) for u in users], page_request, total)
    logger.debug("Returned users", returned=len(page.content), total=total)
    return page


def find_by_id(repo: UserRepository, user_id: int) -> UserResponse:
    logger.debug("Looking up user by id", user_id=user_id)
    return user_mapper.to_response(_load(repo, user_id, "Lookup"))


def find_by_username(repo: UserRepository, username: str) -> UserResponse:
    logger.debug("Looking up user by username", username=username)
    user = repo.find_by_username(username)
    if user is None:
        logger.warning("User not found", code=str(LogCode.USER_NOT_FOUND), username=username)
        raise UserNotFound.for_username(username)
    return user_mapper.to_response(user)


def find_by_email(repo: UserRepository, email: str) -> UserResponse:
    logger.debug("Looking up user by email", email=email)
    user = repo.find_by_email(email)
    if user is None:
        logger.warning("User not found", code=str(LogCode.USER_NOT_FOUND), email=email)
        raise UserNotFound.for_email(email)
    return user_mapper.to_response(user)


# --- delete ---

def delete_user(repo: UserRepository, user_id: int) -> None:
    """Delete a user. Administrators cannot be deleted through the API."""
    logger.info("Deleting user", user_id=user_id)

    if not repo.exists_by_id(user_id):
        logger.warning("Delete rejected - user not found", code=str(LogCode.USER_NOT_FOUND), user_id=user_id)
        raise UserNotFound.for_id()

    user = repo.get_by_id(user_id)
    if user.role == UserRole.ADMIN:
        logger.warning(
            "Delete rejected - user is an administrator",
            code=str(LogCode.OPERATION_NOT_PERMITTED),
            user_id=user_id,
        )
        raise OperationNotPermitted("Administrator accounts cannot be deleted")

    repo.delete(user)
    logger.info("User deleted successfully", user_id=user_id)


# --- partial update (PATCH) ---

def patch_user(repo: UserRepository, user_id: int, request: UserPatch) -> UserResponse:
    """Apply only the fields that carry text.

    An email that differs from the current one (ignoring case) must be free;
    on conflict nothing from the request is saved. The save always runs once
    reached, so ``updated_at`` moves even when no field changed.
    """
    logger.info("Patching user", user_id=user_id)
    user = _load(repo, user_id, "Patch")

    if has_text(request.first_name):
        logger.debug("Patching first_name", old=user.first_name, new=request.first_name)
        user.first_name = request.first_name
    if has_text(request.last_name):
        logger.debug("Patching last_name", old=user.last_name, new=request.last_name)
        user.last_name = request.last_name
    if has_text(request.phone):
        logger.debug("Patching phone", old=user.phone, new=request.phone)
        user.phone = request.phone

    if has_text(request.email) and request.email.lower() != user.email.lower():
        if repo.exists_by_email(request.email, exclude_id=user_id):
            logger.warning(
                "Patch rejected - email already taken by another user",
                code=str(LogCode.EMAIL_ALREADY_EXISTS),
                email=request.email,
            )
            raise UserAlreadyExists.for_email()
        logger.debug("Patching email", old=user.email, new=request.email)
        user.email = request.email

    user.updated_at = get_current_datetime()
    user = repo.save(user)

    logger.info("User patched successfully", user_id=user_id)
    return user_mapper.to_response(user)


# --- full replacement (PUT) ---

def put_user(repo: UserRepository, user_id: int, request: UserPut) -> UserPutResponse:
    """Replace every mutable field.

    Uniqueness is checked before the row is loaded; the target's own current
    username and email do not count as conflicts.
    """
    logger.info("Full update (PUT)", user_id=user_id, username=request.username, email=request.email)

    if repo.exists_by_username(request.username, exclude_id=user_id):
        logger.warning(
            "PUT rejected - username already taken by another user",
            code=str(LogCode.USERNAME_ALREADY_EXISTS),
            username=request.username,
        )
        raise UserAlreadyExists.for_username()
    if repo.exists_by_email(request.email, exclude_id=user_id):
        logger.warning(
            "PUT rejected - email already taken by another user",
            code=str(LogCode.EMAIL_ALREADY_EXISTS),
            email=request.email,
        )
        raise UserAlreadyExists.for_email()

    user = _load(repo, user_id, "PUT")
    user_mapper.apply_put_request(user, request, hash_password(request.password), get_current_datetime())
    user = repo.save(user)

    logger.info("User updated successfully", user_id=user_id)
    return user_mapper.to_put_response(user)


def _load(repo: UserRepository, user_id: int, action: str) -> User:
    user = repo.get_by_id(user_id)
    if user is None:
        logger.warning(f"{action} rejected - user not found", code=str(LogCode.USER_NOT_FOUND), user_id=user_id)
        raise UserNotFound.for_id()
    return user

"""Translation between the User entity and its request/response shapes."""

from datetime import datetime

from app.domain.models.user import User, UserRole
from app.domain.schemas.user import UserCreate, UserPut, UserPutResponse, UserResponse


def to_response(user: User) -> UserResponse:
    return UserResponse.model_validate(user)


def to_put_response(user: User) -> UserPutResponse:
    return UserPutResponse.model_validate(user)


def from_create_request(request: UserCreate, password_hash: str, now: datetime) -> User:
    """Build a new customer. The role is fixed here and never read from input."""
    return User(
        username=request.username,
        email=request.email,
        password_hash=password_hash,
        first_name=request.first_name,
        last_name=request.last_name,
        phone=request.phone,
        active=True,
        role=UserRole.CUSTOMER,
        created_at=now,
        updated_at=now,
    )


def apply_put_request(user: User, request: UserPut, password_hash: str, now: datetime) -> User:
    """Overwrite every mutable field; id and created_at are left alone."""
    user.username = request.username
    user.email = request.email
    user.password_hash = password_hash
    user.first_name = request.first_name
    user.last_name = request.last_name
    user.phone = request.phone
    user.active = request.active
    user.role = request.role
    user.updated_at = now
    return user

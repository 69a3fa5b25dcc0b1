"""Pydantic schemas for the User domain."""

from datetime import datetime
from typing import Annotated, Optional

from pydantic import BeforeValidator, Field, StringConstraints

from app.domain.models.user import UserRole
from app.domain.schemas.common import CamelModel, Email, blank_to_none, non_blank

# Absent and blank mean the same thing in a PATCH body
PatchName = Annotated[Optional[Annotated[str, StringConstraints(min_length=2, max_length=50)]], BeforeValidator(blank_to_none)]
PatchEmail = Annotated[Optional[Email], BeforeValidator(blank_to_none)]
PatchPhone = Annotated[Optional[Annotated[str, StringConstraints(max_length=30)]], BeforeValidator(blank_to_none)]


class UserCreate(CamelModel):
    """Registration payload. Carries no role: new users are always customers."""

    username: non_blank(2, 50)
    email: Email
    password: non_blank(6, 100)
    first_name: Optional[str] = Field(default=None, min_length=2, max_length=50)
    last_name: Optional[str] = Field(default=None, min_length=2, max_length=50)
    phone: Optional[str] = Field(default=None, max_length=30)


class UserPatch(CamelModel):
    """Partial update; only fields with text are applied."""

    first_name: PatchName = None
    last_name: PatchName = None
    email: PatchEmail = None
    phone: PatchPhone = None


class UserPut(CamelModel):
    """Full replacement; every mutable field is overwritten."""

    username: non_blank(2, 50)
    email: Email
    password: non_blank(8, 100)
    first_name: Optional[str] = Field(default=None, max_length=50)
    last_name: Optional[str] = Field(default=None, max_length=50)
    phone: Optional[str] = Field(default=None, max_length=30)
    active: bool
    role: UserRole


class UserResponse(CamelModel):
    id: int
    username: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    role: UserRole
    created_at: Optional[datetime] = None


class UserPutResponse(UserResponse):
    active: bool
    updated_at: Optional[datetime] = None

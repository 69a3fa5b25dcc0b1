"""Shared pydantic building blocks: camelCase wire models and pagination."""

from decimal import Decimal
from typing import Annotated, Generic, List, Optional, TypeVar

from pydantic import AfterValidator, BaseModel, ConfigDict, EmailStr, PlainSerializer, StringConstraints
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Snake_case attributes in Python, camelCase keys on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def has_text(value: Optional[str]) -> bool:
    """True when the value is not None and holds at least one non-whitespace char."""
    return value is not None and value.strip() != ""


def _not_blank(value: str) -> str:
    if not has_text(value):
        raise ValueError("must not be blank")
    return value


def blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


def non_blank(min_length: Optional[int] = None, max_length: Optional[int] = None):
    """A required string with length bounds that must hold some text."""
    return Annotated[
        str,
        StringConstraints(min_length=min_length, max_length=max_length),
        AfterValidator(_not_blank),
    ]


EMAIL_MAX_LENGTH = 50


def _email_length(value: str) -> str:
    if len(value) > EMAIL_MAX_LENGTH:
        raise ValueError(f"must be at most {EMAIL_MAX_LENGTH} characters")
    return value


Email = Annotated[EmailStr, AfterValidator(_email_length)]

# Decimals travel as JSON numbers, not strings
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class PageRequest(BaseModel):
    """Caller-supplied page window; passed through to storage untouched."""

    page: int = 0
    size: int = 20
    sort_field: str = "id"
    descending: bool = False


class Page(CamelModel, Generic[T]):
    content: List[T]
    page: int
    size: int
    total_elements: int
    total_pages: int

    @classmethod
    def of(cls, content: List[T], page_request: PageRequest, total: int) -> "Page[T]":
        return cls(
            content=content,
            page=page_request.page,
            size=page_request.size,
            total_elements=total,
            total_pages=(total + page_request.size - 1) // page_request.size,
        )

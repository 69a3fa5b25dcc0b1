"""FastAPI dependency — pagination query parameters."""

from typing import Callable, Iterable

from fastapi import Query
from pydantic.alias_generators import to_snake

from app.config import get_settings
from app.core.exceptions import ValidationFailed
from app.domain.schemas.common import PageRequest

settings = get_settings()

SORT_DIRECTIONS = {"asc": False, "desc": True}


def parse_sort(sort: str, sortable: Iterable[str]) -> tuple[str, bool]:
    """Parse ``field`` or ``field,asc|desc``; field may be camelCase or snake_case."""
    field, _, direction = sort.partition(",")
    field = to_snake(field.strip())
    direction = direction.strip().lower() or "asc"

    if field not in sortable:
        raise ValidationFailed({"sort": f"unknown sort property '{field}'"})
    if direction not in SORT_DIRECTIONS:
        raise ValidationFailed({"sort": f"unknown sort direction '{direction}'"})
    return field, SORT_DIRECTIONS[direction]


def pagination(sortable: Iterable[str]) -> Callable[..., PageRequest]:
    """Build a dependency that reads page/size/sort for a resource."""
    allowed = frozenset(sortable)

    def dependency(
        page: int = Query(0, ge=0, description="Zero-based page index"),
        size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
        sort: str = Query("id,asc", description="field[,asc|desc]"),
    ) -> PageRequest:
        field, descending = parse_sort(sort, allowed)
        return PageRequest(page=page, size=size, sort_field=field, descending=descending)

    return dependency

"""Standardized JSON response envelope helpers."""


from collections.abc import Callable
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from app.core.pagination import Page

T = TypeVar("T")


class DataResponse(BaseModel, Generic[T]):
    """Single-item response envelope: `{ data: {...} }`"""

    data: T

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
    }


class ListResponse(BaseModel, Generic[T]):
    """Paginated list envelope: `{ page, limit, total, totalPages, results, data: [...] }`"""

    page: int
    limit: int
    total: int
    total_pages: int
    results: int
    data: list[T]

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
    }


def paginated(page: Page, serialize: Callable[[Any], Any], **extra: Any) -> dict:
    """Build a paginated response dict for use with ListResponse."""
    return {
        **extra,
        "page": page.page,
        "limit": page.limit,
        "total": page.total,
        "total_pages": page.total_pages,
        "results": page.results,
        "data": [serialize(item) for item in page.items],
    }

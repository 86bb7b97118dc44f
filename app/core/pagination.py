"""Pagination helpers for list endpoints."""


from typing import Generic, TypeVar

from fastapi import Request

from app.core.query import QuerySpec, total_pages

T = TypeVar("T")


def query_spec(request: Request) -> QuerySpec:
    """FastAPI dependency exposing the raw query string as a QuerySpec.

    Repeated keys (``?tag=a&tag=b``) become lists; everything else stays a string.
    """
    params: dict[str, str | list[str]] = {}
    for key, value in request.query_params.multi_items():
        if key in params:
            existing = params[key]
            params[key] = [*existing, value] if isinstance(existing, list) else [existing, value]
        else:
            params[key] = value
    return params


class Page(Generic[T]):
    """One page of results plus the numbers needed for response metadata."""

    def __init__(self, items: list[T], total: int, page: int, limit: int):
        self.items = items
        self.total = total
        self.page = page
        self.limit = limit

    @property
    def total_pages(self) -> int:
        return total_pages(self.total, self.limit)

    @property
    def results(self) -> int:
        return len(self.items)

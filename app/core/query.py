"""Composable filter / search / sort / paginate stages for list endpoints.

A :class:`QueryBuilder` wraps a SQLAlchemy ``Select`` together with the raw
query-string parameters of one request. Every stage returns a *new* builder,
so a caller can branch one filtered + searched builder into a count query and
a sorted, paginated data query without the two aliasing each other::

    criteria = (
        QueryBuilder(Post, params, select(Post))
        .filter(["status", "author", "tag"])
        .search(["title", "content", "slug"])
    )
    features = criteria.sort("-created_at").paginate(10, 100)

    total = await session.scalar(criteria.count_query())
    items = (await session.scalars(features.query)).all()

Malformed input never raises: unknown fields are ignored, empty search terms
are a no-op, and bad ``page`` / ``limit`` values fall back to the defaults.
"""

from __future__ import annotations

import copy
import math
from collections.abc import Callable, Mapping, Sequence
from typing import Any, Union

from pydantic.alias_generators import to_snake
from sqlalchemy import ColumnElement, Select, func, inspect, or_, select

QueryValue = Union[str, Sequence[str]]
QuerySpec = Mapping[str, QueryValue]
FilterClause = Callable[[str], ColumnElement[bool]]

# Control parameters; never interpreted as filter fields.
RESERVED_KEYS: frozenset[str] = frozenset({"page", "limit", "sort", "order", "q"})

_LIKE_ESCAPE = "\\"
_MAX_OFFSET = 2**63 - 1


def _first(value: QueryValue | None) -> str | None:
    """Return the scalar form of a query-string value (first of a repeated key)."""
    if value is None or isinstance(value, str):
        return value
    return next(iter(value), None)


def _parse_int(value: QueryValue | None) -> int | None:
    raw = _first(value)
    if raw is None:
        return None
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


def _escape_like(term: str) -> str:
    return (
        term.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )


def total_pages(total: int, limit: int) -> int:
    """Number of pages for ``total`` rows, never less than 1."""
    return max(math.ceil(total / limit), 1)


class QueryBuilder:
    """Immutable builder narrowing a ``Select`` through filter/search/sort/paginate."""

    def __init__(
        self,
        model: type,
        params: QuerySpec,
        query: Select | None = None,
        *,
        filter_map: Mapping[str, FilterClause] | None = None,
    ):
        self.model = model
        self.params = params
        self.query = query if query is not None else select(model)
        self.filter_map = dict(filter_map or {})
        self.page: int | None = None
        self.limit: int | None = None

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _evolve(self, **changes: Any) -> QueryBuilder:
        clone = copy.copy(self)
        for name, value in changes.items():
            setattr(clone, name, value)
        return clone

    def _column(self, name: str):
        """Resolve an API field name (``createdAt`` or ``created_at``) to a column."""
        attrs = inspect(self.model).column_attrs
        for key in (name, to_snake(name)):
            if key in attrs:
                return getattr(self.model, key)
        return None

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    def filter(self, allowed_fields: Sequence[str]) -> QueryBuilder:
        """AND an equality constraint for every allowed field present in the params."""
        query = self.query
        for field in allowed_fields:
            if field in RESERVED_KEYS or field not in self.params:
                continue
            value = _first(self.params[field])
            if value is None or value == "":
                continue

            if field in self.filter_map:
                clause = self.filter_map[field](value)
            else:
                column = self._column(field)
                if column is None:
                    continue
                clause = column == value
            query = query.where(clause)
        return self._evolve(query=query)

    def search(self, searchable_fields: Sequence[str]) -> QueryBuilder:
        """AND a case-insensitive substring match of ``q`` against any of the fields."""
        term = (_first(self.params.get("q")) or "").strip()
        if not term:
            return self._evolve()

        pattern = f"%{_escape_like(term)}%"
        conditions = []
        for field in searchable_fields:
            column = self._column(field)
            if column is not None:
                conditions.append(column.ilike(pattern, escape=_LIKE_ESCAPE))
        if not conditions:
            return self._evolve()
        return self._evolve(query=self.query.where(or_(*conditions)))

    def sort(self, default_sort: str) -> QueryBuilder:
        """Order by ``sort``/``order`` from the params, else by ``default_sort``.

        ``default_sort`` uses a leading ``-`` for descending order.
        """
        requested = _first(self.params.get("sort"))
        column = self._column(requested) if requested else None

        if column is not None:
            ascending = (_first(self.params.get("order")) or "").lower() == "asc"
        else:
            descending = default_sort.startswith("-")
            column = self._column(default_sort.lstrip("-"))
            ascending = not descending
            if column is None:
                return self._evolve()

        return self._evolve(
            query=self.query.order_by(column.asc() if ascending else column.desc())
        )

    def paginate(self, default_limit: int, max_limit: int) -> QueryBuilder:
        """Apply OFFSET/LIMIT and record the effective ``page`` and ``limit``."""
        page = _parse_int(self.params.get("page"))
        if page is None or page < 1:
            page = 1

        limit = _parse_int(self.params.get("limit"))
        if limit is None or limit <= 0:
            limit = default_limit
        limit = min(max(limit, 1), max_limit)

        # OFFSET must fit a signed 64-bit integer
        page = min(page, _MAX_OFFSET // limit + 1)

        return self._evolve(
            query=self.query.offset((page - 1) * limit).limit(limit),
            page=page,
            limit=limit,
        )

    # ------------------------------------------------------------------
    # Derived queries
    # ------------------------------------------------------------------

    def count_query(self) -> Select:
        """``SELECT count(*)`` over the current criteria, ignoring order and paging."""
        inner = self.query.order_by(None).limit(None).offset(None)
        return select(func.count()).select_from(inner.subquery())

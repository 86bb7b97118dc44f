"""Generic async repository with query-string driven listing."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Generic, TypeVar

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.pagination import Page
from app.core.query import FilterClause, QueryBuilder, QuerySpec
from app.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)

logger = logging.getLogger(__name__)


class BaseRepository(Generic[ModelT]):
    """Generic CRUD repository.

    Subclasses set ``model`` and may add ``filter_map`` entries for filter
    fields that are not plain columns on the model.
    """

    model: type[ModelT]
    filter_map: dict[str, FilterClause] = {}

    def __init__(self, session: AsyncSession):
        self._session = session

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _base_query(self) -> Select:
        return select(self.model)

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def get_by_id(self, entity_id: str) -> ModelT | None:
        result = await self._session.execute(
            self._base_query().where(self.model.id == entity_id)
        )
        return result.scalars().first()

    async def find_one(self, **criteria: Any) -> ModelT | None:
        q = self._base_query()
        for col_name, value in criteria.items():
            q = q.where(getattr(self.model, col_name) == value)
        result = await self._session.execute(q)
        return result.scalars().first()

    async def list(
        self,
        params: QuerySpec,
        *,
        filter_fields: Sequence[str],
        search_fields: Sequence[str],
        default_sort: str = "-created_at",
        default_limit: int = 10,
        max_limit: int = 100,
        base_query: Select | None = None,
    ) -> Page[ModelT]:
        """Return one page of rows matching the query-string params, plus the total.

        The count and the page are separate reads; a concurrent write between
        them can leave ``total`` one off from what the page implies.
        """
        criteria = (
            QueryBuilder(
                self.model,
                params,
                base_query if base_query is not None else self._base_query(),
                filter_map=self.filter_map,
            )
            .filter(filter_fields)
            .search(search_fields)
        )
        features = criteria.sort(default_sort).paginate(default_limit, max_limit)

        # AsyncSession does not allow concurrent statements, so these run back to back
        total = (await self._session.execute(criteria.count_query())).scalar_one()
        items = (await self._session.execute(features.query)).scalars().all()

        logger.debug(
            "%s list: page=%s limit=%s total=%s",
            self.model.__name__, features.page, features.limit, total,
        )
        return Page(list(items), total, features.page, features.limit)

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def create(self, **kwargs: Any) -> ModelT:
        instance = self.model(**kwargs)
        self._session.add(instance)
        await self._session.flush()  # populate id + server defaults
        await self._session.refresh(instance)
        return instance

    async def update(self, instance: ModelT, **kwargs: Any) -> ModelT:
        kwargs.pop("id", None)
        for name, value in kwargs.items():
            setattr(instance, name, value)
        await self._session.flush()
        await self._session.refresh(instance)
        return instance

    async def delete(self, instance: ModelT) -> None:
        await self._session.delete(instance)
        await self._session.flush()

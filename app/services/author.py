"""Author service — CRUD and listing for blog authors.

Rule: No FastAPI here. Routers call this, this calls the repository.
"""


import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.exceptions import ConflictError, NotFoundError
from app.core.ids import parse_id
from app.core.pagination import Page
from app.core.query import QuerySpec
from app.domain.author import Author
from app.repositories.author import AuthorRepository
from app.schemas.author import AuthorCreate, AuthorUpdate

logger = logging.getLogger(__name__)

AUTHOR_FILTER_FIELDS = ("name", "email")
AUTHOR_SEARCH_FIELDS = ("name", "email")


class AuthorService:
    def __init__(self, session: AsyncSession):
        self._repo = AuthorRepository(session)

    async def list_authors(self, params: QuerySpec) -> Page[Author]:
        return await self._repo.list(
            params,
            filter_fields=AUTHOR_FILTER_FIELDS,
            search_fields=AUTHOR_SEARCH_FIELDS,
            default_sort="-created_at",
            default_limit=settings.default_page_limit,
            max_limit=settings.max_page_limit,
        )

    async def get_author(self, author_id: str) -> Author:
        author = await self._repo.get_by_id(parse_id(author_id, "Author"))
        if not author:
            logger.debug("Author %s not found", author_id)
            raise NotFoundError("Author")
        return author

    async def create_author(self, data: AuthorCreate) -> Author:
        if await self._repo.get_by_email(data.email):
            raise ConflictError(f"An author with email '{data.email}' already exists")
        author = await self._repo.create(**data.model_dump())
        logger.info("Created author %s", author.id)
        return author

    async def update_author(self, author_id: str, data: AuthorUpdate) -> Author:
        author = await self.get_author(author_id)  # raises 404 if missing
        changes = data.model_dump(exclude_unset=True, exclude_none=True)

        if "email" in changes and changes["email"] != author.email:
            if await self._repo.get_by_email(changes["email"]):
                raise ConflictError(f"An author with email '{changes['email']}' already exists")

        return await self._repo.update(author, **changes)

    async def delete_author(self, author_id: str) -> None:
        author = await self.get_author(author_id)
        await self._repo.delete(author)
        logger.info("Deleted author %s", author.id)

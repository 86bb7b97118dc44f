"""Post service — publishing rules and listing for blog posts.

``published_at`` follows ``status``: publishing stamps it, reverting to draft
clears it.
"""


import logging
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.exceptions import ConflictError, NotFoundError
from app.core.ids import parse_id
from app.core.pagination import Page
from app.core.query import QuerySpec
from app.domain.post import Post
from app.repositories.author import AuthorRepository
from app.repositories.post import PostRepository
from app.schemas.post import PostCreate, PostUpdate

logger = logging.getLogger(__name__)

POST_FILTER_FIELDS = ("status", "author", "tag")
AUTHOR_POST_FILTER_FIELDS = ("status", "tag")
POST_SEARCH_FIELDS = ("title", "content", "slug")


def _now() -> datetime:
    return datetime.now(timezone.utc)


class PostService:
    def __init__(self, session: AsyncSession):
        self._repo = PostRepository(session)
        self._authors = AuthorRepository(session)

    async def _require_author(self, author_id: str) -> str:
        author_id = parse_id(author_id, "Author")
        if not await self._authors.get_by_id(author_id):
            logger.debug("Author %s not found", author_id)
            raise NotFoundError("Author")
        return author_id

    async def _ensure_slug_free(self, slug: str, post_id: str | None = None) -> None:
        existing = await self._repo.get_by_slug(slug)
        if existing and existing.id != post_id:
            raise ConflictError(f"A post with slug '{slug}' already exists")

    async def list_posts(self, params: QuerySpec) -> Page[Post]:
        return await self._repo.list(
            params,
            filter_fields=POST_FILTER_FIELDS,
            search_fields=POST_SEARCH_FIELDS,
            default_sort="-created_at",
            default_limit=settings.default_page_limit,
            max_limit=settings.max_page_limit,
        )

    async def list_posts_by_author(self, author_id: str, params: QuerySpec) -> Page[Post]:
        author_id = parse_id(author_id, "Author")
        return await self._repo.list(
            params,
            filter_fields=AUTHOR_POST_FILTER_FIELDS,
            search_fields=POST_SEARCH_FIELDS,
            default_sort="-created_at",
            default_limit=settings.default_page_limit,
            max_limit=settings.max_page_limit,
            base_query=self._repo.for_author(author_id),
        )

    async def get_post(self, post_id: str) -> Post:
        post = await self._repo.get_by_id(parse_id(post_id, "Post"))
        if not post:
            logger.debug("Post %s not found", post_id)
            raise NotFoundError("Post")
        return post

    async def create_post(self, data: PostCreate) -> Post:
        payload = data.model_dump(exclude={"author"})
        payload["author_id"] = await self._require_author(data.author)
        await self._ensure_slug_free(data.slug)

        if payload["status"] == "published" and not payload.get("published_at"):
            payload["published_at"] = _now()
        if payload["status"] == "draft":
            payload["published_at"] = None

        post = await self._repo.create(**payload)
        logger.info("Created post %s (%s)", post.id, post.status)
        return post

    async def update_post(self, post_id: str, data: PostUpdate) -> Post:
        post = await self.get_post(post_id)  # raises 404 if missing
        changes = data.model_dump(exclude_unset=True, exclude_none=True, exclude={"author"})

        if data.author is not None:
            changes["author_id"] = await self._require_author(data.author)
        if "slug" in changes:
            await self._ensure_slug_free(changes["slug"], post.id)

        if changes.get("status") == "published":
            changes["published_at"] = _now()
        if changes.get("status") == "draft":
            changes["published_at"] = None

        post = await self._repo.update(post, **changes)
        logger.info("Updated post %s", post.id)
        return post

    async def delete_post(self, post_id: str) -> None:
        post = await self.get_post(post_id)
        await self._repo.delete(post)
        logger.info("Deleted post %s", post.id)

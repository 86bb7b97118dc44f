"""Post router. Reads are public; writes need an admin bearer token."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.pagination import query_spec
from app.core.query import QuerySpec
from app.core.response import DataResponse, ListResponse, paginated
from app.db.base import get_db
from app.routers.v1.deps import require_admin
from app.schemas.post import PostCreate, PostOut, PostUpdate
from app.services.post import PostService

router = APIRouter(prefix="/posts", tags=["Posts"])


class AuthorPostsResponse(ListResponse[PostOut]):
    author: str


@router.get("", response_model=ListResponse[PostOut])
async def list_posts(
    params: QuerySpec = Depends(query_spec),
    session: AsyncSession = Depends(get_db),
):
    """List posts. Filter by ?status=&author=&tag=, search with ?q=."""
    page = await PostService(session).list_posts(params)
    return paginated(page, PostOut.model_validate)


@router.get("/author/{author_id}", response_model=AuthorPostsResponse)
async def list_posts_by_author(
    author_id: str,
    params: QuerySpec = Depends(query_spec),
    session: AsyncSession = Depends(get_db),
):
    page = await PostService(session).list_posts_by_author(author_id, params)
    return paginated(page, PostOut.model_validate, author=author_id)


@router.post(
    "",
    response_model=DataResponse[PostOut],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_post(
    body: PostCreate,
    session: AsyncSession = Depends(get_db),
):
    post = await PostService(session).create_post(body)
    return {"data": PostOut.model_validate(post)}


@router.get("/{post_id}", response_model=DataResponse[PostOut])
async def get_post(
    post_id: str,
    session: AsyncSession = Depends(get_db),
):
    post = await PostService(session).get_post(post_id)
    return {"data": PostOut.model_validate(post)}


@router.patch(
    "/{post_id}",
    response_model=DataResponse[PostOut],
    dependencies=[Depends(require_admin)],
)
async def update_post(
    post_id: str,
    body: PostUpdate,
    session: AsyncSession = Depends(get_db),
):
    post = await PostService(session).update_post(post_id, body)
    return {"data": PostOut.model_validate(post)}


@router.delete(
    "/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
)
async def delete_post(
    post_id: str,
    session: AsyncSession = Depends(get_db),
):
    await PostService(session).delete_post(post_id)

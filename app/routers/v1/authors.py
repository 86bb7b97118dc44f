"""Author CRUD router.

Pattern:
  1. Declare a router with prefix and tags
  2. Inject DB session via Depends
  3. Instantiate the service with the session
  4. Call service methods and wrap result in response envelope
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.pagination import query_spec
from app.core.query import QuerySpec
from app.core.response import DataResponse, ListResponse, paginated
from app.db.base import get_db
from app.schemas.author import AuthorCreate, AuthorOut, AuthorUpdate
from app.services.author import AuthorService

router = APIRouter(prefix="/authors", tags=["Authors"])


@router.get("", response_model=ListResponse[AuthorOut])
async def list_authors(
    params: QuerySpec = Depends(query_spec),
    session: AsyncSession = Depends(get_db),
):
    """List authors. Supports ?name=&email=&q=&sort=&order=&page=&limit=."""
    page = await AuthorService(session).list_authors(params)
    return paginated(page, AuthorOut.model_validate)


@router.post("", response_model=DataResponse[AuthorOut], status_code=status.HTTP_201_CREATED)
async def create_author(
    body: AuthorCreate,
    session: AsyncSession = Depends(get_db),
):
    author = await AuthorService(session).create_author(body)
    return {"data": AuthorOut.model_validate(author)}


@router.get("/{author_id}", response_model=DataResponse[AuthorOut])
async def get_author(
    author_id: str,
    session: AsyncSession = Depends(get_db),
):
    author = await AuthorService(session).get_author(author_id)
    return {"data": AuthorOut.model_validate(author)}


@router.patch("/{author_id}", response_model=DataResponse[AuthorOut])
async def update_author(
    author_id: str,
    body: AuthorUpdate,
    session: AsyncSession = Depends(get_db),
):
    author = await AuthorService(session).update_author(author_id, body)
    return {"data": AuthorOut.model_validate(author)}


@router.delete("/{author_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_author(
    author_id: str,
    session: AsyncSession = Depends(get_db),
):
    await AuthorService(session).delete_author(author_id)

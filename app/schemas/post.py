"""Post Pydantic schemas (request DTOs and response models)."""


from datetime import datetime
from typing import Annotated, Literal

from pydantic import Field, StringConstraints, field_validator

from app.schemas.author import AuthorSummary
from app.schemas.common import CamelModel

PostStatus = Literal["draft", "published"]
NonBlank = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


def _clean_tags(tags: list[str] | None) -> list[str] | None:
    if tags is None:
        return None
    return [t.strip() for t in tags if t and t.strip()]


class PostCreate(CamelModel):
    title: NonBlank
    slug: NonBlank
    content: NonBlank
    status: PostStatus = "draft"
    tags: list[str] = Field(default_factory=list)
    author: str
    published_at: datetime | None = None

    @field_validator("tags")
    @classmethod
    def strip_tags(cls, value: list[str] | None) -> list[str] | None:
        return _clean_tags(value)

class PostUpdate(CamelModel):
    title: NonBlank | None = None
    slug: NonBlank | None = None
    content: NonBlank | None = None
    status: PostStatus | None = None
    tags: list[str] | None = None
    author: str | None = None
    published_at: datetime | None = None

    @field_validator("tags")
    @classmethod
    def strip_tags(cls, value: list[str] | None) -> list[str] | None:
        return _clean_tags(value)

class PostOut(CamelModel):
    id: str
    title: str
    slug: str
    content: str
    status: str
    published_at: datetime | None = None
    tags: list[str]
    author: AuthorSummary
    created_at: datetime
    updated_at: datetime

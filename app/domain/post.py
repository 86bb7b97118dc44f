"""SQLAlchemy ORM models for Posts and their tags."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import List, Optional

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base
from app.domain.author import Author
from app.domain.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class Post(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    __tablename__ = "posts"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    # "draft" | "published"
    status: Mapped[str] = mapped_column(String(20), default="draft", nullable=False, index=True)
    published_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    author_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("authors.id", ondelete="CASCADE"), nullable=False, index=True
    )

    author: Mapped[Author] = relationship(lazy="selectin")
    post_tags: Mapped[List["PostTag"]] = relationship(
        back_populates="post",
        lazy="selectin",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="PostTag.position",
    )

    @property
    def tags(self) -> list[str]:
        return [row.tag for row in self.post_tags]

    @tags.setter
    def tags(self, values: Iterable[str]) -> None:
        # Reuse rows for tags that survive so the flush never re-inserts a live key
        existing = {row.tag: row for row in self.post_tags}
        rows = []
        for position, tag in enumerate(dict.fromkeys(values)):
            row = existing.get(tag) or PostTag(tag=tag)
            row.position = position
            rows.append(row)
        self.post_tags = rows


class PostTag(Base):
    """One tag on one post; ``position`` keeps the order the tags were given in."""

    __tablename__ = "post_tags"

    post_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("posts.id", ondelete="CASCADE"), primary_key=True
    )
    tag: Mapped[str] = mapped_column(String(100), primary_key=True, index=True)
    position: Mapped[int] = mapped_column(default=0, nullable=False)

    post: Mapped[Post] = relationship(back_populates="post_tags")

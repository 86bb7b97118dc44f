"""
pytest configuration and shared fixtures.

Every test gets its own in-memory SQLite database (StaticPool keeps the single
connection alive), the app with ``get_db`` pointed at it, and an httpx client.
"""

import os

os.environ["APP_ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["AUTO_CREATE_TABLES"] = "false"
os.environ["JWT_SECRET"] = "test-secret-key"

from datetime import datetime, timedelta, timezone

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app import domain  # noqa: F401
from app.core.security import create_access_token, hash_password
from app.db.base import Base, enable_sqlite_foreign_keys, get_db
from app.domain.author import Author
from app.domain.post import Post
from app.domain.user import User
from app.main import create_app

BASE_TIME = datetime(2025, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def app(session_factory):
    async def _get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    application = create_app()
    application.dependency_overrides[get_db] = _get_db
    return application


@pytest.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


@pytest.fixture
def make_author(session):
    """Insert an author; ``minutes`` offsets created_at from BASE_TIME for stable ordering."""

    async def _make(name: str, email: str | None = None, minutes: int = 0, bio: str = "") -> Author:
        author = Author(
            name=name,
            email=email or f"{name.lower().replace(' ', '.')}@example.com",
            bio=bio,
            created_at=BASE_TIME + timedelta(minutes=minutes),
        )
        session.add(author)
        await session.commit()
        return author

    return _make


@pytest.fixture
def make_post(session):
    async def _make(
        author: Author,
        title: str,
        *,
        content: str = "Lorem ipsum",
        slug: str | None = None,
        status: str = "draft",
        tags: list[str] | None = None,
        minutes: int = 0,
    ) -> Post:
        post = Post(
            title=title,
            slug=slug or title.lower().replace(" ", "-"),
            content=content,
            status=status,
            published_at=BASE_TIME if status == "published" else None,
            author_id=author.id,
            tags=tags or [],
            created_at=BASE_TIME + timedelta(minutes=minutes),
        )
        session.add(post)
        await session.commit()
        return post

    return _make


@pytest.fixture
async def admin_user(session) -> User:
    user = User(
        name="Admin",
        email="admin@example.com",
        password_hash=hash_password("secret123"),
        role="admin",
    )
    session.add(user)
    await session.commit()
    return user


@pytest.fixture
def admin_headers(admin_user) -> dict:
    return {"Authorization": f"Bearer {create_access_token(admin_user.id, admin_user.role)}"}

"""Auth service — admin registration, login and token resolution."""


import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ConflictError, UnauthorizedError
from app.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from app.domain.user import User
from app.repositories.user import UserRepository
from app.schemas.auth import LoginRequest, RegisterRequest

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, session: AsyncSession):
        self._repo = UserRepository(session)

    def _issue(self, user: User) -> dict:
        return {"token": create_access_token(user.id, user.role), "user": user}

    async def register(self, data: RegisterRequest) -> dict:
        if await self._repo.get_by_email(data.email):
            raise ConflictError("Email already registered")
        user = await self._repo.create(
            name=data.name,
            email=data.email,
            password_hash=hash_password(data.password),
            role="admin",
        )
        logger.info("Registered user %s", user.id)
        return self._issue(user)

    async def login(self, data: LoginRequest) -> dict:
        user = await self._repo.get_by_email(data.email)
        if not user or not verify_password(data.password, user.password_hash):
            logger.warning("Failed login for %s", data.email)
            raise UnauthorizedError("Invalid email or password")
        return self._issue(user)

    async def resolve_token(self, token: str) -> User:
        """Return the user a bearer token belongs to."""
        payload = decode_access_token(token)
        user = await self._repo.get_by_id(payload["sub"])
        if not user:
            raise UnauthorizedError("User no longer exists")
        return user

"""Auth router — register, login, current user."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.response import DataResponse
from app.db.base import get_db
from app.domain.user import User
from app.routers.v1.deps import get_current_user
from app.schemas.auth import AuthTokenOut, LoginRequest, RegisterRequest, UserOut
from app.services.auth import AuthService

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/register", response_model=DataResponse[AuthTokenOut], status_code=status.HTTP_201_CREATED)
async def register(
    body: RegisterRequest,
    session: AsyncSession = Depends(get_db),
):
    result = await AuthService(session).register(body)
    return {"data": AuthTokenOut.model_validate(result)}


@router.post("/login", response_model=DataResponse[AuthTokenOut])
async def login(
    body: LoginRequest,
    session: AsyncSession = Depends(get_db),
):
    result = await AuthService(session).login(body)
    return {"data": AuthTokenOut.model_validate(result)}


@router.get("/me", response_model=DataResponse[UserOut])
async def me(user: User = Depends(get_current_user)):
    return {"data": UserOut.model_validate(user)}

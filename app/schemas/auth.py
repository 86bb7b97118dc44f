"""Auth Pydantic schemas."""


from datetime import datetime
from typing import Annotated

from pydantic import EmailStr, StringConstraints, field_validator

from app.schemas.common import CamelModel


class RegisterRequest(CamelModel):
    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=2, max_length=255)]
    email: EmailStr
    password: Annotated[str, StringConstraints(min_length=6)]

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return value.strip().lower()

class LoginRequest(CamelModel):
    email: EmailStr
    password: str

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return value.strip().lower()

class UserOut(CamelModel):
    id: str
    name: str
    email: str
    role: str
    created_at: datetime

class AuthTokenOut(CamelModel):
    token: str
    user: UserOut

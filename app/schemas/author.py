"""Author Pydantic schemas (request DTOs and response models)."""


from datetime import datetime
from typing import Annotated

from pydantic import EmailStr, StringConstraints, field_validator

from app.schemas.common import CamelModel

AuthorName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=2, max_length=255)]


class AuthorCreate(CamelModel):
    name: AuthorName
    email: EmailStr
    bio: str = ""

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return value.strip().lower()

class AuthorUpdate(CamelModel):
    name: AuthorName | None = None
    email: EmailStr | None = None
    bio: str | None = None

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str | None) -> str | None:
        return value.strip().lower() if value else value

class AuthorSummary(CamelModel):
    """Author fields embedded in post responses."""

    id: str
    name: str
    email: str

class AuthorOut(CamelModel):
    id: str
    name: str
    email: str
    bio: str
    created_at: datetime
    updated_at: datetime

"""Author Schemas."""

from datetime import datetime

from app.schemas.common import CamelModel


class AuthorCreate(CamelModel):
    first_name: str | None = None
    last_name: str | None = None


class AuthorResponse(CamelModel):
    id: str
    first_name: str
    last_name: str
    role: str
    avatar: str
    created_at: datetime | None = None

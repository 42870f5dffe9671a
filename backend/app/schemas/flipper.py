"""Flipper Schemas — carousel documents."""

from datetime import datetime
from typing import Any

from app.schemas.common import CamelModel, Slide


class FlipperWrite(CamelModel):
    title: str | None = None
    category: str | None = None
    tags: Any = None
    tech_tags: Any = None
    carousel_content: list[Slide] | None = None


class FlipperResponse(CamelModel):
    id: str
    title: str
    category: str | None = None
    tags: list[str]
    tech_tags: list[str]
    carousel_content: list[Slide]
    created_at: datetime
    updated_at: datetime | None = None

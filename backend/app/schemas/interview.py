"""Interview Schemas — /api/interviews payloads."""

from datetime import datetime
from typing import Any

from app.schemas.author import AuthorResponse
from app.schemas.common import CamelModel, ContentBlock


class InterviewWrite(CamelModel):
    title: str | None = None
    interviewee: str | None = None
    lead: str | None = None
    main_quote: str | None = None
    author_id: str | None = None
    content: list[ContentBlock] | None = None
    image_url: str | None = None
    image_caption: str | None = None
    tags: Any = None


class InterviewResponse(CamelModel):
    id: str
    title: str
    interviewee: str
    lead: str
    main_quote: str
    author_id: str
    content: list[dict]
    image_url: str | None = None
    image_caption: str | None = None
    tags: list[str]
    created_at: datetime
    updated_at: datetime | None = None


class InterviewDetail(InterviewResponse):
    author: AuthorResponse | None = None

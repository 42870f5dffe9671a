"""Article Schemas — write payload and response shapes for /api/articles.

Invariants:
    - Required-field checks live in core/documents.py so the 400 message
      matches for every authored collection; fields here are optional
    - tags/techTags are untyped on input: core/tags.py drops non-list values
      and non-string items instead of rejecting the request
    - ArticleDetail embeds the author document (or null)
"""

from datetime import datetime
from typing import Any

from app.schemas.author import AuthorResponse
from app.schemas.common import CamelModel, ContentBlock


class ArticleWrite(CamelModel):
    title: str | None = None
    lead: str | None = None
    author_id: str | None = None
    content: list[ContentBlock] | None = None
    image_url: str | None = None
    image_caption: str | None = None
    category: str | None = None
    tags: Any = None
    tech_tags: Any = None
    is_hot_content: bool = False
    is_on_landing: bool = False
    is_main_in_category: bool = False
    is_news: bool = False


class ArticleResponse(CamelModel):
    id: str
    title: str
    lead: str
    author_id: str
    content: list[dict]
    image_url: str | None = None
    image_caption: str | None = None
    category: str
    tags: list[str]
    tech_tags: list[str]
    is_hot_content: bool
    is_on_landing: bool
    is_main_in_category: bool
    is_news: bool
    created_at: datetime
    updated_at: datetime | None = None


class ArticleDetail(ArticleResponse):
    author: AuthorResponse | None = None

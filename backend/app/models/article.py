"""Article ORM — persists editorial articles and news items.

Invariants:
    - id is a 20-char opaque string (core/domain_types.new_document_id)
    - title, author_id and content are non-nullable
    - category is "" when the legacy hotContent category was submitted
    - is_on_landing is true on at most one article; is_main_in_category on at
      most one article per category (core/exclusive_flags.py)

Design Decisions:
    - JSON columns for content blocks and tag lists: stored verbatim, shape owned by the front end
    - author_id is a plain string, no FK: authors are looked up after the fact
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, Boolean, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column

from app.core.domain_types import new_document_id
from app.db.base import Base


class Article(Base):
    """Article document."""
    __tablename__ = "articles"

    id: Mapped[str] = mapped_column(
        String(40), primary_key=True, default=new_document_id,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    lead: Mapped[str] = mapped_column(Text, nullable=False, default="")
    author_id: Mapped[str] = mapped_column(String(128), nullable=False)
    content: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_caption: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str] = mapped_column(
        String(64), nullable=False, default="", index=True,
    )
    tags: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    tech_tags: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    is_hot_content: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_on_landing: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_main_in_category: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    is_news: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )

"""Flipper ORM — persists carousel content.

Invariants:
    - carousel_content is a non-empty ordered list of {imageUrl, caption} slides
    - Slide order is display order
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column

from app.core.domain_types import new_document_id
from app.db.base import Base


class Flipper(Base):
    """Flipper (carousel) document."""
    __tablename__ = "flippers"

    id: Mapped[str] = mapped_column(
        String(40), primary_key=True, default=new_document_id,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str | None] = mapped_column(String(64), nullable=True)
    tags: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    tech_tags: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    carousel_content: Mapped[list] = mapped_column(
        JSON, nullable=False, default=list,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )

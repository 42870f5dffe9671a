"""Event ORM — persists exhibitions, concerts and performances.

Invariants:
    - category is one of EventCategory values
    - start_date is non-nullable; end_date (if set) >= start_date
    - date_type is derived from start/end, never submitted directly
    - start_time / end_time are "HH:MM" strings consistent with time_mode
    - is_on_landing is true on at most one event
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, Boolean, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column

from app.core.domain_types import new_document_id
from app.db.base import Base


class Event(Base):
    """Event document."""
    __tablename__ = "events"

    id: Mapped[str] = mapped_column(
        String(40), primary_key=True, default=new_document_id,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    author_id: Mapped[str] = mapped_column(String(128), nullable=False)
    content: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_caption: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    tags: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    tech_tags: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    # Scheduling
    start_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True,
    )
    end_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    date_type: Mapped[str] = mapped_column(
        String(10), nullable=False, default="single",
    )
    time_mode: Mapped[str] = mapped_column(
        String(10), nullable=False, default="none",
    )
    start_time: Mapped[str | None] = mapped_column(String(5), nullable=True)
    end_time: Mapped[str | None] = mapped_column(String(5), nullable=True)
    address: Mapped[str] = mapped_column(Text, nullable=False, default="")

    is_on_landing: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )

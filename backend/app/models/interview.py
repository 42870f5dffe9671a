"""Interview ORM — persists Q&A interviews.

Invariants:
    - title, author_id and content are non-nullable
    - tags are trimmed and de-duplicated (no slugification)
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column

from app.core.domain_types import new_document_id
from app.db.base import Base


class Interview(Base):
    """Interview document."""
    __tablename__ = "interviews"

    id: Mapped[str] = mapped_column(
        String(40), primary_key=True, default=new_document_id,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    interviewee: Mapped[str] = mapped_column(Text, nullable=False, default="")
    lead: Mapped[str] = mapped_column(Text, nullable=False, default="")
    main_quote: Mapped[str] = mapped_column(Text, nullable=False, default="")
    author_id: Mapped[str] = mapped_column(String(128), nullable=False)
    content: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_caption: Mapped[str | None] = mapped_column(Text, nullable=True)
    tags: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )

"""UserProfile ORM — reader profiles keyed by the auth provider UID.

Invariants:
    - uid is the primary key (no generated id)
    - role defaults to "reader"
    - stripe_* fields are written only by the subscription webhook
    - stripe_customer_id is indexed: webhook updates look users up by it
"""

from datetime import datetime, timezone

from sqlalchemy import String, BigInteger, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class UserProfile(Base):
    """Reader profile with denormalized subscription state."""
    __tablename__ = "users"

    uid: Mapped[str] = mapped_column(String(128), primary_key=True)
    first_name: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    last_name: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    role: Mapped[str] = mapped_column(String(20), nullable=False, default="reader")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # Subscription (Stripe)
    stripe_customer_id: Mapped[str | None] = mapped_column(
        String(255), nullable=True, index=True,
    )
    stripe_subscription_id: Mapped[str | None] = mapped_column(
        String(255), nullable=True,
    )
    stripe_price_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    stripe_subscription_status: Mapped[str | None] = mapped_column(
        String(32), nullable=True,
    )
    stripe_current_period_end: Mapped[int | None] = mapped_column(
        BigInteger, nullable=True,
    )

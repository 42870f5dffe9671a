"""User Profile Schemas.

Invariants:
    - uid is supplied by the client (auth provider UID), never generated
    - stripe_* fields are read-only over HTTP (webhook-owned)
"""

from datetime import datetime

from pydantic import Field, field_validator

from app.schemas.common import CamelModel


class UserCreate(CamelModel):
    uid: str = Field(min_length=1, max_length=128)
    first_name: str | None = None
    last_name: str | None = None

    @field_validator("uid")
    @classmethod
    def strip_uid(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("uid cannot be empty or whitespace")
        return v


class UserUpdate(CamelModel):
    first_name: str | None = None
    last_name: str | None = None


class UserResponse(CamelModel):
    uid: str
    first_name: str
    last_name: str
    role: str
    created_at: datetime
    stripe_customer_id: str | None = None
    stripe_subscription_id: str | None = None
    stripe_price_id: str | None = None
    stripe_subscription_status: str | None = None
    stripe_current_period_end: int | None = None

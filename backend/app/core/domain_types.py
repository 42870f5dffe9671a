"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - DocumentId wraps the opaque string ids used by every collection
    - UserId is the auth provider UID, reused as the profile document id
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - str Enums: serialize to JSON without custom encoders
"""

import secrets
import string
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

DocumentId = NewType("DocumentId", str)
UserId = NewType("UserId", str)

_ID_ALPHABET = string.ascii_letters + string.digits
DOCUMENT_ID_LENGTH = 20


def new_document_id() -> DocumentId:
    """Random 20-char alphanumeric id, same shape as auto-generated doc ids."""
    return DocumentId(
        "".join(secrets.choice(_ID_ALPHABET) for _ in range(DOCUMENT_ID_LENGTH))
    )


# ─── Enums ───────────────────────────────────────────────────────

class Collection(str, Enum):
    """Document collections — one table each."""
    ARTICLES = "articles"
    EVENTS = "events"
    INTERVIEWS = "interviews"
    FLIPPERS = "flippers"
    AUTHORS = "authors"
    USERS = "users"


class EventCategory(str, Enum):
    """Supported event categories."""
    EXHIBITION = "exhibition"
    CONCERT = "concert"
    PERFORMANCE = "performance"


class DateType(str, Enum):
    """Single-day vs multi-day event."""
    SINGLE = "single"
    DURATION = "duration"


class TimeMode(str, Enum):
    """How an event's time of day is shown."""
    NONE = "none"
    START = "start"
    RANGE = "range"


class UserRole(str, Enum):
    READER = "reader"
    AUTHOR = "author"
    ADMIN = "admin"


class SubscriptionStatus(str, Enum):
    """Subset of Stripe subscription statuses written by the webhook."""
    ACTIVE = "active"
    TRIALING = "trialing"
    PAST_DUE = "past_due"
    UNPAID = "unpaid"
    INCOMPLETE = "incomplete"
    CANCELED = "canceled"

"""ORM Models — SQLAlchemy declarative models, one table per document collection.

Invariants:
    - All models inherit from Base (db/base.py)
    - No foreign keys between collections: references are denormalized ids

Design Decisions:
    - One file per collection for locality
    - All models imported here so Base.metadata is complete before create_all / autogenerate
"""

from app.models.article import Article  # noqa: F401
from app.models.event import Event  # noqa: F401
from app.models.interview import Interview  # noqa: F401
from app.models.flipper import Flipper  # noqa: F401
from app.models.author import Author  # noqa: F401
from app.models.user_profile import UserProfile  # noqa: F401

"""Initial schema — articles, events, interviews, flippers, authors, users.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    ]


def _authored() -> list[sa.Column]:
    return [
        sa.Column("id", sa.String(40), primary_key=True),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("author_id", sa.String(128), nullable=False),
        sa.Column("content", sa.JSON, nullable=False),
        sa.Column("image_url", sa.Text, nullable=True),
        sa.Column("image_caption", sa.Text, nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        "articles",
        *_authored(),
        sa.Column("lead", sa.Text, nullable=False, server_default=""),
        sa.Column("category", sa.String(64), nullable=False, server_default=""),
        sa.Column("tags", sa.JSON, nullable=False),
        sa.Column("tech_tags", sa.JSON, nullable=False),
        sa.Column("is_hot_content", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("is_on_landing", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("is_main_in_category", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("is_news", sa.Boolean, nullable=False, server_default="false"),
        *_timestamps(),
    )
    op.create_index("ix_articles_category", "articles", ["category"])

    op.create_table(
        "events",
        *_authored(),
        sa.Column("category", sa.String(20), nullable=False),
        sa.Column("tags", sa.JSON, nullable=False),
        sa.Column("tech_tags", sa.JSON, nullable=False),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("date_type", sa.String(10), nullable=False, server_default="single"),
        sa.Column("time_mode", sa.String(10), nullable=False, server_default="none"),
        sa.Column("start_time", sa.String(5), nullable=True),
        sa.Column("end_time", sa.String(5), nullable=True),
        sa.Column("address", sa.Text, nullable=False, server_default=""),
        sa.Column("is_on_landing", sa.Boolean, nullable=False, server_default="false"),
        *_timestamps(),
    )
    op.create_index("ix_events_category", "events", ["category"])
    op.create_index("ix_events_start_date", "events", ["start_date"])

    op.create_table(
        "interviews",
        *_authored(),
        sa.Column("interviewee", sa.Text, nullable=False, server_default=""),
        sa.Column("lead", sa.Text, nullable=False, server_default=""),
        sa.Column("main_quote", sa.Text, nullable=False, server_default=""),
        sa.Column("tags", sa.JSON, nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "flippers",
        sa.Column("id", sa.String(40), primary_key=True),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("category", sa.String(64), nullable=True),
        sa.Column("tags", sa.JSON, nullable=False),
        sa.Column("tech_tags", sa.JSON, nullable=False),
        sa.Column("carousel_content", sa.JSON, nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "authors",
        sa.Column("id", sa.String(40), primary_key=True),
        sa.Column("first_name", sa.String(200), nullable=False),
        sa.Column("last_name", sa.String(200), nullable=False),
        sa.Column("role", sa.String(20), nullable=False, server_default="author"),
        sa.Column("avatar", sa.Text, nullable=False, server_default=""),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_authors_last_name", "authors", ["last_name"])

    op.create_table(
        "users",
        sa.Column("uid", sa.String(128), primary_key=True),
        sa.Column("first_name", sa.String(200), nullable=False, server_default=""),
        sa.Column("last_name", sa.String(200), nullable=False, server_default=""),
        sa.Column("role", sa.String(20), nullable=False, server_default="reader"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("stripe_customer_id", sa.String(255), nullable=True),
        sa.Column("stripe_subscription_id", sa.String(255), nullable=True),
        sa.Column("stripe_price_id", sa.String(255), nullable=True),
        sa.Column("stripe_subscription_status", sa.String(32), nullable=True),
        sa.Column("stripe_current_period_end", sa.BigInteger, nullable=True),
    )
    op.create_index("ix_users_stripe_customer_id", "users", ["stripe_customer_id"])


def downgrade() -> None:
    op.drop_index("ix_users_stripe_customer_id", table_name="users")
    op.drop_table("users")
    op.drop_index("ix_authors_last_name", table_name="authors")
    op.drop_table("authors")
    op.drop_table("flippers")
    op.drop_table("interviews")
    op.drop_index("ix_events_start_date", table_name="events")
    op.drop_index("ix_events_category", table_name="events")
    op.drop_table("events")
    op.drop_index("ix_articles_category", table_name="articles")
    op.drop_table("articles")

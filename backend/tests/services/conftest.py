"""Service test fixtures — async DB + FastAPI test client + fake Stripe gateway.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness probe hits the test DB
    - get_stripe_gateway overridden with FakeStripeGateway (no network)

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL-specific features not exercised here)
    - Fake gateway verifies signatures by a fixed header value; the real
      signature scheme is covered in test_stripe_gateway.py
"""

import json

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from app.core.errors import WebhookVerificationError
from app.db.base import Base
from app.infrastructure.database import get_db, DatabaseSessionManager
from app.infrastructure.stripe_gateway import get_stripe_gateway
import app.infrastructure.database as db_module
from app.main import app

VALID_SIGNATURE = "t=1,v1=valid"


class FakeStripeGateway:
    """Records calls and returns canned Stripe objects as plain dicts."""

    def __init__(self):
        self.calls: list[tuple[str, dict]] = []
        self.subscriptions: dict[str, dict] = {}

    async def create_checkout_session(self, **kwargs) -> dict:
        self.calls.append(("checkout", kwargs))
        return {"id": "cs_test_1", "url": "https://checkout.stripe.test/cs_test_1"}

    async def create_portal_session(self, **kwargs) -> dict:
        self.calls.append(("portal", kwargs))
        return {"id": "bps_test_1", "url": "https://billing.stripe.test/bps_test_1"}

    async def retrieve_subscription(self, subscription_id: str) -> dict:
        self.calls.append(("retrieve", {"id": subscription_id}))
        return self.subscriptions[subscription_id]

    def verify_event(self, payload: bytes, signature: str | None) -> dict:
        if signature != VALID_SIGNATURE:
            raise WebhookVerificationError("No signatures found matching the expected signature")
        return json.loads(payload)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def fake_gateway():
    return FakeStripeGateway()


@pytest.fixture
async def client(test_engine, test_session_factory, fake_gateway):
    """FastAPI test client with DB and Stripe dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_stripe_gateway] = lambda: fake_gateway

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def article_payload():
    def _build(**overrides):
        payload = {
            "title": "Осенний салон",
            "lead": "Коротко о главном",
            "authorId": "author-1",
            "content": [{"type": "paragraph", "text": "Первый абзац."}],
            "category": "culture",
            "tags": ["Выставки"],
        }
        payload.update(overrides)
        return payload
    return _build


@pytest.fixture
def event_payload():
    def _build(**overrides):
        payload = {
            "title": "Ночь музеев",
            "authorId": "author-1",
            "content": [{"type": "paragraph", "text": "Программа вечера."}],
            "category": "exhibition",
            "startDate": "2025-05-17",
            "address": "Музей Орсе",
        }
        payload.update(overrides)
        return payload
    return _build

"""Root conftest — shared test configuration."""

import os

# Ensure tests don't accidentally use real Stripe keys or a real database
os.environ.setdefault("STRIPE_SECRET_KEY", "sk_test_fake_key")
os.environ.setdefault("STRIPE_WEBHOOK_SECRET", "whsec_test_fake_secret")
os.environ.setdefault("FRONTEND_URL", "http://localhost:4321")
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)

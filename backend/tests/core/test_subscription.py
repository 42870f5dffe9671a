"""Subscription Sync Rules — Stripe objects → user profile fields.

Tests:
    - Period end read from the first item, falling back to the subscription
    - Expandable customer/subscription accept id or expanded object
    - Deletion clears subscription fields and sets status canceled
    - Only checkout completion, subscription update and deletion are handled
"""

from app.core.subscription import (
    CHECKOUT_COMPLETED, HANDLED_EVENT_TYPES, SUBSCRIPTION_DELETED, SUBSCRIPTION_UPDATED,
    checkout_completed_fields, checkout_subscription_id, checkout_user_id,
    customer_id_of, subscription_deleted_fields, subscription_updated_fields,
)


def _subscription(period_on_item=True):
    item = {"price": {"id": "price_123"}}
    sub = {"id": "sub_1", "status": "active", "items": {"data": [item]}}
    if period_on_item:
        item["current_period_end"] = 1_800_000_000
    else:
        sub["current_period_end"] = 1_700_000_000
    return sub


def test_checkout_lookups():
    session = {"metadata": {"userId": "uid-1"}, "subscription": "sub_1", "customer": "cus_1"}
    assert checkout_user_id(session) == "uid-1"
    assert checkout_subscription_id(session) == "sub_1"
    assert customer_id_of(session) == "cus_1"


def test_checkout_lookups_missing():
    assert checkout_user_id({"metadata": {}}) is None
    assert checkout_user_id({}) is None
    assert checkout_subscription_id({"subscription": None}) is None


def test_expanded_objects_resolve_to_ids():
    assert checkout_subscription_id({"subscription": {"id": "sub_9"}}) == "sub_9"
    assert customer_id_of({"customer": {"id": "cus_9"}}) == "cus_9"


def test_checkout_completed_fields():
    session = {"customer": "cus_1", "metadata": {"userId": "uid-1"}}
    assert checkout_completed_fields(session, _subscription()) == {
        "stripe_customer_id": "cus_1",
        "stripe_subscription_id": "sub_1",
        "stripe_price_id": "price_123",
        "stripe_subscription_status": "active",
        "stripe_current_period_end": 1_800_000_000,
    }


def test_period_end_falls_back_to_subscription():
    fields = subscription_updated_fields(_subscription(period_on_item=False))
    assert fields["stripe_current_period_end"] == 1_700_000_000


def test_updated_fields_without_items():
    fields = subscription_updated_fields({"status": "past_due"})
    assert fields == {
        "stripe_price_id": None,
        "stripe_subscription_status": "past_due",
        "stripe_current_period_end": None,
    }


def test_deleted_fields():
    assert subscription_deleted_fields() == {
        "stripe_subscription_status": "canceled",
        "stripe_subscription_id": None,
        "stripe_price_id": None,
        "stripe_current_period_end": None,
    }


def test_handled_event_types():
    assert HANDLED_EVENT_TYPES == {
        CHECKOUT_COMPLETED, SUBSCRIPTION_UPDATED, SUBSCRIPTION_DELETED,
    }
    assert "customer.subscription.created" not in HANDLED_EVENT_TYPES

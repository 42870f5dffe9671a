"""Subscription Sync Rules — pure mapping from Stripe objects to user profile fields.

Invariants:
    - Functions accept any Mapping (stripe.StripeObject or plain dict) — no SDK calls
    - Returned dicts use UserProfile attribute names (snake_case)
    - Checkout completion requires metadata.userId and a subscription id
    - Deletion clears every subscription field except the customer id
"""

from collections.abc import Mapping

from app.core.domain_types import SubscriptionStatus

CHECKOUT_COMPLETED = "checkout.session.completed"
SUBSCRIPTION_UPDATED = "customer.subscription.updated"
SUBSCRIPTION_DELETED = "customer.subscription.deleted"
HANDLED_EVENT_TYPES = frozenset({
    CHECKOUT_COMPLETED, SUBSCRIPTION_UPDATED, SUBSCRIPTION_DELETED,
})


def _first_item(subscription: Mapping) -> Mapping:
    items = subscription.get("items") or {}
    data = items.get("data") or []
    return data[0] if data else {}


def _price_id(subscription: Mapping) -> str | None:
    price = _first_item(subscription).get("price") or {}
    return price.get("id")


def _current_period_end(subscription: Mapping) -> int | None:
    """Newer API versions expose the period on the item, older on the subscription."""
    item_end = _first_item(subscription).get("current_period_end")
    if item_end is not None:
        return item_end
    return subscription.get("current_period_end")


def _id_of(value: object) -> str | None:
    """Expandable fields arrive as an id string or an expanded object."""
    if isinstance(value, Mapping):
        return value.get("id")
    return value if isinstance(value, str) else None


def checkout_user_id(session: Mapping) -> str | None:
    metadata = session.get("metadata") or {}
    user_id = metadata.get("userId")
    return user_id or None


def checkout_subscription_id(session: Mapping) -> str | None:
    return _id_of(session.get("subscription"))


def customer_id_of(obj: Mapping) -> str | None:
    return _id_of(obj.get("customer"))


def checkout_completed_fields(session: Mapping, subscription: Mapping) -> dict:
    return {
        "stripe_customer_id": customer_id_of(session),
        "stripe_subscription_id": subscription.get("id"),
        "stripe_price_id": _price_id(subscription),
        "stripe_subscription_status": subscription.get("status"),
        "stripe_current_period_end": _current_period_end(subscription),
    }


def subscription_updated_fields(subscription: Mapping) -> dict:
    return {
        "stripe_price_id": _price_id(subscription),
        "stripe_subscription_status": subscription.get("status"),
        "stripe_current_period_end": _current_period_end(subscription),
    }


def subscription_deleted_fields() -> dict:
    return {
        "stripe_subscription_status": SubscriptionStatus.CANCELED.value,
        "stripe_subscription_id": None,
        "stripe_price_id": None,
        "stripe_current_period_end": None,
    }

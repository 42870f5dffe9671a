"""Subscription Sync — applies verified Stripe events to user profiles.

Invariants:
    - Only HANDLED_EVENT_TYPES mutate data; other types are logged and acknowledged
    - Field mapping is PURE (core/subscription.py); this module does the IO
    - checkout.session.completed without userId or subscription id → 400
    - Subscription updates/deletions with no matching stripeCustomerId → 404

Design Decisions:
    - Checkout for an unknown uid creates a bare reader profile instead of failing:
      the payment already happened, the profile can be completed later
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import UserRole
from app.core.errors import ContentValidationError, ErrorContext, ResourceNotFoundError
from app.core.subscription import (
    CHECKOUT_COMPLETED, HANDLED_EVENT_TYPES, SUBSCRIPTION_DELETED, SUBSCRIPTION_UPDATED,
    checkout_completed_fields, checkout_subscription_id, checkout_user_id,
    customer_id_of, subscription_deleted_fields, subscription_updated_fields,
)
from app.infrastructure.stripe_gateway import StripeGateway
from app.models.user_profile import UserProfile

logger = logging.getLogger(__name__)


async def handle_event(
    db: AsyncSession, gateway: StripeGateway, event: dict,
) -> None:
    event_type = event.get("type")
    obj = (event.get("data") or {}).get("object") or {}
    extra = {"event_type": event_type, "event_id": event.get("id")}

    if event_type not in HANDLED_EVENT_TYPES:
        logger.info(f"Unhandled Stripe event {event_type}", extra=extra)
        return
    if event_type == CHECKOUT_COMPLETED:
        await _checkout_completed(db, gateway, obj)
    elif event_type == SUBSCRIPTION_UPDATED:
        await _apply_to_customer(db, obj, subscription_updated_fields(obj))
    else:
        await _apply_to_customer(db, obj, subscription_deleted_fields())
    logger.info(f"Processed Stripe event {event_type}", extra=extra)


async def _checkout_completed(
    db: AsyncSession, gateway: StripeGateway, session: dict,
) -> None:
    user_id = checkout_user_id(session)
    subscription_id = checkout_subscription_id(session)
    if not user_id or not subscription_id:
        raise ContentValidationError(
            "Missing userId or subscription in checkout session",
            context=ErrorContext(collection="users"),
        )
    subscription = await gateway.retrieve_subscription(subscription_id)
    fields = checkout_completed_fields(session, subscription)

    user = await db.get(UserProfile, user_id)
    if user is None:
        logger.warning(
            "Checkout completed for unknown user, creating profile",
            extra={"user_id": user_id, "collection": "users"},
        )
        user = UserProfile(uid=user_id, role=UserRole.READER.value)
        db.add(user)
    for key, value in fields.items():
        setattr(user, key, value)
    await db.commit()


async def _apply_to_customer(
    db: AsyncSession, subscription: dict, fields: dict,
) -> None:
    customer_id = customer_id_of(subscription)
    user = None
    if customer_id:
        result = await db.execute(
            select(UserProfile)
            .where(UserProfile.stripe_customer_id == customer_id)
            .limit(1),
        )
        user = result.scalar_one_or_none()
    if user is None:
        raise ResourceNotFoundError("User", customer_id or "")
    for key, value in fields.items():
        setattr(user, key, value)
    await db.commit()

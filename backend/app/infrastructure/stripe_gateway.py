"""Stripe Gateway — thin async wrapper over the Stripe SDK with error mapping.

Invariants:
    - Every SDK call runs in a worker thread (stripe-python is synchronous)
    - All stripe.StripeError subclasses mapped to PaymentProviderError (core/errors.py)
    - Objects leave the gateway as plain dicts, never as SDK objects
    - Webhook payloads verified against the signing secret before parsing

Design Decisions:
    - StripeClient instance per gateway (no global stripe.api_key mutation)
    - Verified event parsed from the raw body with json: shape independent of SDK object model
    - No retry: checkout/portal are user-driven, webhooks are redelivered by Stripe
"""

import asyncio
import json
import logging

import stripe

from app.config import get_settings
from app.core.errors import PaymentProviderError, WebhookVerificationError

logger = logging.getLogger(__name__)


class StripeGateway:
    """Checkout, billing portal, subscription lookup, and webhook verification."""

    def __init__(
        self, api_key: str, webhook_secret: str,
        api_version: str | None = None,
    ):
        self.client = stripe.StripeClient(
            api_key, stripe_version=api_version,
        )
        self.webhook_secret = webhook_secret

    async def create_checkout_session(
        self, *, price_id: str, user_id: str, customer_email: str | None,
        success_url: str, cancel_url: str,
    ) -> dict:
        params: dict = {
            "mode": "subscription",
            "line_items": [{"price": price_id, "quantity": 1}],
            "success_url": success_url,
            "cancel_url": cancel_url,
            "metadata": {"userId": user_id},
        }
        if customer_email:
            params["customer_email"] = customer_email
        session = await self._call(
            "checkout.create",
            self.client.checkout.sessions.create, params=params,
        )
        logger.info(
            "Checkout session created",
            extra={"user_id": user_id, "event_id": session.get("id")},
        )
        return session

    async def create_portal_session(
        self, *, customer_id: str, return_url: str,
    ) -> dict:
        return await self._call(
            "portal.create",
            self.client.billing_portal.sessions.create,
            params={"customer": customer_id, "return_url": return_url},
        )

    async def retrieve_subscription(self, subscription_id: str) -> dict:
        return await self._call(
            "subscription.retrieve",
            self.client.subscriptions.retrieve, subscription_id,
        )

    def verify_event(self, payload: bytes, signature: str | None) -> dict:
        """Verify signature and return the event as a plain dict.

        Raises WebhookVerificationError on missing/invalid signature or
        malformed payload.
        """
        if not signature:
            raise WebhookVerificationError("Missing stripe-signature header")
        try:
            stripe.Webhook.construct_event(
                payload, signature, self.webhook_secret,
            )
        except stripe.SignatureVerificationError as e:
            raise WebhookVerificationError(str(e))
        except ValueError as e:
            raise WebhookVerificationError(f"Invalid payload: {e}")
        return json.loads(payload)

    async def _call(self, operation: str, func, *args, **kwargs) -> dict:
        try:
            result = await asyncio.to_thread(func, *args, **kwargs)
        except stripe.StripeError as e:
            logger.error(
                f"Stripe {operation} failed: {e.user_message or e}",
                extra={"error_code": e.code},
            )
            raise PaymentProviderError(
                e.user_message or str(e), type(e).__name__,
            )
        return result.to_dict()


def get_stripe_gateway() -> StripeGateway:
    """FastAPI dependency. Overridden in tests with a fake gateway."""
    settings = get_settings()
    return StripeGateway(
        settings.stripe_secret_key,
        settings.stripe_webhook_secret,
        settings.stripe_api_version,
    )

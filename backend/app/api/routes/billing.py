"""Billing — Stripe Checkout, customer portal, and the subscription webhook.

Invariants:
    - Webhook body read raw: signature is computed over the exact bytes
    - Signature failure → 400 "Webhook Error: ..." before any DB access
    - Checkout success/cancel and portal return URLs built from settings.frontend_url
"""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.core.errors import ContentValidationError
from app.infrastructure.database import get_db
from app.infrastructure.stripe_gateway import StripeGateway, get_stripe_gateway
from app.schemas.billing import (
    CheckoutRequest, PortalRequest, RedirectResponse, WebhookAck,
)
from app.services.subscription_sync import handle_event

router = APIRouter(prefix="/api/stripe", tags=["billing"])


@router.post("/create-checkout-session", response_model=RedirectResponse)
async def create_checkout_session(
    body: CheckoutRequest,
    gateway: StripeGateway = Depends(get_stripe_gateway),
):
    if not body.user_id:
        raise ContentValidationError("User ID is required", field="userId")
    if not body.price_id:
        raise ContentValidationError("Price ID is required", field="priceId")
    frontend = get_settings().frontend_url.rstrip("/")
    session = await gateway.create_checkout_session(
        price_id=body.price_id,
        user_id=body.user_id,
        customer_email=body.customer_email,
        success_url=f"{frontend}/success?session_id={{CHECKOUT_SESSION_ID}}",
        cancel_url=f"{frontend}/cancel",
    )
    return {"url": session["url"]}


@router.post("/create-portal-session", response_model=RedirectResponse)
async def create_portal_session(
    body: PortalRequest,
    gateway: StripeGateway = Depends(get_stripe_gateway),
):
    if not body.customer_id:
        raise ContentValidationError("Customer ID is required", field="customerId")
    frontend = get_settings().frontend_url.rstrip("/")
    session = await gateway.create_portal_session(
        customer_id=body.customer_id, return_url=f"{frontend}/profile",
    )
    return {"url": session["url"]}


@router.post("/webhook", response_model=WebhookAck)
async def stripe_webhook(
    request: Request,
    db: AsyncSession = Depends(get_db),
    gateway: StripeGateway = Depends(get_stripe_gateway),
):
    payload = await request.body()
    event = gateway.verify_event(payload, request.headers.get("stripe-signature"))
    await handle_event(db, gateway, event)
    return {"received": True}

"""Billing Schemas — Stripe checkout/portal requests and webhook ack."""

from app.schemas.common import CamelModel


class CheckoutRequest(CamelModel):
    price_id: str | None = None
    user_id: str | None = None
    customer_email: str | None = None


class PortalRequest(CamelModel):
    customer_id: str | None = None


class RedirectResponse(CamelModel):
    url: str


class WebhookAck(CamelModel):
    received: bool = True

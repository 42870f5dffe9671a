"""Stripe Gateway — signature verification and SDK error mapping (no network).

Tests:
    - Payload signed with the webhook secret is accepted and parsed to a dict
    - Missing/forged signatures raise WebhookVerificationError
    - stripe.StripeError from an SDK call becomes PaymentProviderError
"""

import hashlib
import hmac
import json
import time

import pytest
import stripe

from app.core.errors import PaymentProviderError, WebhookVerificationError
from app.infrastructure.stripe_gateway import StripeGateway

SECRET = "whsec_unit_test"


def _sign(payload: bytes, secret: str = SECRET) -> str:
    timestamp = int(time.time())
    signed = f"{timestamp}.{payload.decode()}".encode()
    digest = hmac.new(secret.encode(), signed, hashlib.sha256).hexdigest()
    return f"t={timestamp},v1={digest}"


@pytest.fixture
def gateway():
    return StripeGateway("sk_test_unit", SECRET)


@pytest.fixture
def payload():
    return json.dumps({
        "id": "evt_1", "object": "event", "type": "customer.subscription.deleted",
        "data": {"object": {"id": "sub_1", "customer": "cus_1"}},
    }).encode()


def test_valid_signature_returns_plain_dict(gateway, payload):
    event = gateway.verify_event(payload, _sign(payload))
    assert isinstance(event, dict)
    assert event["type"] == "customer.subscription.deleted"
    assert event["data"]["object"]["customer"] == "cus_1"


def test_wrong_secret_rejected(gateway, payload):
    with pytest.raises(WebhookVerificationError):
        gateway.verify_event(payload, _sign(payload, "whsec_other"))


def test_missing_signature_rejected(gateway, payload):
    with pytest.raises(WebhookVerificationError) as exc:
        gateway.verify_event(payload, None)
    assert exc.value.http_status == 400


def test_tampered_payload_rejected(gateway, payload):
    signature = _sign(payload)
    with pytest.raises(WebhookVerificationError):
        gateway.verify_event(payload.replace(b"cus_1", b"cus_2"), signature)


async def test_sdk_error_mapped(gateway):
    def _fail(**kwargs):
        raise stripe.InvalidRequestError("No such price: 'price_x'", "price")

    with pytest.raises(PaymentProviderError) as exc:
        await gateway._call("checkout.create", _fail, params={})
    assert exc.value.provider_error_type == "InvalidRequestError"
    assert exc.value.http_status == 502


async def test_sdk_result_converted_to_dict(gateway):
    class _Result:
        def to_dict(self):
            return {"id": "cs_1", "url": "https://checkout"}

    result = await gateway._call("checkout.create", lambda **kw: _Result(), params={})
    assert result == {"id": "cs_1", "url": "https://checkout"}

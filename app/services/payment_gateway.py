# app/services/payment_gateway.py
"""Hosted checkout sessions.

PaymentGateway is the contract the checkout service talks to, StripeGateway
opens Stripe Checkout sessions through stripe-python. Tests plug in a fake.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List

import stripe

from app.utils.settings import Settings
from app.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class LineItem:
    name: str
    description: str
    unit_amount: int  # minor currency units
    quantity: int


@dataclass(frozen=True)
class CheckoutSessionRequest:
    currency: str
    success_url: str
    cancel_url: str
    line_items: List[LineItem] = field(default_factory=list)


@dataclass(frozen=True)
class CheckoutSession:
    id: str
    url: str | None = None


class PaymentGatewayError(Exception):
    """The processor refused or could not be reached."""


class PaymentGateway(ABC):
    @abstractmethod
    def create_checkout_session(self, request: CheckoutSessionRequest) -> CheckoutSession:
        ...


class StripeGateway(PaymentGateway):
    """One synchronous call per checkout, no retries."""

    def __init__(self, api_key: str, timeout: int = 10, client=None):
        self.api_key = api_key
        self.timeout = timeout
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "StripeGateway":
        return cls(api_key=settings.stripe_api_key, timeout=settings.payment_timeout_seconds)

    @property
    def client(self):
        if self._client is None:
            self._client = stripe.StripeClient(
                self.api_key,
                http_client=stripe.RequestsClient(timeout=self.timeout),
                max_network_retries=0,
            )
        return self._client

    def create_checkout_session(self, request: CheckoutSessionRequest) -> CheckoutSession:
        logger.info(f"StripeGateway creating checkout session ({len(request.line_items)} line items)")

        params = {
            "payment_method_types": ["card"],
            "mode": "payment",
            "success_url": request.success_url,
            "cancel_url": request.cancel_url,
            "line_items": [
                {
                    "quantity": item.quantity,
                    "price_data": {
                        "currency": request.currency,
                        "unit_amount": item.unit_amount,
                        "product_data": {"name": item.name, "description": item.description}
                        if item.description else {"name": item.name},
                    },
                }
                for item in request.line_items
            ],
        }

        try:
            session = self.client.checkout.sessions.create(params=params)
        except stripe.StripeError as e:
            raise PaymentGatewayError(str(e)) from e

        return CheckoutSession(id=session.id, url=session.url)

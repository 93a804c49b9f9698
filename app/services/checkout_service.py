# app/services/checkout_service.py
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict
from urllib.parse import urlencode

from app.data.models.user import UserModel
from app.domain.exceptions import UpstreamError
from app.services.cart_service import CartService, cart_total
from app.services.payment_gateway import (
    CheckoutSessionRequest,
    LineItem,
    PaymentGateway,
    PaymentGatewayError,
)
from app.utils.logging import get_logger

logger = get_logger(__name__)


def to_minor_units(price: Decimal) -> int:
    return int((Decimal(price) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class CheckoutService:
    def __init__(self, cart_service: CartService, gateway: PaymentGateway, currency: str = "usd"):
        self.cart_service = cart_service
        self.gateway = gateway
        self.currency = currency

    def prepare_checkout(self, user: UserModel, base_url: str) -> Dict[str, Any]:
        """
        Price the cart and open a hosted payment session for it.

        base_url is scheme://host of the incoming request, the processor
        redirects back to /checkout/success or /checkout/cancel there.
        """
        items = self.cart_service.resolve_items(user)
        total = cart_total(items)

        query = urlencode({"user_id": user.id})
        base_url = base_url.rstrip("/")
        request = CheckoutSessionRequest(
            currency=self.currency,
            success_url=f"{base_url}/checkout/success?{query}",
            cancel_url=f"{base_url}/checkout/cancel?{query}",
            line_items=[
                LineItem(
                    name=i["product"].title,
                    description=i["product"].description or "",
                    unit_amount=to_minor_units(i["product"].price),
                    quantity=i["quantity"],
                )
                for i in items
            ],
        )

        try:
            session = self.gateway.create_checkout_session(request)
        except PaymentGatewayError as e:
            logger.error(f"Checkout session for user {user.id} failed: {e}")
            raise UpstreamError("Payment processor unavailable", status_code=502) from e

        logger.info(f"Checkout session {session.id} opened for user {user.id}, total {total}")

        return {
            "session_id": session.id,
            "session_url": session.url,
            "items": items,
            "total": total,
        }

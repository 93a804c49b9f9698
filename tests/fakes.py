"""In-memory stand-ins for the payment processor and the notifier.

No network, no broker. Both record what they were asked to do.
"""

from __future__ import annotations

from app.services.payment_gateway import (
    CheckoutSession,
    CheckoutSessionRequest,
    PaymentGateway,
    PaymentGatewayError,
)


class FakeGateway(PaymentGateway):

    def __init__(self) -> None:
        self.should_succeed = True
        self.requests: list[CheckoutSessionRequest] = []

    def create_checkout_session(self, request: CheckoutSessionRequest) -> CheckoutSession:
        self.requests.append(request)
        if not self.should_succeed:
            raise PaymentGatewayError("Card processor unreachable")
        n = len(self.requests)
        return CheckoutSession(id=f"cs_test_{n}", url=f"https://checkout.test/pay/cs_test_{n}")


class FakeNotifier:

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.sent: list[tuple[int, int]] = []

    def send_order_notification(self, user_id: int, order_id: int) -> bool:
        self.sent.append((user_id, order_id))
        if self.error is not None:
            raise self.error
        return True

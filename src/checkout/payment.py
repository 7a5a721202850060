"""
Payments — client for the Payment resource.

https://docs.checkout.com/v2.0/docs/payments-quickstart

Usage:
    from checkout import CheckoutClient
    from checkout.payment import PaymentClient, CaptureNotAllowedError

    payments = PaymentClient(CheckoutClient(secret_key="sk_..."))
    # or: payments = client.payments

    try:
        payments.capture("pay_...")
    except CaptureNotAllowedError:
        ...

PaymentClient only needs an object with CheckoutClient.call()'s signature,
so a stub caller can stand in for the HTTP client in tests.
"""

from typing import Optional

from checkout.client import CheckoutError, UnknownError
from checkout.models import (
    CaptureParams,
    CreateParams,
    Payment,
    RefundParams,
    VoidParams,
)

PAYMENTS_PATH = "/payments"


class PaymentError(CheckoutError):
    """The API refused a payment operation."""

    reason = "Payment error"

    def __init__(self, status_code: int = 0, reason: str = None):
        self.status_code = status_code
        if reason is not None:
            self.reason = reason
        super().__init__(f"payment error reason: {self.reason}")


class PaymentNotFoundError(PaymentError):
    reason = "Payment not found"


class VoidNotAllowedError(PaymentError):
    reason = "Void not allowed"


class RefundNotAllowedError(PaymentError):
    reason = "Refund not allowed"


class CaptureNotAllowedError(PaymentError):
    reason = "Capture not allowed"


class PaymentClient:
    """Create, look up, void, refund and capture payments."""

    def __init__(self, caller):
        self._caller = caller

    def create(self, params: CreateParams, idempotency_key: str = None) -> Payment:
        """Request a payment.

        Using a token: https://docs.checkout.com/v2.0/docs/request-a-card-payment
        Using an existing card: https://docs.checkout.com/v2.0/docs/use-an-existing-card

        A 202 means the payment is pending (e.g. 3-D Secure); the returned
        Payment carries whatever the API sent back.
        """
        status_code, payment = self._caller.call(
            "POST", PAYMENTS_PATH, idempotency_key, params, Payment
        )
        if status_code in (201, 202):
            return payment
        raise UnknownError(status_code)

    def get(self, payment_id: str) -> Payment:
        """Fetch the current state of a payment."""
        status_code, payment = self._caller.call(
            "GET", f"{PAYMENTS_PATH}/{payment_id}", None, None, Payment
        )
        if status_code == 200:
            return payment
        if status_code == 404:
            raise PaymentNotFoundError(status_code)
        raise UnknownError(status_code)

    def void(self, payment_id: str, params: Optional[VoidParams] = None) -> None:
        """Cancel an authorized payment before it is captured.

        https://docs.checkout.com/v2.0/docs/void-a-payment
        """
        if params is None:
            params = VoidParams()
        self._action(payment_id, "voids", None, params, VoidNotAllowedError)

    def refund(
        self,
        payment_id: str,
        params: Optional[RefundParams] = None,
        idempotency_key: str = None,
    ) -> None:
        """Refund a captured payment, fully or partially (params.amount).

        https://docs.checkout.com/v2.0/docs/refund-a-payment
        """
        if params is None:
            params = RefundParams()
        self._action(payment_id, "refunds", idempotency_key, params, RefundNotAllowedError)

    def capture(self, payment_id: str, params: Optional[CaptureParams] = None) -> None:
        """Capture an authorized payment, fully or partially (params.amount).

        https://docs.checkout.com/v2.0/docs/capture-a-payment
        """
        if params is None:
            params = CaptureParams()
        self._action(payment_id, "captures", None, params, CaptureNotAllowedError)

    def _action(self, payment_id, action, idempotency_key, params, not_allowed):
        status_code, _ = self._caller.call(
            "POST", f"{PAYMENTS_PATH}/{payment_id}/{action}", idempotency_key, params, None
        )
        if status_code == 202:
            return
        if status_code == 403:
            raise not_allowed(status_code)
        if status_code == 404:
            raise PaymentNotFoundError(status_code)
        raise UnknownError(status_code)

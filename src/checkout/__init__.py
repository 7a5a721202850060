"""Checkout SDK — Python client for the Checkout.com payments API."""

__version__ = "0.1.0"

from checkout.client import (
    ENDPOINT_LIVE,
    ENDPOINT_SANDBOX,
    CheckoutClient,
    CheckoutError,
    CallError,
    ServerError,
    UnknownError,
)
from checkout.models import ErrorResponse, Payment
from checkout.payment import (
    PaymentClient,
    PaymentError,
    PaymentNotFoundError,
    VoidNotAllowedError,
    RefundNotAllowedError,
    CaptureNotAllowedError,
)

"""
Checkout client — Python SDK for the Checkout.com payments API.

CheckoutClient owns the HTTP plumbing: it encodes the request body, attaches
the secret key and idempotency headers, sends the request and interprets the
status code. Resource clients (payments) build on its call() method.

API documentation: https://docs.checkout.com/v2.0

Usage:
    from checkout import CheckoutClient, ENDPOINT_SANDBOX
    from checkout.models import CreateParams, CreationSource, SourceType

    client = CheckoutClient(secret_key="sk_test_...", endpoint=ENDPOINT_SANDBOX)

    payment = client.payments.create(
        CreateParams(
            source=CreationSource(type=SourceType.TOKEN, token="tok_..."),
            amount=2500,
            currency="USD",
            reference="ORD-5023",
        ),
        idempotency_key="ORD-5023-create",
    )

    client.payments.capture(payment.id)
"""

import json
import logging
import os
import time
from typing import Any, Mapping, Optional, Tuple, Type, TypeVar, Union

import requests
from pydantic import BaseModel, ValidationError

from checkout.models import ErrorResponse, ParamsModel

logger = logging.getLogger(__name__)

ENDPOINT_LIVE = "https://api.checkout.com"
ENDPOINT_SANDBOX = "https://api.sandbox.checkout.com"

HEADER_AUTHORIZATION = "Authorization"
HEADER_IDEMPOTENCY = "Cko-Idempotency-Key"

# Statuses >= 400 that carry a decodable error envelope, besides all 5xx.
ENVELOPE_STATUS_CODES = frozenset({401, 422, 429})

# 401 and 429 are usually sent without a body.
_BODYLESS_STATUS_CODES = frozenset({401, 429})

M = TypeVar("M", bound=BaseModel)


def has_error_envelope(status_code: int) -> bool:
    """Whether an error response with this status carries an ErrorResponse."""
    return status_code >= 500 or status_code in ENVELOPE_STATUS_CODES


# --- Error classes ---


class CheckoutError(Exception):
    """Base exception for all Checkout SDK errors."""

    status_code = 0


class CallError(CheckoutError):
    """The call could not be completed: encoding, transport or decoding failed.

    status_code is 0 when no response was received.
    """

    def __init__(self, message: str, status_code: int = 0, cause: BaseException = None):
        self.message = message
        self.status_code = status_code
        self.cause = cause
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class ServerError(CheckoutError):
    """Structured error returned by the API (401, 422, 429, 5xx)."""

    def __init__(self, status_code: int, response: Optional[ErrorResponse] = None):
        self.status_code = status_code
        self.response = response
        msg = f"Checkout API error {status_code}"
        if response is not None:
            if response.error_type:
                msg += f": {response.error_type}"
            if response.error_codes:
                msg += f" ({', '.join(response.error_codes)})"
            if response.request_id:
                msg += f" [request_id={response.request_id}]"
        super().__init__(msg)


class UnknownError(CheckoutError):
    """The API answered with a status the operation does not expect."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"error status code: {status_code}")


class CheckoutClient:
    """Client for the Checkout.com API. Entry point to the resource clients."""

    def __init__(
        self,
        secret_key: str,
        endpoint: str = ENDPOINT_LIVE,
        session: requests.Session = None,
        timeout: float = 30,
    ):
        self.secret_key = secret_key
        self.endpoint = endpoint.rstrip("/")
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    @classmethod
    def from_env(cls, endpoint: str = None, **kwargs) -> "CheckoutClient":
        """Build a client from CHECKOUT_SECRET_KEY and CHECKOUT_ENDPOINT.

        An explicit endpoint wins over CHECKOUT_ENDPOINT.
        """
        secret_key = os.getenv("CHECKOUT_SECRET_KEY", "")
        if not secret_key:
            raise ValueError("CHECKOUT_SECRET_KEY is not configured.")
        endpoint = endpoint or os.getenv("CHECKOUT_ENDPOINT") or ENDPOINT_LIVE
        return cls(secret_key=secret_key, endpoint=endpoint, **kwargs)

    def close(self):
        if self._owns_session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    @property
    def payments(self):
        """Client for the Payment resource."""
        from checkout.payment import PaymentClient

        return PaymentClient(self)

    @staticmethod
    def _encode(body: Union[BaseModel, Mapping[str, Any]]) -> bytes:
        if isinstance(body, ParamsModel):
            body = body.to_wire()
        elif isinstance(body, BaseModel):
            body = body.model_dump(mode="json", exclude_none=True)
        return json.dumps(body, separators=(",", ":")).encode("utf-8")

    def call(
        self,
        method: str,
        path: str,
        idempotency_key: Optional[str] = None,
        body: Union[BaseModel, Mapping[str, Any], None] = None,
        response_model: Optional[Type[M]] = None,
    ) -> Tuple[int, Optional[M]]:
        """Send a request and decode the response into response_model.

        Returns (status_code, result). result is None when no response_model
        was given or when the API answered with a 4xx status that does not
        carry an error envelope; such statuses (403, 404, ...) are left for
        the resource client to interpret.

        Raises:
            ServerError: 401, 422, 429 or 5xx. Carries the decoded envelope.
            CallError: Encoding, transport, reading or decoding failed.
        """
        data = None
        if body is not None:
            try:
                data = self._encode(body)
            except (TypeError, ValueError) as exc:
                raise CallError("failed to marshal request body", cause=exc) from exc

        url = f"{self.endpoint}{path}"
        headers = {
            "Content-Type": "application/json",
            HEADER_AUTHORIZATION: self.secret_key,
        }
        if idempotency_key:
            headers[HEADER_IDEMPOTENCY] = idempotency_key

        logger.debug(
            "Checkout request: %s %s",
            method,
            url,
            extra={"method": method, "url": url, "idempotent": bool(idempotency_key)},
        )

        start = time.monotonic()
        try:
            resp = self.session.request(
                method, url, data=data, headers=headers, timeout=self.timeout
            )
        except requests.RequestException as exc:
            raise CallError("failed to do request", cause=exc) from exc

        status_code = resp.status_code
        try:
            content = resp.content
        except requests.RequestException as exc:
            raise CallError("failed to read response body", status_code, exc) from exc

        logger.debug(
            "Checkout response: %s",
            status_code,
            extra={
                "status_code": status_code,
                "elapsed_ms": (time.monotonic() - start) * 1000,
            },
        )

        if status_code >= 400:
            if not has_error_envelope(status_code):
                # 403, 404 and friends mean different things per operation
                return status_code, None
            raise self._server_error(status_code, content)

        if response_model is None:
            return status_code, None

        try:
            return status_code, response_model.model_validate_json(content)
        except ValidationError as exc:
            raise CallError(
                f"failed to unmarshal response body: {content!r}", status_code, exc
            ) from exc

    @staticmethod
    def _server_error(status_code: int, content: bytes) -> ServerError:
        try:
            envelope = ErrorResponse.model_validate_json(content)
        except ValidationError as exc:
            if status_code in _BODYLESS_STATUS_CODES:
                return ServerError(status_code)
            raise CallError(
                f"failed to unmarshal response error with status {status_code}: {content!r}",
                status_code,
                exc,
            ) from exc
        return ServerError(status_code, envelope)

#!/usr/bin/env python3
"""
Checkout Quickstart — authorize, capture and refund a sandbox payment

This script walks through the payment lifecycle against the Checkout.com
sandbox using a test card.

What this does:
  1. Requests a payment with a test card, authorization only
  2. Looks the payment up again
  3. Captures it
  4. Refunds part of it
  5. Shows what a refused operation looks like (voiding a captured payment)

Prerequisites:
  pip install checkout-client
  export CHECKOUT_SECRET_KEY=sk_test_...

Usage:
  python quickstart.py                           # against the sandbox
  python quickstart.py --amount 1999 --currency EUR
"""

import argparse
import logging
import os
import sys
import uuid

from checkout import (
    ENDPOINT_SANDBOX,
    CheckoutClient,
    CheckoutError,
    PaymentError,
    ServerError,
)
from checkout.models import (
    CaptureParams,
    CreateParams,
    CreationSource,
    RefundParams,
    SourceType,
)


TEST_CARD = "4242424242424242"


def print_step(n: int, title: str):
    print(f"\n{'='*60}")
    print(f"  Step {n}: {title}")
    print(f"{'='*60}\n")


def main():
    parser = argparse.ArgumentParser(description="Checkout payments quickstart")
    parser.add_argument(
        "--endpoint", default=None,
        help=f"API endpoint (default: CHECKOUT_ENDPOINT, else {ENDPOINT_SANDBOX})",
    )
    parser.add_argument("--amount", type=int, default=2500, help="Amount in minor units")
    parser.add_argument("--currency", default="USD")
    parser.add_argument("--debug", action="store_true", help="Log HTTP traffic")
    args = parser.parse_args()

    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    try:
        client = CheckoutClient.from_env(
            endpoint=args.endpoint or os.getenv("CHECKOUT_ENDPOINT") or ENDPOINT_SANDBOX
        )
    except ValueError as e:
        print(f"  {e}")
        sys.exit(1)
    print(f"Checkout endpoint: {client.endpoint}")

    reference = f"QS-{uuid.uuid4().hex[:8].upper()}"

    with client:
        # ─── Step 1: Authorize ─────────────────────────────────────────
        print_step(1, "Request a Payment")

        params = CreateParams(
            source=CreationSource(
                type=SourceType.CARD,
                number=TEST_CARD,
                expiry_month=12,
                expiry_year=2030,
                cvv="100",
            ),
            amount=args.amount,
            currency=args.currency,
            capture=False,
            reference=reference,
        )
        try:
            payment = client.payments.create(params, idempotency_key=f"{reference}-create")
        except ServerError as e:
            print(f"  Payment request rejected: {e}")
            if e.response is not None:
                print(f"  Error codes: {', '.join(e.response.error_codes)}")
            sys.exit(1)

        print(f"  Payment: {payment.id}")
        print(f"  Status: {payment.status} (approved: {payment.approved})")
        print(f"  Card: {payment.source.scheme} ****{payment.source.last4}")

        # ─── Step 2: Look it up ────────────────────────────────────────
        print_step(2, "Get Payment Details")

        payment = client.payments.get(payment.id)
        print(f"  Status: {payment.status}")
        print(f"  Processed on: {payment.processed_on}")

        # ─── Step 3: Capture ───────────────────────────────────────────
        print_step(3, "Capture")

        client.payments.capture(payment.id, CaptureParams(reference=f"{reference}-capture"))
        print("  Capture accepted.")

        # ─── Step 4: Partial refund ────────────────────────────────────
        print_step(4, "Refund Half")

        try:
            client.payments.refund(
                payment.id,
                RefundParams(amount=args.amount // 2, reference=f"{reference}-refund"),
                idempotency_key=f"{reference}-refund",
            )
            print("  Refund accepted.")
        except PaymentError as e:
            # The capture may still be processing
            print(f"  {e}")

        # ─── Step 5: A refused operation ───────────────────────────────
        print_step(5, "Void a Captured Payment")

        try:
            client.payments.void(payment.id)
            print("  Void accepted (unexpected for a captured payment).")
        except PaymentError as e:
            print(f"  Refused as expected: {e}")
        except CheckoutError as e:
            print(f"  Call failed: {e}")

    print(f"\n{'='*60}")
    print("  Quickstart complete!")
    print(f"{'='*60}")


if __name__ == "__main__":
    main()

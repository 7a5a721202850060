"""
Wire records for the Checkout.com payments API.

These mirror the provider's JSON schema field for field. Responses are
decoded leniently: unknown fields are ignored and missing fields fall back to
empty values, so a partial body still produces a usable record. Request
params drop unset optional fields when encoded.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Status(str, Enum):
    AUTHORIZED = "Authorized"
    CAPTURED = "Captured"
    CARD_VERIFIED = "Card Verified"
    DECLINED = "Declined"
    PENDING = "Pending"


class SourceType(str, Enum):
    CARD = "card"
    TOKEN = "token"
    ID = "id"


class SourceScheme(str, Enum):
    VISA = "Visa"
    MASTERCARD = "Mastercard"
    AMERICAN_EXPRESS = "American Express"
    JCB = "JCB"
    DINERS_CLUB = "Diners Club International"
    DISCOVER = "Discover"


class CardType(str, Enum):
    CREDIT = "Credit"
    DEBIT = "Debit"
    PREPAID = "Prepaid"
    CHARGE = "Charge"


class WireModel(BaseModel):
    """Base for records decoded from provider responses."""

    model_config = ConfigDict(extra="ignore")


class ParamsModel(BaseModel):
    """Base for request bodies. Encoded with unset optionals omitted."""

    model_config = ConfigDict(extra="forbid", use_enum_values=True)

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


# --- Response records ---


class BillingAddress(WireModel):
    address_line1: str = ""
    address_line2: str = ""
    zip: str = ""
    city: str = ""
    state: str = ""
    country: str = ""


# Enum-like fields are plain strings: the provider owns the vocabulary and
# may send values newer than the enums above. Str enums compare equal to them.
class Source(WireModel):
    id: str = ""
    type: str = ""
    billing_address: BillingAddress = Field(default_factory=BillingAddress)
    expiry_month: int = 0
    expiry_year: int = 0
    name: str = ""
    scheme: str = ""
    last4: str = ""
    fingerprint: str = ""
    bin: str = ""
    card_type: str = ""
    card_category: str = ""
    issuer: str = ""
    issuer_country: str = ""
    product_id: str = ""
    product_type: str = ""
    avs_check: str = ""
    cvv_check: str = ""


class Customer(WireModel):
    id: str = ""
    email: str = ""
    name: str = ""


class Risk(WireModel):
    flagged: bool = False


class Payment(WireModel):
    id: str = ""
    action_id: str = ""
    amount: int = 0
    currency: str = ""
    approved: bool = False
    status: str = ""
    auth_code: str = ""
    eci: str = ""
    scheme_id: str = ""
    response_code: str = ""
    response_summary: str = ""
    risk: Risk = Field(default_factory=Risk)
    source: Source = Field(default_factory=Source)
    customer: Customer = Field(default_factory=Customer)
    processed_on: Optional[datetime] = None
    reference: str = ""


class ErrorResponse(WireModel):
    """Error envelope returned with validation and server errors.

    https://docs.checkout.com/v2.0/docs/validation-errors
    """

    request_id: str = ""
    error_type: str = ""
    error_codes: List[str] = Field(default_factory=list)


# --- Request params ---


class CreationSource(ParamsModel):
    type: SourceType
    id: Optional[str] = None  # type "id"
    token: Optional[str] = None  # type "token"
    number: Optional[str] = None  # type "card"
    expiry_month: Optional[int] = None  # type "card"
    expiry_year: Optional[int] = None  # type "card"
    cvv: Optional[str] = None


class CreateParams(ParamsModel):
    source: CreationSource
    amount: int = Field(ge=0)
    currency: str
    capture: Optional[bool] = None
    description: Optional[str] = None
    reference: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


class VoidParams(ParamsModel):
    reference: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


class RefundParams(ParamsModel):
    amount: Optional[int] = Field(default=None, ge=0)
    reference: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


class CaptureParams(ParamsModel):
    amount: Optional[int] = Field(default=None, ge=0)
    reference: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None

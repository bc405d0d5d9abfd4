"""
Pydantic models for invoice data.

``InvoiceForm`` describes the fields a user submits from the create and
edit forms; ``InvoiceDraft`` adds the date assigned on creation.
``InvoiceRead`` mirrors a row of the ``invoices`` table, where the
amount is stored as integer cents.  ``InvoiceActionState`` is the
value every mutation hands back to the form when it does not redirect.
"""

import datetime
from decimal import Decimal
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


# Smallest amount that rounds to one cent, and the largest whose cents
# still fit the signed 64-bit INTEGER column.
MIN_AMOUNT = Decimal("0.005")
MAX_AMOUNT = Decimal("92233720368547758.07")


class InvoiceStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"


class InvoiceForm(BaseModel):
    """Validated fields of the create/edit invoice form."""

    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    customer_id: str = Field(..., alias="customerId", min_length=1, examples=["3958dc9e-712f-4377"])
    amount: Decimal = Field(
        ...,
        ge=MIN_AMOUNT,
        le=MAX_AMOUNT,
        examples=["45.5"],
        description="Monto en S/.",
    )
    status: InvoiceStatus = Field(..., examples=["pending"])


class InvoiceDraft(InvoiceForm):
    """Invoice ready to be inserted: form fields plus the issue date."""

    date: datetime.date


class InvoiceRead(BaseModel):
    """Schema for reading a stored invoice (amount in cents)."""

    id: str
    customer_id: str
    amount: int
    status: InvoiceStatus
    date: datetime.date

    model_config = ConfigDict(from_attributes=True)


class InvoiceListItem(InvoiceRead):
    """Row of the invoice list view, joined with the customer."""

    name: str
    email: str
    image_url: Optional[str] = None


class InvoiceDetail(BaseModel):
    """Invoice as shown in the edit form, amount in major units."""

    id: str
    customer_id: str
    amount: Decimal
    status: InvoiceStatus


class InvoiceFieldErrors(BaseModel):
    """Per‑field error messages, keyed like the form inputs."""

    model_config = ConfigDict(populate_by_name=True)

    customer_id: Optional[List[str]] = Field(None, alias="customerId")
    amount: Optional[List[str]] = None
    status: Optional[List[str]] = None


class InvoiceActionState(BaseModel):
    """Outcome returned by create/update/delete when they do not redirect."""

    message: Optional[str] = None
    errors: Optional[InvoiceFieldErrors] = None

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)

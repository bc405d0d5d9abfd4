"""
Pydantic models for customer data.

Customers are only read by the dashboard (to fill the customer
selector of the invoice form and to decorate the invoice list).
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CustomerBase(BaseModel):
    name: str = Field(..., examples=["Lee Robinson"])
    email: str = Field(..., examples=["lee@robinson.com"])
    image_url: Optional[str] = Field(None, examples=["/customers/lee-robinson.png"])


class CustomerCreate(CustomerBase):
    """Schema for registering a customer from the management CLI."""
    pass


class CustomerRead(CustomerBase):
    """Schema for reading a customer from the API."""

    id: str

    model_config = ConfigDict(from_attributes=True)

# =============================================================================
# core/models/customer.py - Customer Schemas
# =============================================================================
# - Customer: A customer record as stored by the Functions API
# - CustomerForm: Validated input from the create/edit customer forms
#
# The remote API assigns the id. It is never sent back in a request body.
# =============================================================================

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .base import ApiModel

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class Customer(ApiModel):
    """
    Customer record.

    Example (wire format):
        {
            "id": "c-001",
            "name": "Thandi",
            "surname": "Mokoena",
            "username": "thandi.m",
            "email": "thandi@example.com",
            "shippingAddress": "12 Long Street, Cape Town"
        }
    """

    id: str | None = Field(default=None, description="Server-assigned identifier")
    name: str = ""
    surname: str = ""
    username: str = ""
    email: str = ""
    shipping_address: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.name} {self.surname}".strip()

    def to_payload(self) -> dict[str, Any]:
        """Request body for create/update (mutable fields only)."""
        return self.model_dump(by_alias=True, exclude={"id"})


class CustomerForm(BaseModel):
    """Customer form submission."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=100)
    surname: str = Field(..., min_length=1, max_length=100)
    username: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=3, max_length=254, pattern=EMAIL_PATTERN)
    shipping_address: str = Field(..., min_length=1, max_length=500)

    def to_customer(self, customer_id: str | None = None) -> Customer:
        return Customer(id=customer_id, **self.model_dump())

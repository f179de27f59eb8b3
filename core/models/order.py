# =============================================================================
# core/models/order.py - Order Schemas
# =============================================================================
# These models define the contract for order operations:
# - OrderStatus: Enum of lifecycle states (driven by the Functions API)
# - OrderDto: Wire representation, status carried as free text
# - Order: In-process model with a decoded OrderStatus
# - OrderCreateForm / OrderStatusForm: Validated form input
#
# Flow:
# 1. User picks a customer, product and quantity -> OrderCreateForm
# 2. The API prices the order, decrements stock and timestamps it
# 3. The API answers with an OrderDto which is decoded into an Order
# =============================================================================

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .base import ApiModel

# Orders the API sent without a timestamp sort last
UNKNOWN_ORDER_DATE = datetime.min.replace(tzinfo=timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Naive timestamps are taken to be UTC; aware ones are converted."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class OrderStatus(str, Enum):
    """
    Order lifecycle states.

    - Submitted: Order placed, not yet picked up (baseline)
    - Processing: Being prepared for shipping
    - Completed: Delivered
    - Cancelled: Abandoned before completion

    The Functions API decides every transition; this app only displays and
    forwards status changes.
    """
    SUBMITTED = "Submitted"
    PROCESSING = "Processing"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"

    @classmethod
    def parse(cls, text: str | None) -> "OrderStatus":
        """Case-insensitive lookup, falling back to SUBMITTED."""
        if text:
            wanted = text.strip().lower()
            for status in cls:
                if status.value.lower() == wanted:
                    return status
        return cls.SUBMITTED


class OrderDto(ApiModel):
    """Order as sent over the wire."""

    id: str = ""
    customer_id: str = ""
    product_id: str = ""
    product_name: str = ""
    quantity: int = 0
    unit_price: Decimal = Decimal("0")
    order_date_utc: datetime = UNKNOWN_ORDER_DATE
    status: str | None = None

    @field_validator("order_date_utc")
    @classmethod
    def _normalize_order_date(cls, value: datetime) -> datetime:
        return as_utc(value)

    def to_order(self) -> "Order":
        return Order(
            id=self.id,
            customer_id=self.customer_id,
            product_id=self.product_id,
            product_name=self.product_name,
            quantity=self.quantity,
            unit_price=self.unit_price,
            order_date_utc=self.order_date_utc,
            status=OrderStatus.parse(self.status),
        )


class Order(ApiModel):
    """Order with its status decoded."""

    id: str = ""
    customer_id: str = ""
    product_id: str = ""
    product_name: str = ""
    quantity: int = 0
    unit_price: Decimal = Decimal("0")
    order_date_utc: datetime = UNKNOWN_ORDER_DATE
    status: OrderStatus = OrderStatus.SUBMITTED

    @field_validator("order_date_utc")
    @classmethod
    def _normalize_order_date(cls, value: datetime) -> datetime:
        return as_utc(value)

    @property
    def total_price(self) -> Decimal:
        return self.unit_price * self.quantity


class OrderCreateForm(BaseModel):
    """
    Place-order form submission.

    Only references and quantity are collected. Pricing comes from the API.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    customer_id: str = Field(..., min_length=1)
    product_id: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=1, le=10_000)


class OrderStatusForm(BaseModel):
    """Edit-order form submission (status is the only editable field)."""

    status: OrderStatus

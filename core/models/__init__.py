# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - base.py: ApiModel (camelCase wire keys, case-insensitive input)
# - customer.py: Customer record and form
# - product.py: Product record and form
# - order.py: Order, wire DTO, status enum and forms
# - upload.py: In-memory attached file
#
# These models define the "contract" between this app and the Functions API.
# =============================================================================

from .base import ApiModel

# -----------------------------------------------------------------------------
# Customer Models
# -----------------------------------------------------------------------------
from .customer import Customer, CustomerForm

# -----------------------------------------------------------------------------
# Product Models
# -----------------------------------------------------------------------------
from .product import Product, ProductForm

# -----------------------------------------------------------------------------
# Order Models
# -----------------------------------------------------------------------------
from .order import (
    Order,
    OrderCreateForm,
    OrderDto,
    OrderStatus,
    OrderStatusForm,
)

# -----------------------------------------------------------------------------
# Upload Models
# -----------------------------------------------------------------------------
from .upload import DEFAULT_CONTENT_TYPE, UploadedFile

__all__ = [
    "ApiModel",
    # Customer
    "Customer",
    "CustomerForm",
    # Product
    "Product",
    "ProductForm",
    # Order
    "Order",
    "OrderCreateForm",
    "OrderDto",
    "OrderStatus",
    "OrderStatusForm",
    # Upload
    "DEFAULT_CONTENT_TYPE",
    "UploadedFile",
]

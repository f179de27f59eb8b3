# =============================================================================
# core/models/product.py - Product Schemas
# =============================================================================
# - Product: A catalogue item as stored by the Functions API
# - ProductForm: Validated input from the create/edit product forms
#
# Products are written as multipart form data (see RetailApiClient), so
# there is no JSON payload helper here.
# =============================================================================

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from .base import ApiModel


class Product(ApiModel):
    """
    Product record.

    stock_available is expected to be >= 0 but the server owns that rule.
    image_url points at the blob the server stored for the product image.
    """

    id: str | None = Field(default=None, description="Server-assigned identifier")
    product_name: str = ""
    description: str | None = None
    price: Decimal = Decimal("0")
    stock_available: int = 0
    image_url: str | None = None


class ProductForm(BaseModel):
    """Product form submission (the image file travels separately)."""

    model_config = ConfigDict(str_strip_whitespace=True)

    product_name: str = Field(..., min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=2000)
    price: Decimal = Field(..., ge=0, decimal_places=2)
    stock_available: int = Field(...)
    image_url: str | None = None

    def to_product(self, product_id: str | None = None) -> Product:
        return Product(
            id=product_id,
            product_name=self.product_name,
            description=self.description or None,
            price=self.price,
            stock_available=self.stock_available,
            image_url=self.image_url or None,
        )

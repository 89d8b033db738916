"""API schemas for the catalog facade.

Pydantic models for response serialization.
"""

from pydantic import BaseModel, Field

from catalog_facade.catalog.models import Product, ProductCategory
from catalog_facade.infrastructure.grpc_client import LocalRemoteProduct


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


# ============================================================================
# Local Catalog Schemas
# ============================================================================


class ProductSchema(BaseModel):
    """Product from the local in-memory catalog."""

    id: int = Field(..., description="Product ID")
    name: str = Field(..., description="Product name")
    category: ProductCategory = Field(..., description="Category label")
    price: float = Field(..., ge=0, description="Price with two decimal places")

    @classmethod
    def from_product(cls, product: Product) -> "ProductSchema":
        return cls(
            id=product.id,
            name=product.name,
            category=product.category,
            price=float(product.price),
        )


# ============================================================================
# Remote Catalog Schemas
# ============================================================================


# Remote records are served in their translated local form as-is.
RemoteProductSchema = LocalRemoteProduct


class ConnectionTestProduct(BaseModel):
    """Product summary returned by the connection test."""

    id: int
    name: str
    price: float


class ConnectionTestResponse(BaseModel):
    """Result of exercising both remote operations."""

    success: bool
    message: str
    target: str | None = Field(default=None, description="Remote host:port")
    single_product: ConnectionTestProduct
    total_products: int

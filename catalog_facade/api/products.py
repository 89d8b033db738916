"""Local catalog endpoints.

Serves the in-memory catalog, including the degraded-latency listing
used to exercise client timeouts.
"""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, HTTPException, Path, status

from catalog_facade.api.dependencies import get_catalog_store
from catalog_facade.api.schemas import ErrorResponse, ProductSchema
from catalog_facade.catalog.store import CatalogStore

logger = structlog.get_logger()

router = APIRouter(prefix="/api", tags=["Products"])

StoreDep = Annotated[CatalogStore, Depends(get_catalog_store)]


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "/products",
    response_model=list[ProductSchema],
    summary="List products",
    description="Get every product after a 100-400 ms simulated backend delay.",
)
async def list_products(store: StoreDep) -> list[ProductSchema]:
    """List all products with normal latency."""
    products = await store.get_all()
    return [ProductSchema.from_product(p) for p in products]


@router.get(
    "/products-delayed",
    response_model=list[ProductSchema],
    summary="List products (degraded)",
    description="Get every product after a 5-15 s simulated backend delay.",
)
async def list_products_delayed(store: StoreDep) -> list[ProductSchema]:
    """List all products with degraded latency."""
    products = await store.get_all_delayed()
    return [ProductSchema.from_product(p) for p in products]


@router.get(
    "/products/{product_id}",
    response_model=ProductSchema,
    responses={404: {"model": ErrorResponse}},
    summary="Get product",
)
async def get_product(
    store: StoreDep,
    product_id: Annotated[int, Path(description="Product ID")],
) -> ProductSchema:
    """Get a single product by ID.

    Raises:
        HTTPException: 404 if the product does not exist.
    """
    product = store.get_by_id(product_id)
    if product is None:
        logger.debug("Product not found", product_id=product_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={
                "error_code": "NOT_FOUND",
                "message": f"Product {product_id} not found",
            },
        )
    return ProductSchema.from_product(product)

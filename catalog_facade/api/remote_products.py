"""Remote catalog endpoints.

Bridges REST requests to the remote gRPC catalog and translates the
wire records into the local representation. Remote failures are not
handled here; they reach the application's exception handlers.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path
from fastapi.responses import PlainTextResponse

from catalog_facade.api.dependencies import get_remote_client
from catalog_facade.api.schemas import (
    ConnectionTestProduct,
    ConnectionTestResponse,
    ErrorResponse,
    RemoteProductSchema,
)
from catalog_facade.application.health import check_remote
from catalog_facade.infrastructure.grpc_client import RemoteCatalogClient, translate_to_local

router = APIRouter(prefix="/api/grpc", tags=["Remote Products"])

ClientDep = Annotated[RemoteCatalogClient, Depends(get_remote_client)]

REMOTE_ERROR_RESPONSES = {503: {"model": ErrorResponse, "description": "Remote catalog unavailable"}}

# Product ids are int32 on the wire.
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "/products",
    response_model=list[RemoteProductSchema],
    responses=REMOTE_ERROR_RESPONSES,
    summary="List remote products",
)
async def list_remote_products(client: ClientDep) -> list[RemoteProductSchema]:
    """List all products from the remote catalog."""
    products = await client.get_all_products()
    return [translate_to_local(p) for p in products]


@router.get(
    "/products/{product_id}",
    response_model=RemoteProductSchema,
    responses=REMOTE_ERROR_RESPONSES,
    summary="Get remote product",
)
async def get_remote_product(
    client: ClientDep,
    product_id: Annotated[
        int, Path(ge=INT32_MIN, le=INT32_MAX, description="Remote product ID")
    ],
) -> RemoteProductSchema:
    """Get a single product from the remote catalog."""
    product = await client.get_product_by_id(product_id)
    return translate_to_local(product)


@router.get(
    "/health",
    response_class=PlainTextResponse,
    summary="Remote catalog liveness",
)
async def remote_health(client: ClientDep) -> PlainTextResponse:
    """Report ``UP`` or ``DOWN`` for the remote catalog."""
    status = await check_remote(client)
    return PlainTextResponse(status.value)


@router.get(
    "/test-connection",
    response_model=ConnectionTestResponse,
    responses=REMOTE_ERROR_RESPONSES,
    summary="Exercise both remote operations",
)
async def test_connection(client: ClientDep) -> ConnectionTestResponse:
    """Fetch product 1 and the full list to verify the remote contract."""
    product = translate_to_local(await client.get_product_by_id(1))
    products = await client.get_all_products()

    return ConnectionTestResponse(
        success=True,
        message="gRPC connection test successful",
        target=client.target,
        single_product=ConnectionTestProduct(
            id=product.id,
            name=product.name,
            price=product.price,
        ),
        total_products=len(products),
    )

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from starlette.requests import ClientDisconnect

from catalog.api.dependencies import get_product_service
from catalog.core.config import Settings, get_settings
from catalog.core.rate_limit import limiter, mutation_limit, rate_limit_disabled
from catalog.domain.models import Product, ProductCreate
from catalog.domain.ports import (
    MalformedPayloadError,
    PayloadTooLargeError,
    ProductNotFoundError,
    TransportError,
)
from catalog.services.payload import decode_product, read_bounded_body
from catalog.services.product_service import ProductService

router = APIRouter(tags=["Products"])

ServiceDep = Annotated[ProductService, Depends(get_product_service)]
SettingsDep = Annotated[Settings, Depends(get_settings)]


async def _read_body(request: Request, max_bytes: int) -> bytes:
    try:
        return await read_bounded_body(request.stream(), max_bytes)
    except ClientDisconnect as e:
        raise TransportError("client disconnected") from e


def _bad_request(e: Exception) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


def _not_found(e: ProductNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/", response_model=list[Product])
async def list_products(service: ServiceDep) -> list[Product]:
    return service.list_products()


@router.get("/{product_id}", response_model=Product)
async def get_product(product_id: int, service: ServiceDep) -> Product:
    try:
        return service.get_product(product_id)
    except ProductNotFoundError as e:
        raise _not_found(e)


@router.post("/", response_model=Product)
@limiter.limit(mutation_limit, exempt_when=rate_limit_disabled)
async def create_product(
    request: Request,
    service: ServiceDep,
    settings: SettingsDep,
) -> Product:
    """
    Creates a product. Any id in the body is ignored; the store assigns one.
    """
    try:
        body = await _read_body(request, settings.max_payload_bytes)
        payload = decode_product(body, ProductCreate)
    except (PayloadTooLargeError, MalformedPayloadError, TransportError) as e:
        raise _bad_request(e)
    return service.create_product(payload)


@router.put("/", response_model=Product)
@limiter.limit(mutation_limit, exempt_when=rate_limit_disabled)
async def replace_product(
    request: Request,
    service: ServiceDep,
    settings: SettingsDep,
) -> Product:
    """
    Completely replaces the product whose id is given in the body.
    """
    try:
        body = await _read_body(request, settings.max_payload_bytes)
        payload = decode_product(body, Product)
    except (PayloadTooLargeError, MalformedPayloadError, TransportError) as e:
        raise _bad_request(e)

    try:
        return service.update_product(payload)
    except ProductNotFoundError as e:
        raise _not_found(e)


@router.delete("/{product_id}")
@limiter.limit(mutation_limit, exempt_when=rate_limit_disabled)
async def delete_product(request: Request, product_id: int, service: ServiceDep) -> Response:
    try:
        service.delete_product(product_id)
    except ProductNotFoundError as e:
        raise _not_found(e)
    return Response(status_code=status.HTTP_200_OK)

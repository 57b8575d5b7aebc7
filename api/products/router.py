"""
Product API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from auth import dependencies as auth_dependencies

from . import schemas, service

router = APIRouter(prefix="/products")


@router.get("", response_model=schemas.ProductListResponse)
async def list_products() -> schemas.ProductListResponse:
    return service.list_products()


@router.get("/{product_id}", response_model=schemas.ProductResponse)
async def get_product(product_id: int) -> schemas.ProductResponse:
    return service.get_product(product_id)


@router.post(
    "",
    response_model=schemas.ProductResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_product(
    request: schemas.ProductRequest,
    response: Response,
    _: dict | None = Depends(auth_dependencies.require_writer),
) -> schemas.ProductResponse:
    created = service.create_product(request)
    response.headers["Location"] = f"/products/{created.id}"
    return created


@router.put("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_product(
    product_id: int,
    request: schemas.ProductRequest,
    _: dict | None = Depends(auth_dependencies.require_writer),
) -> Response:
    service.update_product(product_id, request)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: int,
    _: dict | None = Depends(auth_dependencies.require_writer),
) -> Response:
    service.delete_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

"""
Product business logic.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from . import repository, schemas

logger = logging.getLogger(__name__)


def _not_found(product_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Product {product_id} not found.",
    )


def _to_response(product_id: int, product: repository.Product) -> schemas.ProductResponse:
    return schemas.ProductResponse(
        id=product_id,
        name=product.name,
        price=product.price,
        description=product.description,
    )


def _to_record(payload: schemas.ProductRequest) -> repository.Product:
    return repository.Product(
        name=payload.name,
        price=payload.price,
        description=payload.description,
    )


def list_products() -> schemas.ProductListResponse:
    items = [_to_response(i, product) for i, product in repository.list_products()]
    return schemas.ProductListResponse(items=items, count=len(items))


def get_product(product_id: int) -> schemas.ProductResponse:
    product = repository.get_product(product_id)
    if product is None:
        raise _not_found(product_id)
    return _to_response(product_id, product)


def create_product(payload: schemas.ProductRequest) -> schemas.ProductResponse:
    product = _to_record(payload)
    product_id = repository.insert_product(product)
    logger.info("product_created id=%s name=%s", product_id, product.name)
    return _to_response(product_id, product)


def update_product(product_id: int, payload: schemas.ProductRequest) -> None:
    if not repository.replace_product(product_id, _to_record(payload)):
        raise _not_found(product_id)
    logger.info("product_updated id=%s", product_id)


def delete_product(product_id: int) -> None:
    if not repository.delete_product(product_id):
        raise _not_found(product_id)
    logger.info("product_deleted id=%s", product_id)

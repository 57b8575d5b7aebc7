"""
Product persistence (in-memory, stable ids).

Unlike forecasts, a product keeps the id it was created with: deleting one
product never renumbers the others, and deleted ids are not reused.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from core.store import KeyedResourceStore


@dataclass(frozen=True)
class Product:
    name: str
    price: Decimal
    description: str | None = None


_store: KeyedResourceStore[Product] | None = None


def init_store() -> None:
    global _store
    if _store is not None:
        return None
    _store = KeyedResourceStore()


def close_store() -> None:
    global _store
    _store = None


def store() -> KeyedResourceStore[Product]:
    if _store is None:
        raise RuntimeError("Product store is not initialized. Call init_store() on startup.")
    return _store


def list_products() -> list[tuple[int, Product]]:
    return store().items()


def get_product(product_id: int) -> Product | None:
    return store().get(product_id)


def insert_product(product: Product) -> int:
    return store().add(product)


def replace_product(product_id: int, product: Product) -> bool:
    return store().update(product_id, product)


def delete_product(product_id: int) -> bool:
    return store().delete(product_id)

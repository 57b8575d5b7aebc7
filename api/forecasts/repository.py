"""
Forecast persistence (in-memory, positional identity).

A forecast's id is its index in the store. The store is created once per
process by `init_store()` (see `api/main.py`) and dropped by `close_store()`.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass

from core.store import ResourceStore


@dataclass(frozen=True)
class Forecast:
    date: dt.date
    temperature_c: int
    summary: str | None = None


_store: ResourceStore[Forecast] | None = None


def init_store() -> None:
    global _store
    if _store is not None:
        return None
    _store = ResourceStore()


def close_store() -> None:
    global _store
    _store = None


def store() -> ResourceStore[Forecast]:
    if _store is None:
        raise RuntimeError("Forecast store is not initialized. Call init_store() on startup.")
    return _store


def list_forecasts() -> list[tuple[int, Forecast]]:
    return store().items()


def get_forecast(position: int) -> Forecast | None:
    return store().get(position)


def insert_forecast(forecast: Forecast) -> int:
    return store().add(forecast)


def replace_forecast(position: int, forecast: Forecast) -> bool:
    return store().update(position, forecast)


def delete_forecast(position: int) -> bool:
    return store().delete(position)


def count_forecasts() -> int:
    return len(store())

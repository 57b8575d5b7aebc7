"""
Forecast business logic.

Store absence (None / False) becomes a 404 here; nothing below this layer
raises for a missing forecast.
"""

from __future__ import annotations

import datetime as dt
import logging
import random

from fastapi import HTTPException, status

from . import repository, schemas

SUMMARIES = (
    "Freezing",
    "Bracing",
    "Chilly",
    "Cool",
    "Mild",
    "Warm",
    "Balmy",
    "Hot",
    "Sweltering",
    "Scorching",
)

logger = logging.getLogger(__name__)


def fahrenheit(temperature_c: int) -> int:
    return 32 + int(temperature_c / 0.5556)


def _not_found(forecast_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Forecast {forecast_id} not found.",
    )


def _to_response(forecast_id: int, forecast: repository.Forecast) -> schemas.ForecastResponse:
    return schemas.ForecastResponse(
        id=forecast_id,
        date=forecast.date,
        temperature_c=forecast.temperature_c,
        temperature_f=fahrenheit(forecast.temperature_c),
        summary=forecast.summary,
    )


def _to_record(payload: schemas.ForecastRequest) -> repository.Forecast:
    return repository.Forecast(
        date=payload.date,
        temperature_c=payload.temperature_c,
        summary=payload.summary,
    )


def list_forecasts() -> schemas.ForecastListResponse:
    items = [_to_response(i, forecast) for i, forecast in repository.list_forecasts()]
    return schemas.ForecastListResponse(items=items, count=len(items))


def get_forecast(forecast_id: int) -> schemas.ForecastResponse:
    forecast = repository.get_forecast(forecast_id)
    if forecast is None:
        raise _not_found(forecast_id)
    return _to_response(forecast_id, forecast)


def create_forecast(payload: schemas.ForecastRequest) -> schemas.ForecastResponse:
    forecast = _to_record(payload)
    forecast_id = repository.insert_forecast(forecast)
    logger.info("forecast_created id=%s date=%s", forecast_id, forecast.date)
    return _to_response(forecast_id, forecast)


def update_forecast(forecast_id: int, payload: schemas.ForecastRequest) -> None:
    if not repository.replace_forecast(forecast_id, _to_record(payload)):
        raise _not_found(forecast_id)
    logger.info("forecast_updated id=%s", forecast_id)


def delete_forecast(forecast_id: int) -> None:
    if not repository.delete_forecast(forecast_id):
        raise _not_found(forecast_id)
    logger.info("forecast_deleted id=%s remaining=%s", forecast_id, repository.count_forecasts())


def seed_forecasts(count: int, *, start: dt.date | None = None, rng: random.Random | None = None) -> int:
    """
    Append `count` random forecasts for the days following `start`.

    Returns the number of forecasts added.
    """
    if count <= 0:
        return 0
    rng = rng or random.Random()
    start = start or dt.date.today()
    for offset in range(1, count + 1):
        repository.insert_forecast(
            repository.Forecast(
                date=start + dt.timedelta(days=offset),
                temperature_c=rng.randrange(-20, 55),
                summary=rng.choice(SUMMARIES),
            )
        )
    logger.info("forecasts_seeded count=%s", count)
    return count

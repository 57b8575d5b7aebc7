"""
Forecast API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from auth import dependencies as auth_dependencies

from . import schemas, service

router = APIRouter(prefix="/forecasts")


@router.get("", response_model=schemas.ForecastListResponse)
async def list_forecasts() -> schemas.ForecastListResponse:
    return service.list_forecasts()


@router.get("/{forecast_id}", response_model=schemas.ForecastResponse)
async def get_forecast(forecast_id: int) -> schemas.ForecastResponse:
    return service.get_forecast(forecast_id)


@router.post(
    "",
    response_model=schemas.ForecastResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_forecast(
    request: schemas.ForecastRequest,
    response: Response,
    _: dict | None = Depends(auth_dependencies.require_writer),
) -> schemas.ForecastResponse:
    created = service.create_forecast(request)
    response.headers["Location"] = f"/forecasts/{created.id}"
    return created


@router.put("/{forecast_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_forecast(
    forecast_id: int,
    request: schemas.ForecastRequest,
    _: dict | None = Depends(auth_dependencies.require_writer),
) -> Response:
    service.update_forecast(forecast_id, request)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{forecast_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_forecast(
    forecast_id: int,
    _: dict | None = Depends(auth_dependencies.require_writer),
) -> Response:
    service.delete_forecast(forecast_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

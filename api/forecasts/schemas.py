"""
Forecast API schemas (request/response models).
"""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, Field


class ForecastRequest(BaseModel):
    date: dt.date
    temperature_c: int = Field(..., ge=-273)
    summary: str | None = Field(default=None, max_length=200)


class ForecastResponse(BaseModel):
    # Position in the forecast list; shifts when an earlier forecast is deleted.
    id: int
    date: dt.date
    temperature_c: int
    temperature_f: int
    summary: str | None = None


class ForecastListResponse(BaseModel):
    items: list[ForecastResponse]
    count: int

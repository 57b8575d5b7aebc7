# =============================================================================
# tests/test_forecasts.py - Forecast Resource Tests
# =============================================================================
# Service helpers (seeding, Fahrenheit conversion) and the /forecasts
# endpoints, where ids are list positions.
# =============================================================================

from __future__ import annotations

import datetime as dt
import random

import pytest
from fastapi import HTTPException

from forecasts import repository, schemas, service


# =============================================================================
# Service Tests
# =============================================================================

class TestForecastService:
    """Tests for forecast business logic without HTTP."""

    @pytest.mark.parametrize(
        "celsius,expected",
        [(0, 32), (20, 67), (-20, -3), (100, 211)],
    )
    def test_fahrenheit(self, celsius, expected):
        assert service.fahrenheit(celsius) == expected

    def test_seed_forecasts(self, stores):
        start = dt.date(2024, 1, 1)

        added = service.seed_forecasts(3, start=start, rng=random.Random(7))

        assert added == 3
        rows = repository.list_forecasts()
        assert [i for i, _ in rows] == [0, 1, 2]
        assert [f.date for _, f in rows] == [
            dt.date(2024, 1, 2),
            dt.date(2024, 1, 3),
            dt.date(2024, 1, 4),
        ]
        for _, forecast in rows:
            assert -20 <= forecast.temperature_c < 55
            assert forecast.summary in service.SUMMARIES

    def test_seed_zero(self, stores):
        assert service.seed_forecasts(0) == 0
        assert repository.count_forecasts() == 0

    def test_get_missing_raises_404(self, stores):
        with pytest.raises(HTTPException) as exc_info:
            service.get_forecast(0)

        assert exc_info.value.status_code == 404

    def test_update_missing_raises_404(self, stores):
        payload = schemas.ForecastRequest(date=dt.date(2024, 1, 1), temperature_c=5)

        with pytest.raises(HTTPException) as exc_info:
            service.update_forecast(3, payload)

        assert exc_info.value.status_code == 404
        assert repository.count_forecasts() == 0

    def test_repository_requires_init(self):
        repository.close_store()

        with pytest.raises(RuntimeError):
            repository.store()


# =============================================================================
# HTTP Tests
# =============================================================================

class TestForecastEndpoints:
    """Tests for the /forecasts routes."""

    def test_list_empty(self, client):
        response = client.get("/forecasts")

        assert response.status_code == 200
        assert response.json() == {"items": [], "count": 0}

    def test_create_returns_201_with_position_id(self, client, sample_forecast):
        response = client.post("/forecasts", json=sample_forecast)

        assert response.status_code == 201
        body = response.json()
        assert body["id"] == 0
        assert body["date"] == "2024-01-15"
        assert body["temperature_c"] == 20
        assert body["temperature_f"] == 67
        assert body["summary"] == "Mild"
        assert response.headers["location"] == "/forecasts/0"

    def test_get_by_id(self, client, sample_forecast):
        client.post("/forecasts", json=sample_forecast)

        response = client.get("/forecasts/0")

        assert response.status_code == 200
        assert response.json()["summary"] == "Mild"

    @pytest.mark.parametrize("forecast_id", [-1, 1, 99])
    def test_get_out_of_range_is_404(self, client, sample_forecast, forecast_id):
        client.post("/forecasts", json=sample_forecast)

        response = client.get(f"/forecasts/{forecast_id}")

        assert response.status_code == 404

    def test_update(self, client, sample_forecast):
        client.post("/forecasts", json=sample_forecast)

        response = client.put(
            "/forecasts/0",
            json={"date": "2024-01-16", "temperature_c": 35, "summary": "Hot"},
        )

        assert response.status_code == 204
        body = client.get("/forecasts/0").json()
        assert body["summary"] == "Hot"
        assert body["temperature_c"] == 35

    def test_update_missing_is_404(self, client, sample_forecast):
        response = client.put("/forecasts/0", json=sample_forecast)

        assert response.status_code == 404
        assert client.get("/forecasts").json()["count"] == 0

    def test_delete_shifts_ids(self, client):
        client.post("/forecasts", json={"date": "2024-01-01", "temperature_c": 1, "summary": "A"})
        client.post("/forecasts", json={"date": "2024-01-02", "temperature_c": 2, "summary": "B"})

        response = client.delete("/forecasts/0")

        assert response.status_code == 204
        listing = client.get("/forecasts").json()
        assert listing["count"] == 1
        assert listing["items"][0]["id"] == 0
        assert listing["items"][0]["summary"] == "B"
        assert client.get("/forecasts/1").status_code == 404

    def test_delete_missing_is_404(self, client):
        assert client.delete("/forecasts/0").status_code == 404

    def test_invalid_body_is_422(self, client):
        response = client.post("/forecasts", json={"date": "not-a-date", "temperature_c": 1})

        assert response.status_code == 422

    def test_non_integer_id_is_422(self, client):
        assert client.get("/forecasts/abc").status_code == 422

    def test_writes_require_token_when_enabled(self, auth_client, sample_forecast):
        assert auth_client.post("/forecasts", json=sample_forecast).status_code == 401
        assert auth_client.get("/forecasts").status_code == 200

    def test_writes_with_token_when_enabled(self, auth_client, auth_headers, sample_forecast):
        response = auth_client.post("/forecasts", json=sample_forecast, headers=auth_headers)

        assert response.status_code == 201
        assert auth_client.delete("/forecasts/0", headers=auth_headers).status_code == 204


class TestForecastSeeding:
    """Startup seeding through the app lifespan."""

    def test_lifespan_seeds_forecasts(self, monkeypatch):
        from fastapi.testclient import TestClient

        from main import app

        monkeypatch.setenv("SEED_FORECASTS", "4")
        with TestClient(app) as client:
            body = client.get("/forecasts").json()

        assert body["count"] == 4
        assert [item["id"] for item in body["items"]] == [0, 1, 2, 3]

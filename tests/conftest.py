# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Sets the environment before the app is imported and provides fixtures for
# the in-memory stores and the HTTP client.
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================

os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("SEED_FORECASTS", "0")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from auth import repository as auth_repository
from forecasts import repository as forecast_repository
from products import repository as product_repository


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def stores():
    """Fresh feature stores for service-level tests (no HTTP)."""
    auth_repository.init_store()
    forecast_repository.init_store()
    product_repository.init_store()
    yield
    product_repository.close_store()
    forecast_repository.close_store()
    auth_repository.close_store()


@pytest.fixture
def client(monkeypatch):
    """TestClient with a fresh app lifespan (empty stores, auth off)."""
    monkeypatch.delenv("REQUIRE_AUTH", raising=False)

    from main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_client(client, monkeypatch):
    """Client against an app that requires a bearer token for writes."""
    monkeypatch.setenv("REQUIRE_AUTH", "true")
    return client


@pytest.fixture
def auth_headers(client):
    """Register a user and return its Authorization header."""
    response = client.post(
        "/auth/register",
        json={"email": "writer@example.com", "password": "correct-horse"},
    )
    assert response.status_code == 201
    token = response.json()["tokens"]["access_token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def sample_forecast():
    return {"date": "2024-01-15", "temperature_c": 20, "summary": "Mild"}


@pytest.fixture
def sample_product():
    return {"name": "Widget", "price": "9.99", "description": "A widget."}

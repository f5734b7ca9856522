"""Tests for the health check endpoint."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.newsletter.presentation.api.health import router


@pytest.fixture
def client() -> TestClient:
    app = FastAPI()
    app.include_router(router)
    return TestClient(app)


def test_health_check_returns_200_with_empty_body(client: TestClient) -> None:
    response = client.get("/health_check")

    assert response.status_code == 200
    assert response.content == b""

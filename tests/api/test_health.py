from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError

from mentorhub.boundary.db import get_async_db


@pytest.fixture
def mock_db(app):
    db = AsyncMock()
    app.dependency_overrides[get_async_db] = lambda: db
    return db


def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Server Healthy"}


def test_health_check_db(client, mock_db):
    response = client.get("/health/db")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Database connection OK"}


def test_health_check_db_unreachable(client, mock_db):
    mock_db.execute.side_effect = OperationalError("SELECT 1", {}, Exception("refused"))
    response = client.get("/health/db")
    assert response.status_code == 503
    assert response.json()["status"] == "unhealthy"


def test_correlation_id_is_echoed(client):
    response = client.get("/health", headers={"X-Correlation-ID": "abc-123"})
    assert response.headers["X-Correlation-ID"] == "abc-123"

import pytest
from sqlalchemy.exc import OperationalError

from learnhub.boundary.db.connection import get_async_engine


class FakeConnection:
    def __init__(self, error: Exception | None = None) -> None:
        self.error = error

    async def execute(self, statement):
        if self.error:
            raise self.error


class FakeEngine:
    def __init__(self, error: Exception | None = None) -> None:
        self.error = error

    def connect(self):
        return self

    async def __aenter__(self):
        return FakeConnection(self.error)

    async def __aexit__(self, *exc_info):
        return False


def test_health_check(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Server Healthy"}


def test_health_check_should_return_correlation_header(client):
    response = client.get("/api/v1/health", headers={"X-Correlation-ID": "abc-123"})
    assert response.headers["X-Correlation-ID"] == "abc-123"


def test_health_check_db(client):
    client.app.dependency_overrides[get_async_engine] = lambda: FakeEngine()

    response = client.get("/api/v1/health/db")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Database connection OK"}


def test_health_check_db_unavailable(client):
    error = OperationalError("SELECT 1", {}, Exception("connection refused"))
    client.app.dependency_overrides[get_async_engine] = lambda: FakeEngine(error)

    response = client.get("/api/v1/health/db")

    assert response.status_code == 503
    assert response.json()["detail"] == "Database connection failed"

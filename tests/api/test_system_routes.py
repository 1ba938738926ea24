"""API tests for system routes, tracing and fallback error handling."""

import pytest

from src.core.container import get_login_account_handler
from src.main import app


class ExplodingHandler:
    async def handle(self, cmd):
        raise RuntimeError("database exploded")


@pytest.mark.api
class TestSystemRoutes:
    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "operational"

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "database": "up"}


@pytest.mark.api
class TestTracing:
    def test_trace_header_generated(self, client):
        response = client.get("/")

        assert response.headers["X-Trace-Id"]

    def test_trace_header_echoed(self, client):
        response = client.get("/", headers={"X-Trace-Id": "trace-abc"})

        assert response.headers["X-Trace-Id"] == "trace-abc"

    def test_trace_id_in_problem_details(self, client):
        response = client.post(
            "/api/v1/users", json={}, headers={"X-Trace-Id": "trace-abc"}
        )

        assert response.status_code == 400
        assert response.json()["trace_id"] == "trace-abc"


@pytest.mark.api
class TestFallbackErrors:
    def test_unknown_route(self, client):
        response = client.get("/api/v1/nothing-here")

        assert response.status_code == 404
        assert response.json()["status"] == 404

    def test_unhandled_exception_is_500_without_detail(self, client):
        app.dependency_overrides[get_login_account_handler] = lambda: ExplodingHandler()

        response = client.post(
            "/api/v1/sessions", json={"email": "bob@example.com", "password": "x"}
        )

        assert response.status_code == 500
        body = response.json()
        assert body["status"] == 500
        assert "exploded" not in body["detail"]

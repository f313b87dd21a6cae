"""Health endpoint tests."""

import pytest
from falcon.asgi import App
from falcon.testing import TestClient
from psycopg_pool import PoolTimeout

from aclgraph.interfaces.api.resources.health import HealthResource


@pytest.fixture
def client() -> TestClient:
    """Create test client with health endpoints."""
    app = App()
    health = HealthResource()
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    return TestClient(app)


def test_health_liveness(client: TestClient) -> None:
    """GET /v1/health returns 200."""
    result = client.simulate_get("/v1/health")
    assert result.status_code == 200
    assert result.json["status"] == "ok"


def test_health_ready(client: TestClient) -> None:
    """GET /v1/health/ready returns 200."""
    result = client.simulate_get("/v1/health/ready")
    assert result.status_code == 200
    assert result.json["status"] == "ready"


class UnreachablePool:
    """Pool whose connections always time out."""

    def connection(self, timeout=None):
        raise PoolTimeout("no connection available")


def test_health_ready_reports_unreachable_store() -> None:
    """GET /v1/health/ready returns 503 when the graph store is down."""
    app = App()
    app.add_route("/v1/health/ready", HealthResource(UnreachablePool()), suffix="ready")
    result = TestClient(app).simulate_get("/v1/health/ready")
    assert result.status_code == 503
    assert result.json["storage"] == "down"

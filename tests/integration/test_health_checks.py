"""
Health checks:
- /health y /health/live - liveness sin dependencias
- /health/db - conectividad de base de datos
- /health/ready - esquema completo y catálogo sembrado
"""

import sqlite3
from contextlib import closing
from pathlib import Path

from fastapi.testclient import TestClient


def _execute(database_path: Path, statement: str) -> None:
    with closing(sqlite3.connect(database_path)) as conn, conn:
        conn.execute(statement)


class TestHealthChecks:
    def test_basic_health_endpoint(self, client: TestClient):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "service": "car-rental-api"}

    def test_liveness_endpoint(self, client: TestClient):
        response = client.get("/health/live")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_database_health_check(self, client: TestClient):
        response = client.get("/health/db")
        assert response.status_code == 200, f"DB health check falló: {response.json()}"
        assert response.json() == {"status": "healthy", "component": "database"}

    def test_unknown_route_uses_error_body(self, client: TestClient):
        response = client.get("/api/nope")
        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}


class TestReadiness:
    def test_seeded_database_is_ready(self, client: TestClient):
        response = client.get("/health/ready")
        assert response.status_code == 200
        assert response.json() == {
            "status": "ready",
            "checks": {"schema": "ok", "locations": "ok", "cars": "ok"},
        }

    def test_empty_catalog_is_not_ready(self, client: TestClient, database_path: Path):
        _execute(database_path, "DELETE FROM cars")

        response = client.get("/health/ready")
        assert response.status_code == 503
        body = response.json()
        assert body["status"] == "not_ready"
        assert body["checks"]["cars"] == "empty"
        assert body["checks"]["locations"] == "ok"

    def test_missing_table_is_not_ready(self, client: TestClient, database_path: Path):
        _execute(database_path, "DROP TABLE payments")

        response = client.get("/health/ready")
        assert response.status_code == 503
        assert response.json()["checks"] == {"schema": "missing: payments"}

"""Integration tests for the REST API."""

import pytest
from fastapi.testclient import TestClient

from shelfgrid.web.app import create_app


@pytest.fixture
def client() -> TestClient:
    """Create a test client for a fresh application."""
    return TestClient(create_app())


class TestHealth:
    """Tests for the health endpoint."""

    def test_health(self, client: TestClient) -> None:
        """The service reports healthy."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestAnalyzeEndpoint:
    """Tests for POST /api/v1/analyze."""

    def test_default_design(self, client: TestClient) -> None:
        """An empty configuration analyzes the default design."""
        response = client.post("/api/v1/analyze", json={"config": {}})
        assert response.status_code == 200
        data = response.json()
        assert data["dimensions"]["ext_width"] == pytest.approx(28.65625)
        assert data["layout"]["present_verticals"] == [0, 1, 2]
        assert [p["id"] for p in data["parts"]][:2] == ["Top-0", "Bottom-0"]
        assert data["sheets"][0]["sheet_id"] == '23/32" Sheet 1'
        assert data["oversized_parts"] == []

    def test_without_sheets(self, client: TestClient) -> None:
        """Sheets are null when not requested."""
        response = client.post(
            "/api/v1/analyze", json={"config": {}, "include_sheets": False}
        )
        assert response.status_code == 200
        assert response.json()["sheets"] is None

    def test_doors_and_hardware(self, client: TestClient) -> None:
        """Door hardware is returned per door."""
        config = {
            "design": {
                "hasDoors": True,
                "doorHardware": {"position": "top-center", "type": "pull-hole"},
                "merges": [{"r0": 0, "c0": 0, "r1": 1, "c1": 1}],
            }
        }
        response = client.post("/api/v1/analyze", json={"config": config})
        assert response.status_code == 200
        hardware = response.json()["hardware"]
        assert len(hardware) == 1
        assert hardware[0]["part_id"] == "Door-0"
        assert hardware[0]["type"] == "pull-hole"

    def test_invalid_config(self, client: TestClient) -> None:
        """Schema errors return 422 with field paths."""
        response = client.post("/api/v1/analyze", json={"config": {"design": {"rows": 0}}})
        assert response.status_code == 422
        data = response.json()
        assert data["error_type"] == "validation"
        assert data["details"][0]["path"] == "design.rows"

    def test_missing_config(self, client: TestClient) -> None:
        """Requests without a config are rejected by FastAPI."""
        response = client.post("/api/v1/analyze", json={})
        assert response.status_code == 422


class TestValidateEndpoint:
    """Tests for POST /api/v1/validate."""

    def test_valid(self, client: TestClient) -> None:
        """A clean design is valid with exit code 0."""
        response = client.post("/api/v1/validate", json={"config": {}})
        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is True
        assert data["exit_code"] == 0
        assert data["errors"] == []

    def test_warnings(self, client: TestClient) -> None:
        """Span warnings give exit code 2."""
        config = {
            "design": {
                "rows": 3,
                "cols": 3,
                "merges": [{"r0": 0, "c0": 0, "r1": 2, "c1": 0}],
            }
        }
        data = client.post("/api/v1/validate", json={"config": config}).json()
        assert data["is_valid"] is True
        assert data["exit_code"] == 2
        assert data["warnings"][0]["path"] == "design.merges[0]"

    def test_errors_in_body(self, client: TestClient) -> None:
        """Schema errors are returned in the body with status 200."""
        config = {"design": {"merges": [{"r0": 0, "c0": 0, "r1": 0, "c1": 3}]}}
        response = client.post("/api/v1/validate", json={"config": config})
        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is False
        assert data["exit_code"] == 1
        assert "outside the 2x2 grid" in data["errors"][0]["message"]

"""Integration tests for the REST API."""

import pytest
from fastapi.testclient import TestClient

from packlista.web import create_app

pytestmark = pytest.mark.integration


@pytest.fixture
def client() -> TestClient:
    """Create a test client for the API."""
    return TestClient(create_app())


class TestHealth:
    """Tests for the health endpoint."""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestComputePacklista:
    """Tests for POST /api/v1/packlista."""

    def test_compute(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/packlista",
            json={
                "wall_shape": "straight",
                "floor_width": 3,
                "floor_depth": 2,
                "wall_height": 3.0,
                "storages": [{"id": "s1", "x": 0, "z": -0.5}],
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is True
        assert data["totals"] == {
            "3x1": 4,
            "connectors": 6,
            "corner_90_4pin": 6,
            "m8_pin": 14,
            "t_5pin": 2,
            "baseplate": 1,
        }
        assert data["categories"]["frames"] == {"3x1": 4}
        assert data["categories"]["other"] == {}
        assert data["per_wall"]["back"]["storages"][0]["id"] == "s1"
        assert data["per_wall"]["back"]["columns"][0]["stack"] == [
            {"height": 3.0, "count": 1}
        ]

    def test_top_row(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/packlista",
            json={"floor_width": 3, "floor_depth": 2, "wall_height": 3.5},
        )

        assert response.status_code == 200
        back = response.json()["per_wall"]["back"]
        assert back["top_row"] == {"pieces": {"3": 1}, "waste": 0.0}

    def test_unreachable_height_warns(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/packlista",
            json={"floor_width": 3, "floor_depth": 2, "wall_height": 2.2},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["warnings"] == [
            "back wall: no valid panel combination for height 2.2 m (3 of 3 columns)"
        ]
        assert data["per_wall"]["back"]["infeasible_columns"] == [0, 1, 2]

    @pytest.mark.parametrize(
        "body",
        [
            {"floor_width": 3},
            {"floor_width": 0, "floor_depth": 2},
            {"floor_width": 3, "floor_depth": 2, "wall_shape": "o"},
            {"floor_width": 3, "floor_depth": 2, "wall_height": 11},
        ],
    )
    def test_request_validation(self, client: TestClient, body: dict) -> None:
        response = client.post("/api/v1/packlista", json=body)

        assert response.status_code == 422


class TestComputeFromConfig:
    """Tests for POST /api/v1/packlista/from-config."""

    def test_valid_config(self, client: TestClient, booth_config_data: dict) -> None:
        response = client.post(
            "/api/v1/packlista/from-config", json={"config": booth_config_data}
        )

        assert response.status_code == 200
        assert response.json()["totals"]["3x1"] == 4

    def test_invalid_config(self, client: TestClient, booth_config_data: dict) -> None:
        booth_config_data["booth"]["floor_width"] = -1

        response = client.post(
            "/api/v1/packlista/from-config", json={"config": booth_config_data}
        )

        assert response.status_code == 422
        data = response.json()
        assert data["error_type"] == "validation"
        assert data["details"][0]["path"] == "booth.floor_width"


class TestValidateEndpoint:
    """Tests for POST /api/v1/validate."""

    def test_valid(self, client: TestClient, booth_config_data: dict) -> None:
        response = client.post("/api/v1/validate", json={"config": booth_config_data})

        assert response.status_code == 200
        assert response.json() == {"is_valid": True, "errors": [], "warnings": []}

    def test_unreachable_height(
        self, client: TestClient, booth_config_data: dict
    ) -> None:
        booth_config_data["booth"]["wall_height"] = 2.2

        response = client.post("/api/v1/validate", json={"config": booth_config_data})

        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is False
        assert data["errors"][0]["path"] == "booth.wall_height"

    def test_warning_suggestion(
        self, client: TestClient, booth_config_data: dict
    ) -> None:
        booth_config_data["booth"]["floor_width"] = 3.3

        response = client.post("/api/v1/validate", json={"config": booth_config_data})

        data = response.json()
        assert data["is_valid"] is True
        assert data["warnings"][0]["suggestion"] == "Use a length in 0.5 m steps"

    def test_schema_error(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/validate", json={"config": {"schema_version": "9.0"}}
        )

        assert response.status_code == 422
        assert response.json()["error_type"] == "validation"

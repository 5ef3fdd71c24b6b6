"""
Tests for the REST API and the MCP tools.
"""

import pytest
from fastapi.testclient import TestClient

from holiday_resolver.api import app
from holiday_resolver.mcp_server import check_holiday, list_holidays


@pytest.fixture(scope="module")
def client():
    """Create a FastAPI TestClient."""
    return TestClient(app)


class TestApi:
    """Tests for the FastAPI endpoints."""

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert "GET /holidays/{year}" in response.json()["endpoints"]

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_holidays_document(self, client):
        response = client.get("/holidays/2024")

        assert response.status_code == 200
        data = response.json()
        assert data["year"] == 2024
        assert len(data["holidays"]) == 21
        assert data["holidays"][0] == {
            "name": "元日",
            "date": "2024-01-01",
            "epochSeconds": 1704067200,
            "substitute": False,
        }
        assert data["message"].startswith("The vernal and autumnal equinoxes")

    def test_holidays_in_english(self, client):
        response = client.get("/holidays/2024", params={"language": "en"})

        assert response.json()["holidays"][0]["name"] == "New Year's Day"

    def test_substitutes(self, client):
        response = client.get("/holidays/2024/substitutes")

        assert response.status_code == 200
        assert [h["date"] for h in response.json()] == [
            "2024-02-12",
            "2024-05-06",
            "2024-08-12",
            "2024-09-23",
            "2024-11-04",
        ]

    def test_is_holiday(self, client):
        response = client.get("/is-holiday/2026-05-06")

        assert response.status_code == 200
        assert response.json() == {
            "date": "2026-05-06",
            "is_holiday": True,
            "name": "振替休日(憲法記念日)",
            "substitute": True,
        }

    def test_is_not_holiday(self, client):
        response = client.get("/is-holiday/2026-05-07")

        assert response.json()["is_holiday"] is False

    def test_year_out_of_range(self, client):
        response = client.get("/holidays/3000")

        assert response.status_code == 400

    def test_invalid_language(self, client):
        response = client.get("/holidays/2024", params={"language": "de"})

        assert response.status_code == 400

    def test_invalid_date(self, client):
        response = client.get("/is-holiday/2026-02-30")

        assert response.status_code == 422


class TestMcpTools:
    """Tests for the MCP tool functions."""

    def test_list_holidays(self):
        result = list_holidays(2026)

        assert result["year"] == 2026
        assert len(result["holidays"]) == 17
        assert "epochSeconds" in result["holidays"][0]

    def test_list_holidays_out_of_range(self):
        assert "error" in list_holidays(1800)

    def test_check_holiday(self):
        result = check_holiday("2026-05-06", language="en")

        assert result == {
            "date": "2026-05-06",
            "is_holiday": True,
            "name": "Substitute Holiday (Constitution Memorial Day)",
            "substitute": True,
        }

    def test_check_holiday_invalid_date(self):
        assert "error" in check_holiday("06.05.2026")

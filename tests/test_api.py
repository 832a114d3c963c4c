"""Tests for the FastAPI API layer."""

import pytest
from fastapi.testclient import TestClient

from tokensheet import __version__
from tokensheet.api import create_app
from tokensheet.config import BuildConfig, RenderConfig


BUTTON_RECORDS = [
    {"category": "component", "type": "button", "item": "padding", "value": "16px"},
    {"category": "component", "type": "button", "item": "primary",
     "subitem": "background-color", "value": "#e63c19"},
    {"category": "component", "type": "button", "item": "primary",
     "subitem": "color", "value": "#ffffff"},
]


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(create_app())


class TestAPIBasics:
    """Test basic API functionality."""

    def test_health_check(self, client):
        """Test health endpoint."""
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == __version__


class TestAggregateEndpoint:
    """Test the /aggregate endpoint."""

    def test_aggregate(self, client):
        """Test records are grouped by class."""
        response = client.post("/aggregate", json={"records": BUTTON_RECORDS})
        assert response.status_code == 200
        data = response.json()
        assert data["class_count"] == 1
        assert data["record_count"] == 3
        assert data["classes"] == {
            "component-button": {
                "padding": "16px",
                "primary": {"background-color": "#e63c19", "color": "#ffffff"},
            },
        }

    def test_attributes_shape(self, client):
        """Test records may carry a CTI attributes object."""
        response = client.post("/aggregate", json={"records": [{
            "attributes": {"category": "component", "type": "button", "item": "padding"},
            "value": "16px",
        }]})
        assert response.status_code == 200
        assert response.json()["classes"] == {"component-button": {"padding": "16px"}}

    def test_malformed_record(self, client):
        """Test a record missing its category is rejected."""
        response = client.post("/aggregate", json={"records": [
            {"type": "button", "item": "padding", "value": "16px"},
        ]})
        assert response.status_code == 422
        detail = response.json()["detail"]
        assert detail["error"] == "MalformedRecordError"
        assert detail["details"]["field"] == "category"

    def test_strict_conflict(self, client):
        """Test strict requests reject structural conflicts."""
        records = [
            {"category": "a", "type": "b", "item": "primary", "value": "red"},
            {"category": "a", "type": "b", "item": "primary", "subitem": "color", "value": "#fff"},
        ]
        response = client.post("/aggregate", json={"records": records, "strict": True})
        assert response.status_code == 422
        assert response.json()["detail"]["error"] == "StructuralConflictError"

        response = client.post("/aggregate", json={"records": records})
        assert response.status_code == 200


class TestRenderEndpoint:
    """Test the /render endpoint."""

    def test_render(self, client):
        """Test records are rendered to SCSS."""
        response = client.post("/render", json={"records": BUTTON_RECORDS})
        assert response.status_code == 200
        data = response.json()
        assert data["class_count"] == 1
        assert data["stylesheet"] == (
            ".component-button {\n"
            "  padding: 16px;\n"
            "  &.primary {\n"
            "    background-color: #e63c19;\n"
            "    color: #ffffff;\n"
            "  }\n"
            "}\n"
        )

    def test_render_numeric_value(self, client):
        """Test numeric values are rendered as text."""
        response = client.post("/render", json={"records": [
            {"category": "a", "type": "b", "item": "z-index", "value": 10},
            {"category": "a", "type": "b", "item": "opacity", "value": 0.5},
        ]})
        assert response.status_code == 200
        stylesheet = response.json()["stylesheet"]
        assert "  z-index: 10;\n" in stylesheet
        assert "  opacity: 0.5;\n" in stylesheet

    def test_render_empty(self, client):
        """Test no records render to an empty stylesheet."""
        response = client.post("/render", json={"records": []})
        assert response.status_code == 200
        assert response.json() == {"stylesheet": "", "class_count": 0}

    def test_render_uses_app_config(self):
        """Test the app's render config and strict default apply."""
        config = BuildConfig(strict=True, render=RenderConfig(indent="\t"))
        client = TestClient(create_app(config))

        response = client.post("/render", json={"records": BUTTON_RECORDS[:1]})
        assert response.json()["stylesheet"] == ".component-button {\n\tpadding: 16px;\n}\n"

        response = client.post("/render", json={"records": [
            {"category": "a", "type": "b", "item": "c", "subitem": "d", "value": "1"},
            {"category": "a", "type": "b", "item": "c", "value": "2"},
        ]})
        assert response.status_code == 422

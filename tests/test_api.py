"""Tests for the Flask API."""

import json

import pytest

from death_mountain_renderer import MetadataAssembler
from death_mountain_renderer.api import app as app_module
from death_mountain_renderer.engine.metadata_assembler import JSON_MEDIA_TYPE
from death_mountain_renderer.engine.output_validator import OutputValidator
from death_mountain_renderer.render_config import RenderConfigManager


@pytest.fixture
def client(monkeypatch):
    """Test client with fresh renderer state."""
    manager = RenderConfigManager()
    monkeypatch.setattr(app_module, "_render_config_manager", manager)
    monkeypatch.setattr(app_module, "_assembler", MetadataAssembler(manager.config))
    app_module.app.config["TESTING"] = True
    with app_module.app.test_client() as test_client:
        yield test_client


@pytest.fixture
def adventurer_payload(sample_adventurer):
    """Sample adventurer as request JSON."""
    return sample_adventurer.model_dump(mode="json")


def _metadata(uri: str) -> dict:
    is_valid, payload, error = OutputValidator().decode_data_uri(uri, JSON_MEDIA_TYPE)
    assert is_valid, error
    return json.loads(payload)


class TestRenderRoutes:
    """Test suite for render endpoints."""

    def test_health(self, client):
        """Test the liveness route."""
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.get_json() == {"status": "ok"}

    def test_render_metadata(self, client, adventurer_payload):
        """Test metadata rendering for a posted adventurer."""
        response = client.post("/api/render/metadata", json={"token_id": 9, "adventurer": adventurer_payload})
        assert response.status_code == 200
        assert _metadata(response.get_json()["uri"])["name"] == "Bob #9"

    def test_render_metadata_requires_token(self, client, adventurer_payload):
        """Test token_id must be an integer."""
        response = client.post("/api/render/metadata", json={"token_id": "9", "adventurer": adventurer_payload})
        assert response.status_code == 400

    def test_render_metadata_token_out_of_range(self, client, adventurer_payload):
        """Test token ids outside u64 are rejected."""
        response = client.post("/api/render/metadata", json={"token_id": -1, "adventurer": adventurer_payload})
        assert response.status_code == 400
        assert response.get_json()["error"] == "Invalid request"

    def test_invalid_adventurer(self, client, adventurer_payload):
        """Test out of range fields are reported."""
        adventurer_payload["health"] = -5
        response = client.post("/api/render/image", json={"adventurer": adventurer_payload})
        assert response.status_code == 400
        assert response.get_json()["error"] == "Invalid adventurer"

    def test_unencodable_name_is_bad_request(self, client):
        """Test a lone surrogate in the name is a 400, not a server error."""
        response = client.post(
            "/api/render/metadata",
            data='{"token_id": 1, "adventurer": {"name": "Bo\\ud800b", "health": 5}}',
            content_type="application/json",
        )
        assert response.status_code == 400
        assert response.get_json()["error"] == "Invalid adventurer"

    def test_missing_body(self, client):
        """Test requests without JSON are rejected."""
        assert client.post("/api/render/image", data="x").status_code == 400
        assert client.post("/api/render/image", json={}).status_code == 400
        assert client.post("/api/render/image", json={"token_id": 1}).status_code == 400

    def test_render_image(self, client, adventurer_payload):
        """Test the SVG and its data URI are returned."""
        body = client.post("/api/render/image", json={"adventurer": adventurer_payload}).get_json()
        assert body["svg"].startswith("<svg")
        assert body["uri"].startswith("data:image/svg+xml;base64,")

    def test_render_traits(self, client, adventurer_payload):
        """Test traits are returned as name/value pairs."""
        traits = client.post("/api/render/traits", json={"adventurer": adventurer_payload}).get_json()["traits"]
        assert {"trait_type": "Gold", "value": "120"} in traits

    def test_render_page(self, client, adventurer_payload):
        """Test single pages and their bounds."""
        request_body = {"token_id": 1, "adventurer": adventurer_payload}
        response = client.post("/api/render/page/1", json=request_body)
        assert response.status_code == 200
        assert response.get_json()["page_count"] == 2
        assert client.post("/api/render/page/2", json=request_body).status_code == 400

    def test_token_metadata(self, client):
        """Test metadata for a mock token."""
        body = client.get("/api/tokens/7/metadata").get_json()
        assert body["token_id"] == 7
        assert _metadata(body["uri"])["attributes"]

    def test_unknown_route_is_json(self, client):
        """Test API errors are returned as JSON."""
        response = client.get("/api/nothing")
        assert response.status_code == 404
        assert response.get_json()["code"] == 404


class TestConfigRoutes:
    """Test suite for configuration endpoints."""

    def test_get_config(self, client):
        """Test the current configuration is returned."""
        config = client.get("/api/config/render").get_json()["config"]
        assert config["normal_pages"] == ["inventory", "item_bag"]

    def test_update_config(self, client, adventurer_payload):
        """Test a new page list takes effect for later renders."""
        response = client.post("/api/config/render", json={"normal_pages": ["inventory", "item_bag", "journey"]})
        assert response.status_code == 200
        assert response.get_json()["success"] is True
        page = client.post("/api/render/page/2", json={"token_id": 1, "adventurer": adventurer_payload})
        assert page.status_code == 200
        assert page.get_json()["page_count"] == 3

    def test_update_config_rejected(self, client):
        """Test invalid configuration is refused and the old one kept."""
        response = client.post("/api/config/render", json={"normal_pages": ["map"]})
        assert response.status_code == 400
        assert client.get("/api/config/render").get_json()["config"]["normal_pages"] == ["inventory", "item_bag"]

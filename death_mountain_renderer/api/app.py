"""Flask API application."""

import logging

from flask import Flask, jsonify, request
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException

from death_mountain_renderer.config import DEFAULT_API_PORT, DEFAULT_LOG_LEVEL
from death_mountain_renderer.engine.metadata_assembler import SVG_MEDIA_TYPE, MetadataAssembler, data_uri
from death_mountain_renderer.models.adventurer import AdventurerSnapshot
from death_mountain_renderer.providers.mock_provider import MockAdventurerProvider
from death_mountain_renderer.render_config import RenderConfig, RenderConfigManager

logging.basicConfig(level=DEFAULT_LOG_LEVEL, format='[%(name)-19s - %(levelname)5s] %(message)s')

app = Flask("flask.death_mountain_renderer")


@app.before_request
def log_request_info():
    app.logger.info('Access to: %s from %s (%s)',
        request.url,
        request.headers.get('X-Forwarded-For', request.remote_addr),
        request.headers.get('User-Agent'))


# Error handlers for API routes
@app.errorhandler(HTTPException)
def handle_http_exception(e: HTTPException):
    """Return JSON instead of HTML for HTTP errors in API routes."""
    if request.path.startswith("/api/"):
        response = e.get_response()
        response.data = jsonify(
            {
                "error": e.name,
                "code": e.code,
                "description": e.description,
            }
        ).data
        response.content_type = "application/json"
        return response
    return e


@app.errorhandler(500)
def handle_internal_error(e: Exception):
    """Handle 500 errors."""
    if request.path.startswith("/api/"):
        app.logger.error(f"Internal server error: {e}", exc_info=True)
        return jsonify({"error": "Internal Server Error", "message": "An unexpected error occurred"}), 500
    return "Internal Server Error", 500


_render_config_manager = RenderConfigManager()
_assembler = MetadataAssembler(_render_config_manager.config)
_provider = MockAdventurerProvider()


def _read_request(require_token: bool = False):
    """
    Parse the JSON body into (token_id, snapshot).

    Returns:
        (token_id, snapshot, None) on success, (None, None, error_response) otherwise
    """
    if not request.is_json:
        return None, None, (jsonify({"error": "Content-Type must be application/json"}), 400)

    data = request.get_json(silent=True)
    if not data:
        return None, None, (jsonify({"error": "No data provided"}), 400)

    token_id = data.get("token_id")
    if require_token and (not isinstance(token_id, int) or isinstance(token_id, bool)):
        return None, None, (jsonify({"error": "token_id is required and must be an integer"}), 400)

    if "adventurer" not in data:
        return None, None, (jsonify({"error": "adventurer is required"}), 400)

    try:
        snapshot = AdventurerSnapshot.model_validate(data["adventurer"])
    except ValidationError as e:
        return None, None, (jsonify({"error": "Invalid adventurer", "message": str(e)}), 400)

    return token_id, snapshot, None


@app.route("/api/health", methods=["GET"])
def health():
    """Liveness check."""
    return jsonify({"status": "ok"})


@app.route("/api/render/metadata", methods=["POST"])
def render_metadata():
    """Render the metadata data URI for a posted adventurer."""
    token_id, snapshot, error = _read_request(require_token=True)
    if error:
        return error
    try:
        return jsonify({"uri": _assembler.render_metadata(token_id, snapshot)})
    except ValueError as e:
        return jsonify({"error": "Invalid request", "message": str(e)}), 400


@app.route("/api/render/image", methods=["POST"])
def render_image():
    """Render the SVG image for a posted adventurer."""
    _, snapshot, error = _read_request()
    if error:
        return error
    svg = _assembler.render_image(snapshot)
    return jsonify({"svg": svg, "uri": data_uri(SVG_MEDIA_TYPE, svg)})


@app.route("/api/render/traits", methods=["POST"])
def render_traits():
    """Render the trait list for a posted adventurer."""
    _, snapshot, error = _read_request()
    if error:
        return error
    traits = _assembler.render_traits(snapshot)
    return jsonify({"traits": [trait.model_dump() for trait in traits]})


@app.route("/api/render/page/<int:page_index>", methods=["POST"])
def render_page(page_index: int):
    """Render one page of a posted adventurer."""
    token_id, snapshot, error = _read_request(require_token=True)
    if error:
        return error
    try:
        return jsonify(
            {
                "uri": _assembler.render_page(token_id, snapshot, page_index),
                "page_count": _assembler.page_count(snapshot),
            }
        )
    except ValueError as e:
        return jsonify({"error": "Invalid page", "message": str(e)}), 400


@app.route("/api/tokens/<int:token_id>/metadata", methods=["GET"])
def token_metadata(token_id: int):
    """Render metadata for a token served by the mock provider."""
    try:
        snapshot = _provider.get_adventurer(token_id)
        return jsonify({"token_id": token_id, "uri": _assembler.render_metadata(token_id, snapshot)})
    except ValueError as e:
        return jsonify({"error": "Invalid token", "message": str(e)}), 400


@app.route("/api/config/render", methods=["GET"])
def get_render_config():
    """Get current renderer configuration."""
    return jsonify({"config": _render_config_manager.config.model_dump()})


@app.route("/api/config/render", methods=["POST"])
def update_render_config():
    """Update renderer configuration (hot-reload)."""
    global _assembler
    if not request.is_json:
        return jsonify({"error": "Content-Type must be application/json"}), 400

    data = request.get_json(silent=True)
    if not data:
        return jsonify({"error": "No data provided"}), 400

    try:
        new_config = RenderConfig(**data)
    except ValidationError as e:
        app.logger.warning(f"Rejected render config: {e}")
        return jsonify({"error": "Invalid configuration", "message": str(e)}), 400

    _render_config_manager.update_config(new_config)
    _assembler = MetadataAssembler(new_config)
    return jsonify({"success": True, "config": _render_config_manager.config.model_dump()})


if __name__ == "__main__":
    app.run(debug=True, port=DEFAULT_API_PORT)

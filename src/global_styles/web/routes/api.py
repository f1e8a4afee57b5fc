from __future__ import annotations

import logging

from flask import Blueprint, current_app, jsonify, request

from global_styles.annotations import parse_hints
from global_styles.editor import SaveResult, SaveStatus
from global_styles.minifier import minify

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


def _is_truthy(value: object) -> bool:
    if isinstance(value, str):
        return value.lower() == "true"
    return value is True


@api_bp.route("/css")
def get_css():
    """Return stored CSS, current hints and the static stylesheet URL."""
    return jsonify(current_app.extensions["editor"].editor_data())


@api_bp.route("/css", methods=["POST"])
def save_css():
    """Preview or persist CSS sent by the editor.

    Body: ``{"css_content": "...", "persist": true}``. Without ``persist``
    only hints are recomputed.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    css = data.get("css_content")
    if not isinstance(css, str):
        result = SaveResult(
            status=SaveStatus.INVALID_REQUEST, message="css_content must be a string."
        )
        return jsonify(result.to_dict()), 400

    editor = current_app.extensions["editor"]
    if _is_truthy(data.get("persist")):
        logger.info("saving global stylesheet (%d chars)", len(css))
        result = editor.save(css)
    else:
        result = editor.preview(css)

    if not result.ok:
        return jsonify(result.to_dict()), 500
    return jsonify(result.to_dict())


@api_bp.route("/hints")
def hints():
    return jsonify(current_app.extensions["editor"].get_available_hints())


@api_bp.route("/hints/parse", methods=["POST"])
def parse_hints_route():
    """Parse hints from the raw request body without storing anything."""
    return jsonify(parse_hints(request.get_data(as_text=True)))


@api_bp.route("/classes")
def classes():
    integrator = current_app.extensions["integrator"]
    return jsonify([c.to_dict() for c in integrator.annotated_classes()])


@api_bp.route("/minify", methods=["POST"])
def minify_route():
    """Minify the raw request body with the built-in minifier."""
    css = request.get_data(as_text=True)
    return minify(css), 200, {"Content-Type": "text/css; charset=utf-8"}

"""Health check blueprint."""

from flask import Blueprint, Response, current_app, jsonify

from capitalvision.models.parameters import AssetKind

health_bp = Blueprint("health", __name__)


@health_bp.route("/healthz")
def health_check() -> Response:
    """Health check endpoint.

    Returns:
        JSON response with status, environment and the projectable asset kinds
    """
    return jsonify(
        {
            "status": "ok",
            "environment": current_app.config["APP_ENV"],
            "asset_kinds": [asset_kind.value for asset_kind in AssetKind],
        }
    )

"""
Projection blueprint for capital growth comparisons.

This module provides API endpoints for a presentation layer: default
parameters, the three-asset comparison and single-asset projections.
"""

from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from capitalvision.models.exceptions import InvalidParameterError
from capitalvision.models.parameters import AssetKind, InvestmentParameters
from capitalvision.services.comparison_service import ComparisonService

projection_bp = Blueprint("projection", __name__, url_prefix="/api/projections")


def _parse_parameters(data: Dict[str, Any]) -> InvestmentParameters:
    """Build parameters from a request body and apply API limits.

    Raises:
        ValidationError: If a field is unknown or out of range
        InvalidParameterError: If the body is not an object or the duration
            exceeds the configured maximum
    """
    if not isinstance(data, dict):
        raise InvalidParameterError("Request body must be a JSON object")

    params = InvestmentParameters.from_partial(data)

    max_duration = current_app.config["MAX_DURATION_YEARS"]
    if params.duration_years > max_duration:
        raise InvalidParameterError(
            f"duration_years cannot exceed {max_duration}, got {params.duration_years}"
        )
    return params


def _validation_details(error: ValidationError) -> Any:
    """Reduce pydantic errors to JSON-friendly field/message pairs."""
    return [
        {"field": ".".join(str(loc) for loc in err["loc"]), "message": err["msg"]}
        for err in error.errors()
    ]


@projection_bp.route("/defaults", methods=["GET"])
def get_defaults() -> Any:
    """Get the parameters a new simulation starts from.

    Returns:
        JSON response with default parameters
    """
    return jsonify(InvestmentParameters.defaults().model_dump(mode="json")), 200


@projection_bp.route("/compare", methods=["POST"])
def compare() -> Any:
    """Project every asset kind from the posted parameters.

    Missing parameters take their default values.

    Returns:
        JSON response with parameters, per-asset projections and a summary
    """
    try:
        data = request.get_json(silent=True) or {}
        params = _parse_parameters(data)

        comparison = ComparisonService().compare(params)

        return (
            jsonify(
                {
                    "parameters": params.model_dump(mode="json"),
                    "results": comparison.to_dict(),
                }
            ),
            200,
        )

    except ValidationError as e:
        return (
            jsonify({"error": "Invalid parameters", "details": _validation_details(e)}),
            400,
        )
    except InvalidParameterError as e:
        return jsonify({"error": "Invalid parameters", "message": str(e)}), 400
    except Exception as e:
        current_app.logger.error(f"Error comparing projections: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500


@projection_bp.route("/<string:asset_kind>", methods=["POST"])
def project(asset_kind: str) -> Any:
    """Project a single asset kind from the posted parameters.

    Args:
        asset_kind: Asset kind to project (income_property, equity_index,
            risk_free_savings)

    Returns:
        JSON response with the projection
    """
    try:
        kind = AssetKind(asset_kind)
    except ValueError:
        return jsonify({"error": f"Unknown asset kind: {asset_kind}"}), 404

    try:
        data = request.get_json(silent=True) or {}
        params = _parse_parameters(data)

        result = ComparisonService().project(params, kind)

        return (
            jsonify(
                {"parameters": params.model_dump(mode="json"), "result": result.to_dict()}
            ),
            200,
        )

    except ValidationError as e:
        return (
            jsonify({"error": "Invalid parameters", "details": _validation_details(e)}),
            400,
        )
    except InvalidParameterError as e:
        return jsonify({"error": "Invalid parameters", "message": str(e)}), 400
    except Exception as e:
        current_app.logger.error(f"Error projecting {asset_kind}: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500

"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import BaseModel, ValidationError

from nac_tco.config import Settings
from nac_tco.core.comparison import build_comparison
from nac_tco.core.complexity import complexity_multiplier, dampen_multiplier
from nac_tco.core.formatting import summarize
from nac_tco.core.inputs import build_calculation_inputs
from nac_tco.domain.reference_data import ReferenceDataStore
from nac_tco.exceptions import NacTcoError
from nac_tco.schemas.calculation import (
    ComparisonRequest,
    ComparisonResponse,
    ComplexityFactors,
    ComplexityResponse,
)
from nac_tco.schemas.health import PingResponse

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


def _settings() -> Settings:
    return current_app.extensions["nac_tco.settings"]


def _store() -> ReferenceDataStore:
    return current_app.extensions["nac_tco.reference_store"]


def _json(model: BaseModel, status: HTTPStatus = HTTPStatus.OK):
    """Serialize through pydantic so NaN/inf become null instead of invalid JSON."""
    return current_app.response_class(model.model_dump_json(), status=status, mimetype="application/json")


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


@api_bp.errorhandler(NacTcoError)
def _handle_domain_error(exc: NacTcoError):
    logger.warning("%s: %s", exc.error_code, exc.message)
    return jsonify(exc.to_dict()), exc.status_code


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message="pong", referenceVendor=_settings().reference_vendor)
    return jsonify(response.model_dump())


@api_bp.get("/vendors")
def list_vendors() -> Any:
    return jsonify([vendor.model_dump() for vendor in _store().vendors()])


@api_bp.get("/vendors/<vendor_id>")
def get_vendor(vendor_id: str) -> Any:
    return jsonify(_store().vendor(vendor_id).model_dump())


@api_bp.get("/vendors/<vendor_id>/costs/<size>")
def get_vendor_costs(vendor_id: str, size: str) -> Any:
    return jsonify(_store().cost_factors(vendor_id, size).model_dump())


@api_bp.get("/vendors/<vendor_id>/timeline/<size>")
def get_vendor_timeline(vendor_id: str, size: str) -> Any:
    return jsonify(_store().implementation_timeline(vendor_id, size).model_dump())


@api_bp.get("/size-bands")
def list_size_bands() -> Any:
    return jsonify({name: band.model_dump() for name, band in _store().size_bands().items()})


@api_bp.get("/industries")
def list_industries() -> Any:
    return jsonify([profile.model_dump() for profile in _store().industries()])


@api_bp.get("/industries/<industry_id>/defaults")
def get_industry_defaults(industry_id: str) -> Any:
    store = _store()
    employees = request.args.get("employees", type=int)
    if employees is None or employees < 1:
        employees = store.size_band(_settings().default_organization_size).default
    return jsonify(store.industry_defaults(industry_id, employees).model_dump())


@api_bp.get("/industries/<industry_id>/value-drivers")
def get_value_drivers(industry_id: str) -> Any:
    return jsonify({"industry": industry_id, "valueDrivers": _store().value_drivers(industry_id)})


@api_bp.get("/benchmarks")
def get_benchmarks() -> Any:
    return jsonify(_store().industry_benchmarks().model_dump())


@api_bp.get("/features")
def get_feature_comparison() -> Any:
    matrix = _store().feature_comparison()
    return jsonify(
        {
            feature_id: {vendor_id: rating.model_dump() for vendor_id, rating in ratings.items()}
            for feature_id, ratings in matrix.items()
        }
    )


@api_bp.get("/vendors/<vendor_id>/features")
def get_vendor_features(vendor_id: str) -> Any:
    features = _store().vendor_features(vendor_id)
    return jsonify({feature_id: rating.model_dump() for feature_id, rating in features.items()})


@api_bp.get("/roi-metrics")
def list_roi_metrics() -> Any:
    metrics = _store().roi_metrics(category=request.args.get("category"))
    return jsonify([metric.model_dump() for metric in metrics])


@api_bp.get("/roi-metrics/<metric_id>")
def get_roi_metric(metric_id: str) -> Any:
    return jsonify(_store().roi_metric(metric_id).model_dump())


@api_bp.post("/calc/complexity")
def calc_complexity() -> Any:
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    factors = ComplexityFactors.model_validate(raw_payload)
    multiplier = complexity_multiplier(factors)
    return jsonify(
        ComplexityResponse(
            multiplier=multiplier,
            referenceMultiplier=dampen_multiplier(multiplier),
        ).model_dump()
    )


@api_bp.post("/calc/comparison")
def calc_comparison() -> Any:
    """Full incumbent-vs-reference TCO comparison."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = ComparisonRequest.model_validate(raw_payload)

    settings = _settings()
    if payload.yearsToProject is not None and payload.yearsToProject > settings.max_years_to_project:
        return (
            jsonify({"detail": f"yearsToProject must be at most {settings.max_years_to_project}"}),
            HTTPStatus.UNPROCESSABLE_ENTITY,
        )

    resolved = build_calculation_inputs(payload, _store(), settings)
    result = build_comparison(resolved.inputs)

    response = ComparisonResponse(
        **result.model_dump(),
        currentSolution=resolved.current_solution,
        referenceSolution=resolved.reference_solution,
        organizationSize=resolved.organization_size,
        industry=resolved.industry,
        yearsToProject=resolved.inputs.yearsToProject,
        fteCost=resolved.inputs.fteCost,
        downtimeCost=resolved.inputs.downtimeCost,
        display=summarize(result),
    )
    return _json(response)

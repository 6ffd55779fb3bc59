"""HTTP routes for the Flask API."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

from flask import Blueprint, jsonify, make_response, request
from werkzeug.exceptions import HTTPException

from backend.core.ping import SERVICE_NAME, get_ping_message, get_service_version
from backend.core.simulation import simulate, summarize
from backend.core.validation import SimulationRequestError, parse_simulation_request
from backend.schemas.ping import PingResponse
from backend.schemas.simulation import (
    DEFAULT_SIMULATION_INPUT,
    SimulationResponse,
    SummaryResponse,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)

GENERIC_ERROR_MESSAGE = "internal server error, please try again later"


def _envelope(model) -> dict:
    return model.model_dump(mode="json", exclude_none=True)


@api_bp.errorhandler(SimulationRequestError)
def _handle_request_error(exc: SimulationRequestError):
    """Bad input answers 400 and logs at INFO."""
    logger.info("Rejected simulation request: %s", exc.message)
    body = SimulationResponse(success=False, error=exc.message)
    return jsonify(_envelope(body)), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(Exception)
def _handle_unexpected_error(exc: Exception):
    if isinstance(exc, HTTPException):
        return exc
    logger.exception("Simulation calculation error")
    body = SimulationResponse(success=False, error=GENERIC_ERROR_MESSAGE)
    return jsonify(_envelope(body)), HTTPStatus.INTERNAL_SERVER_ERROR


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(
        message=get_ping_message(),
        service=SERVICE_NAME,
        version=get_service_version(),
    )
    return jsonify(response.model_dump())


@api_bp.route("/calculate-simulation", methods=["POST", "OPTIONS"])
def calculate_simulation() -> Any:
    """Validate the submitted inputs and return the yearly schedule."""
    if request.method == "OPTIONS":
        resp = make_response("", HTTPStatus.NO_CONTENT)
        resp.headers["Access-Control-Allow-Origin"] = "*"
        resp.headers["Access-Control-Allow-Methods"] = "POST, OPTIONS"
        resp.headers["Access-Control-Allow-Headers"] = "Content-Type"
        return resp

    # unparsable bodies arrive as None and fail validation like any bad payload
    payload = request.get_json(force=True, silent=True)
    simulation_request = parse_simulation_request(payload)
    rows = simulate(simulation_request)
    logger.debug("Simulated %d years", len(rows))

    body = SimulationResponse(success=True, data=rows)
    return jsonify(_envelope(body)), HTTPStatus.OK


@api_bp.post("/calculate-simulation/summary")
def calculate_summary() -> Any:
    """Same inputs as /calculate-simulation, answered with headline totals."""
    payload = request.get_json(force=True, silent=True)
    simulation_request = parse_simulation_request(payload)
    rows = simulate(simulation_request)
    summary = summarize(rows, simulation_request.years)

    body = SummaryResponse(success=True, data=summary)
    return jsonify(_envelope(body)), HTTPStatus.OK


@api_bp.get("/simulation/defaults")
def simulation_defaults() -> Any:
    """Starting values for the simulator form."""
    return jsonify({"success": True, "data": dict(DEFAULT_SIMULATION_INPUT)})

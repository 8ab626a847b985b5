"""Liveness check for the what-if planner."""

from flask import Blueprint, Response, jsonify

health_bp = Blueprint("health", __name__)


@health_bp.get("/healthz")
def healthz() -> Response:
    """Report that the process is up and serving requests.

    No scenario is run; a 200 here only means the app factory completed and
    the blueprints are registered.
    """
    return jsonify(status="ok")

"""
What-if blueprint.

Exposes snapshot aggregation and scenario runs over JSON. Request bodies are
validated with the pydantic models before any simulation runs; validation
failures answer 400 with the pydantic error details.
"""

from typing import Any, Dict, List, Optional

from flask import Blueprint, current_app, jsonify, request
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from whatif.models import (
    ExpenseItem,
    FinancialSnapshot,
    FinancialSnapshotAggregator,
    IncomeItem,
    InvestmentItem,
    LoanItem,
    parse_scenario_parameters,
)
from whatif.services.orchestration_service import (
    ScenarioOrchestrator,
    UnsupportedScenarioError,
)

what_if_bp = Blueprint("what_if", __name__, url_prefix="/api/what-if")


class RecordsPayload(BaseModel):
    """Raw ledger entries submitted for aggregation."""

    model_config = ConfigDict(extra="forbid")

    incomes: List[IncomeItem] = Field(default_factory=list)
    expenses: List[ExpenseItem] = Field(default_factory=list)
    investments: List[InvestmentItem] = Field(default_factory=list)
    loans: List[LoanItem] = Field(default_factory=list)
    assumed_investment_return_rate: Optional[float] = Field(default=None, ge=0)


def _snapshot_from_records(data: Dict[str, Any]) -> FinancialSnapshot:
    payload = RecordsPayload.model_validate(data)
    rate = payload.assumed_investment_return_rate
    if rate is None:
        rate = current_app.config["DEFAULT_INVESTMENT_RETURN_RATE"]
    return FinancialSnapshotAggregator.aggregate(
        incomes=payload.incomes,
        expenses=payload.expenses,
        investments=payload.investments,
        loans=payload.loans,
        assumed_investment_return_rate=rate,
    )


def _validation_error(e: ValidationError) -> Any:
    return (
        jsonify(
            {
                "error": "Invalid request",
                "details": e.errors(include_url=False, include_context=False),
            }
        ),
        400,
    )


@what_if_bp.route("/snapshot", methods=["POST"])
def create_snapshot() -> Any:
    """Aggregate raw ledger entries into a financial snapshot.

    Returns:
        JSON response with the snapshot
    """
    try:
        data = request.get_json(silent=True) or {}
        snapshot = _snapshot_from_records(data)
        return jsonify(snapshot.model_dump(mode="json")), 200

    except ValidationError as e:
        return _validation_error(e)
    except Exception as e:
        current_app.logger.error(f"Error building snapshot: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500


@what_if_bp.route("/scenarios", methods=["POST"])
def run_scenario() -> Any:
    """Run a what-if scenario against a snapshot.

    The body carries tagged ``parameters`` and either a ready ``snapshot`` or
    raw ``records`` to aggregate first.

    Returns:
        JSON response with the projection series and difference metrics
    """
    try:
        data = request.get_json(silent=True) or {}

        if "parameters" not in data:
            return jsonify({"error": "parameters is required"}), 400
        if "snapshot" in data:
            snapshot = FinancialSnapshot.model_validate(data["snapshot"])
        elif "records" in data:
            snapshot = _snapshot_from_records(data["records"])
        else:
            return jsonify({"error": "snapshot or records is required"}), 400

        parameters = parse_scenario_parameters(data["parameters"])
        result = ScenarioOrchestrator().run_parameters(parameters, snapshot)

        return jsonify(result.model_dump(mode="json")), 200

    except ValidationError as e:
        return _validation_error(e)
    except UnsupportedScenarioError as e:
        return jsonify({"error": str(e)}), 400
    except Exception as e:
        current_app.logger.error(f"Error running scenario: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500

"""
Orchestration service for what-if scenario runs.

The orchestrator picks the simulator registered for a scenario type, runs it
against the user's snapshot and hands back the complete result. It holds no
per-run state, so one instance can be shared freely.
"""

import logging
from typing import Dict, List, Optional

from whatif.models.projection import ScenarioResult
from whatif.models.scenario import BaseScenarioParameters, ScenarioType
from whatif.models.simulation import (
    CareerChangeSimulator,
    InvestmentStrategySimulator,
    MajorPurchaseSimulator,
    ScenarioSimulator,
)
from whatif.models.snapshot import FinancialSnapshot

logger = logging.getLogger(__name__)


class UnsupportedScenarioError(ValueError):
    """Raised when a scenario type has no simulator or mismatches its parameters."""


def default_simulators() -> Dict[ScenarioType, ScenarioSimulator]:
    """One simulator per supported scenario type."""
    simulators = (
        CareerChangeSimulator(),
        InvestmentStrategySimulator(),
        MajorPurchaseSimulator(),
    )
    return {simulator.scenario_type: simulator for simulator in simulators}


class ScenarioOrchestrator:
    """Dispatches scenario runs to the matching simulator."""

    def __init__(
        self, simulators: Optional[Dict[ScenarioType, ScenarioSimulator]] = None
    ) -> None:
        """Initialize the orchestrator.

        Args:
            simulators: Simulator registry keyed by scenario type; defaults to
                the built-in simulators
        """
        self.logger = logging.getLogger(__name__)
        self._simulators = dict(simulators or default_simulators())
        missing = set(ScenarioType) - set(self._simulators)
        if missing:
            names = sorted(scenario_type.value for scenario_type in missing)
            raise UnsupportedScenarioError(f"No simulator registered for {names}")

    @property
    def supported_types(self) -> List[ScenarioType]:
        return list(self._simulators)

    def run(
        self,
        scenario_type: ScenarioType,
        parameters: BaseScenarioParameters,
        snapshot: FinancialSnapshot,
    ) -> ScenarioResult:
        """Run one scenario simulation.

        Args:
            scenario_type: Which scenario to simulate
            parameters: Validated parameters for that scenario
            snapshot: Current financial baseline

        Returns:
            Complete projection series and difference metrics

        Raises:
            UnsupportedScenarioError: If the type is unknown or the parameters
                belong to a different scenario
        """
        scenario_type = self._resolve_type(scenario_type)
        parameter_type = getattr(parameters, "scenario_type", None)
        if parameter_type != scenario_type.value:
            raise UnsupportedScenarioError(
                f"Parameters for {parameter_type!r} cannot run as {scenario_type.value!r}"
            )

        simulator = self._simulators[scenario_type]
        self.logger.info(f"Starting {scenario_type.value} simulation")
        result = simulator.simulate(snapshot, parameters)
        self.logger.info(
            f"Completed {scenario_type.value} simulation over "
            f"{result.difference_metrics.years_simulated} years"
        )
        return result

    def run_parameters(
        self, parameters: BaseScenarioParameters, snapshot: FinancialSnapshot
    ) -> ScenarioResult:
        """Run the scenario named by the parameters' own tag."""
        return self.run(
            self._resolve_type(getattr(parameters, "scenario_type", None)),
            parameters,
            snapshot,
        )

    def _resolve_type(self, scenario_type) -> ScenarioType:
        try:
            return ScenarioType(scenario_type)
        except ValueError:
            raise UnsupportedScenarioError(
                f"Unsupported scenario type: {scenario_type!r}"
            ) from None

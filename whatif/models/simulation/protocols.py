"""
Protocol interfaces for scenario simulators.

Every simulator shares one contract: it takes the user's financial snapshot
plus its own parameter model and returns a complete ScenarioResult. Simulators
are stateless, so one instance can serve any number of concurrent requests.
"""

from typing import Protocol

from whatif.models.projection import ScenarioResult
from whatif.models.scenario import BaseScenarioParameters, ScenarioType
from whatif.models.snapshot import FinancialSnapshot


class ScenarioSimulator(Protocol):
    """
    Produces year-by-year projections and difference metrics for one scenario.
    """

    scenario_type: ScenarioType

    def simulate(
        self, snapshot: FinancialSnapshot, parameters: BaseScenarioParameters
    ) -> ScenarioResult:
        """
        Run the simulation.

        Args:
            snapshot: Current financial baseline
            parameters: Validated parameters for this simulator's scenario

        Returns:
            Projection series and difference metrics
        """
        ...

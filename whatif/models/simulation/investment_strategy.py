"""
Investment strategy simulation.

Compares investing the same monthly contribution in two vehicles with
different annual returns. Every row is an independent future-value
evaluation at that elapsed duration, not a roll-up of the previous row.
"""

from whatif.models.annuity import AnnuityGrowthCalculator
from whatif.models.projection import (
    InvestmentStrategyMetrics,
    ProjectionPoint,
    ProjectionSeries,
    ScenarioResult,
)
from whatif.models.scenario import InvestmentStrategyParameters, ScenarioType
from whatif.models.snapshot import FinancialSnapshot

GROWTH_SERIES = "growth"


class InvestmentStrategySimulator:
    """Simulator for the investment strategy scenario."""

    scenario_type = ScenarioType.INVESTMENT_STRATEGY

    def simulate(
        self, snapshot: FinancialSnapshot, parameters: InvestmentStrategyParameters
    ) -> ScenarioResult:
        # The contribution is scenario-supplied; the snapshot plays no part.
        series = self.project(parameters)
        return ScenarioResult(
            scenario_type=self.scenario_type,
            series={GROWTH_SERIES: series},
            difference_metrics=compute_difference_metrics(series, parameters),
        )

    @staticmethod
    def project(parameters: InvestmentStrategyParameters) -> ProjectionSeries:
        """Future value of the contribution under both rates for each year."""
        future_value = AnnuityGrowthCalculator.future_value_of_monthly_contribution
        return ProjectionSeries(
            tuple(
                ProjectionPoint(
                    year=year,
                    current_path_value=future_value(
                        parameters.monthly_contribution,
                        parameters.current_annual_rate_pct,
                        year,
                    ),
                    new_path_value=future_value(
                        parameters.monthly_contribution,
                        parameters.new_annual_rate_pct,
                        year,
                    ),
                )
                for year in range(1, parameters.years_to_simulate + 1)
            )
        )


def compute_difference_metrics(
    series: ProjectionSeries, parameters: InvestmentStrategyParameters
) -> InvestmentStrategyMetrics:
    """Summarize the final year of an investment strategy projection."""
    final = series.final_point
    return InvestmentStrategyMetrics(
        current_strategy_final_amount=final.current_path_value,
        new_strategy_final_amount=final.new_path_value,
        final_amount_difference=final.difference,
        total_investment_made=AnnuityGrowthCalculator.total_contributed(
            parameters.monthly_contribution, parameters.years_to_simulate
        ),
        current_strategy_name=parameters.current_strategy_name or "Current Strategy",
        current_strategy_return_rate=parameters.current_annual_rate_pct,
        new_strategy_name=parameters.new_strategy_name or "New Strategy",
        new_strategy_return_rate=parameters.new_annual_rate_pct,
        years_simulated=parameters.years_to_simulate,
    )

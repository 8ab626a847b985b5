"""
Career change simulation.

Compares keeping the current salary with switching to a new one. Both paths
start from the raw annual salary in year 1 and grow at the same rate from
year 2 onwards. Expenses come from the snapshot and are held constant across
both paths and all years, so the comparison isolates the salary effect.
"""

from typing import List, Tuple

from whatif.models.projection import (
    CareerChangeMetrics,
    ProjectionPoint,
    ProjectionSeries,
    ScenarioResult,
)
from whatif.models.scenario import CareerChangeParameters, ScenarioType
from whatif.models.snapshot import FinancialSnapshot

INCOME_SERIES = "income"
SAVINGS_SERIES = "savings"


class CareerChangeSimulator:
    """Simulator for the career change scenario."""

    scenario_type = ScenarioType.CAREER_CHANGE

    def simulate(
        self, snapshot: FinancialSnapshot, parameters: CareerChangeParameters
    ) -> ScenarioResult:
        income_series, savings_series = self.project(snapshot, parameters)
        return ScenarioResult(
            scenario_type=self.scenario_type,
            series={INCOME_SERIES: income_series, SAVINGS_SERIES: savings_series},
            difference_metrics=compute_difference_metrics(
                income_series, savings_series, parameters
            ),
        )

    @staticmethod
    def project(
        snapshot: FinancialSnapshot, parameters: CareerChangeParameters
    ) -> Tuple[ProjectionSeries, ProjectionSeries]:
        """
        Build the annual income and cumulative savings series.

        Args:
            snapshot: Current financial baseline (supplies expenses)
            parameters: Career change parameters

        Returns:
            Tuple of (income series, cumulative savings series)
        """
        growth_multiplier = 1 + parameters.annual_growth_rate_pct / 100
        annual_expenses = snapshot.monthly_expenses * 12

        current_income = parameters.current_monthly_salary * 12
        new_income = parameters.new_monthly_salary * 12
        current_savings = 0.0
        new_savings = 0.0

        income_points: List[ProjectionPoint] = []
        savings_points: List[ProjectionPoint] = []

        for year in range(1, parameters.years_to_simulate + 1):
            if year > 1:
                current_income *= growth_multiplier
                new_income *= growth_multiplier

            current_savings += current_income - annual_expenses
            new_savings += new_income - annual_expenses

            income_points.append(
                ProjectionPoint(
                    year=year,
                    current_path_value=current_income,
                    new_path_value=new_income,
                )
            )
            savings_points.append(
                ProjectionPoint(
                    year=year,
                    current_path_value=current_savings,
                    new_path_value=new_savings,
                )
            )

        return ProjectionSeries(tuple(income_points)), ProjectionSeries(
            tuple(savings_points)
        )


def compute_difference_metrics(
    income_series: ProjectionSeries,
    savings_series: ProjectionSeries,
    parameters: CareerChangeParameters,
) -> CareerChangeMetrics:
    """Summarize the final year of a career change projection."""
    return CareerChangeMetrics(
        income_difference=income_series.final_point.difference,
        savings_difference=savings_series.final_point.difference,
        new_monthly_income=parameters.new_monthly_salary,
        years_simulated=parameters.years_to_simulate,
    )

"""
Major purchase simulation.

Compares buying an asset with a down payment and a loan against skipping the
purchase and investing the money instead. The horizon is pinned to the loan
term. Two tracks run side by side:

- Without purchase: the down payment stays invested, and every year the
  snapshot's savings (plus the rent a property purchase would have replaced)
  are added before compounding at the snapshot's assumed return. Net worth is
  that corpus minus existing debt.
- With purchase: the down payment leaves the corpus, savings are added and
  compounded the same way, and net worth is the corpus plus the asset minus the
  shrinking purchase loan. The balance left over in the last year of the term
  is paid off from the corpus.

The asset does not appreciate. A year-0 row records the starting position of
both tracks before any simulated year; it shows the corpus net of the down
payment even when that is negative, while the simulated years start from zero
in that case.
"""

from typing import List

from whatif.models.amortization import AmortizationCalculator
from whatif.models.projection import (
    MajorPurchaseMetrics,
    ProjectionPoint,
    ProjectionSeries,
    ScenarioResult,
)
from whatif.models.scenario import (
    MajorPurchaseParameters,
    PurchaseType,
    ScenarioType,
)
from whatif.models.snapshot import FinancialSnapshot

NET_WORTH_SERIES = "net_worth"


class MajorPurchaseSimulator:
    """Simulator for the major purchase scenario."""

    scenario_type = ScenarioType.MAJOR_PURCHASE

    def simulate(
        self, snapshot: FinancialSnapshot, parameters: MajorPurchaseParameters
    ) -> ScenarioResult:
        series = self.project(snapshot, parameters)
        return ScenarioResult(
            scenario_type=self.scenario_type,
            series={NET_WORTH_SERIES: series},
            difference_metrics=compute_difference_metrics(series, parameters),
        )

    @staticmethod
    def project(
        snapshot: FinancialSnapshot, parameters: MajorPurchaseParameters
    ) -> ProjectionSeries:
        """
        Build the net worth comparison, starting with a year-0 baseline row.

        Args:
            snapshot: Current financial baseline
            parameters: Purchase and loan parameters

        Returns:
            Series of loan_term_years + 1 points; current path is the
            without-purchase net worth, new path the with-purchase net worth
        """
        loan_amount = parameters.loan_amount
        monthly_emi = AmortizationCalculator.compute_installment(
            loan_amount,
            parameters.annual_interest_rate_pct,
            parameters.loan_term_years,
        )
        growth = 1 + snapshot.assumed_investment_return_rate / 100
        years_to_simulate = parameters.loan_term_years

        asset_value = parameters.total_cost
        loan_balance = loan_amount
        opening_corpus_with_purchase = (
            snapshot.total_initial_investment - parameters.down_payment
        )
        corpus_with_purchase = max(0.0, opening_corpus_with_purchase)
        corpus_without_purchase = (
            snapshot.total_initial_investment + parameters.down_payment
        )

        annual_savings_with_purchase = snapshot.monthly_savings * 12
        annual_savings_without_purchase = (
            snapshot.monthly_savings + parameters.applicable_rent
        ) * 12

        points: List[ProjectionPoint] = [
            ProjectionPoint(
                year=0,
                current_path_value=snapshot.net_worth,
                new_path_value=opening_corpus_with_purchase + asset_value - loan_balance,
                asset_value=asset_value,
                loan_balance=loan_balance,
                invested_corpus=opening_corpus_with_purchase,
            )
        ]

        for year in range(1, years_to_simulate + 1):
            corpus_without_purchase = (
                corpus_without_purchase + annual_savings_without_purchase
            ) * growth
            net_worth_without_purchase = corpus_without_purchase - snapshot.total_debt

            step = AmortizationCalculator.advance_one_year(
                loan_balance,
                parameters.annual_interest_rate_pct,
                monthly_emi,
                final_year=year == years_to_simulate,
            )
            loan_balance = step.new_balance

            # The final-year settlement comes out of the invested corpus
            corpus_with_purchase = (
                corpus_with_purchase + annual_savings_with_purchase
            ) * growth - step.settlement
            net_worth_with_purchase = corpus_with_purchase + asset_value - loan_balance

            points.append(
                ProjectionPoint(
                    year=year,
                    current_path_value=net_worth_without_purchase,
                    new_path_value=net_worth_with_purchase,
                    asset_value=asset_value,
                    loan_balance=loan_balance,
                    invested_corpus=corpus_with_purchase,
                )
            )

        return ProjectionSeries(tuple(points))


def compute_difference_metrics(
    series: ProjectionSeries, parameters: MajorPurchaseParameters
) -> MajorPurchaseMetrics:
    """Summarize the final year of a major purchase projection."""
    final = series.final_point
    is_property = parameters.purchase_type == PurchaseType.PROPERTY
    return MajorPurchaseMetrics(
        loan_amount=parameters.loan_amount,
        monthly_emi=AmortizationCalculator.compute_installment(
            parameters.loan_amount,
            parameters.annual_interest_rate_pct,
            parameters.loan_term_years,
        ),
        net_worth_with_purchase_final=final.new_path_value,
        net_worth_without_purchase_final=final.current_path_value,
        net_worth_difference=final.difference,
        years_simulated=parameters.loan_term_years,
        monthly_rent_if_applicable=(
            parameters.monthly_rent_if_property if is_property else None
        ),
        final_asset_value=final.asset_value or 0.0,
        final_loan_balance=final.loan_balance or 0.0,
    )

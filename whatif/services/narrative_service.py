"""
Narrative analysis boundary for completed scenario runs.

The numbers are computed first and in full; only then are they packaged for
the external text-generation collaborator. Amounts are pre-formatted as en-IN
currency strings so the collaborator never has to format numbers itself. A
failing collaborator never touches the numeric result: the failure is logged
and reported next to the result instead.
"""

import logging
from typing import Any, Dict, List, Optional, Protocol, Union

from pydantic import BaseModel, ConfigDict, Field

from whatif.models.projection import (
    CareerChangeMetrics,
    InvestmentStrategyMetrics,
    MajorPurchaseMetrics,
    ScenarioResult,
)
from whatif.models.scenario import (
    BaseScenarioParameters,
    CareerChangeParameters,
    InvestmentStrategyParameters,
    MajorPurchaseParameters,
    ScenarioType,
)
from whatif.models.simulation.career_change import INCOME_SERIES, SAVINGS_SERIES
from whatif.models.snapshot import FinancialSnapshot
from whatif.utils.formatting import (
    NOT_AVAILABLE,
    format_currency,
    format_currency_list,
)

logger = logging.getLogger(__name__)


class NarrativeFinancials(BaseModel):
    """Snapshot figures shown to the collaborator."""

    total_monthly_income: float
    total_monthly_expenses: float
    net_monthly_savings: float
    total_investments_value: float
    total_debt: float

    @classmethod
    def from_snapshot(cls, snapshot: FinancialSnapshot) -> "NarrativeFinancials":
        return cls(
            total_monthly_income=snapshot.monthly_income,
            total_monthly_expenses=snapshot.monthly_expenses,
            net_monthly_savings=snapshot.monthly_savings,
            total_investments_value=snapshot.total_initial_investment,
            total_debt=snapshot.total_debt,
        )


class CareerChangeProjections(BaseModel):
    """Career change projections as display strings."""

    current_path_annual_income: str
    new_path_annual_income: str
    current_path_cumulative_savings: str
    new_path_cumulative_savings: str
    last_year_new_path_annual_income: str


class YearlyStrategyValues(BaseModel):
    year: int
    current_strategy_value: str
    new_strategy_value: str


class InvestmentStrategyProjections(BaseModel):
    """Investment strategy projections as display strings."""

    current_strategy_final_amount: str
    new_strategy_final_amount: str
    total_investment_made: str
    difference_final_amount: str
    year_by_year: List[YearlyStrategyValues]


class MajorPurchaseProjections(BaseModel):
    """Major purchase projections as display strings."""

    final_net_worth_with_purchase: str
    final_net_worth_without_purchase: str
    monthly_emi: str


NarrativeProjections = Union[
    CareerChangeProjections, InvestmentStrategyProjections, MajorPurchaseProjections
]


class NarrativeInput(BaseModel):
    """Everything the text-generation collaborator receives for one run."""

    model_config = ConfigDict(frozen=True)

    scenario_type: ScenarioType
    current_financials: NarrativeFinancials
    scenario_parameters: Dict[str, Any]
    projections: NarrativeProjections


class ScenarioAnalysis(BaseModel):
    """A scenario result with the narrative produced for it, if any."""

    result: ScenarioResult
    analysis: Optional[str] = Field(default=None, description="Narrative text")
    error: Optional[str] = Field(
        default=None, description="Why no narrative could be produced"
    )


class NarrativeGenerator(Protocol):
    """External collaborator that writes prose about a scenario."""

    def generate(self, narrative_input: NarrativeInput) -> str:
        """
        Produce an analysis of the scenario.

        Args:
            narrative_input: Snapshot, parameters and formatted projections

        Returns:
            Free-text (Markdown) analysis
        """
        ...


def _career_projections(
    result: ScenarioResult,
) -> CareerChangeProjections:
    income = result.series[INCOME_SERIES]
    savings = result.series[SAVINGS_SERIES]
    last_income = (
        format_currency(income.final_point.new_path_value, include_symbol=True)
        if len(income)
        else NOT_AVAILABLE
    )
    return CareerChangeProjections(
        current_path_annual_income=format_currency_list(
            (point.current_path_value for point in income), include_symbol=True
        ),
        new_path_annual_income=format_currency_list(
            (point.new_path_value for point in income), include_symbol=True
        ),
        current_path_cumulative_savings=format_currency_list(
            (point.current_path_value for point in savings), include_symbol=True
        ),
        new_path_cumulative_savings=format_currency_list(
            (point.new_path_value for point in savings), include_symbol=True
        ),
        last_year_new_path_annual_income=last_income,
    )


def _investment_projections(
    result: ScenarioResult, metrics: InvestmentStrategyMetrics
) -> InvestmentStrategyProjections:
    return InvestmentStrategyProjections(
        current_strategy_final_amount=format_currency(
            metrics.current_strategy_final_amount, include_symbol=True
        ),
        new_strategy_final_amount=format_currency(
            metrics.new_strategy_final_amount, include_symbol=True
        ),
        total_investment_made=format_currency(
            metrics.total_investment_made, include_symbol=True
        ),
        difference_final_amount=format_currency(
            metrics.final_amount_difference, include_symbol=True
        ),
        year_by_year=[
            YearlyStrategyValues(
                year=point.year,
                current_strategy_value=format_currency(point.current_path_value),
                new_strategy_value=format_currency(point.new_path_value),
            )
            for point in result.primary_series
        ],
    )


def _purchase_projections(metrics: MajorPurchaseMetrics) -> MajorPurchaseProjections:
    return MajorPurchaseProjections(
        final_net_worth_with_purchase=format_currency(
            metrics.net_worth_with_purchase_final, include_symbol=True
        ),
        final_net_worth_without_purchase=format_currency(
            metrics.net_worth_without_purchase_final, include_symbol=True
        ),
        monthly_emi=format_currency(metrics.monthly_emi, include_symbol=True),
    )


def build_narrative_input(
    result: ScenarioResult,
    snapshot: FinancialSnapshot,
    parameters: BaseScenarioParameters,
) -> NarrativeInput:
    """
    Package a completed result for the narrative collaborator.

    Args:
        result: Complete scenario result
        snapshot: Snapshot the result was computed from
        parameters: Parameters the result was computed from

    Returns:
        Collaborator input with currency-formatted projections
    """
    metrics = result.difference_metrics
    if isinstance(metrics, CareerChangeMetrics):
        projections: NarrativeProjections = _career_projections(result)
    elif isinstance(metrics, InvestmentStrategyMetrics):
        projections = _investment_projections(result, metrics)
    elif isinstance(metrics, MajorPurchaseMetrics):
        projections = _purchase_projections(metrics)
    else:
        raise TypeError(f"Unsupported difference metrics: {type(metrics).__name__}")

    return NarrativeInput(
        scenario_type=result.scenario_type,
        current_financials=NarrativeFinancials.from_snapshot(snapshot),
        scenario_parameters=parameters.model_dump(mode="json"),
        projections=projections,
    )


def precheck(
    snapshot: FinancialSnapshot, parameters: BaseScenarioParameters
) -> Optional[str]:
    """
    Return a canned message when a narrative would be meaningless.

    Returns:
        Message to show instead of calling the collaborator, or None
    """
    if isinstance(parameters, CareerChangeParameters):
        if snapshot.monthly_income == 0 and snapshot.monthly_expenses == 0:
            return (
                "Your current financial data (income, expenses) seems to be missing "
                "or zero. Please update your financial details for a meaningful "
                "career change analysis."
            )
    elif isinstance(parameters, InvestmentStrategyParameters):
        if parameters.monthly_contribution <= 0:
            return "Monthly investment for strategy comparison must be a positive amount."
    elif isinstance(parameters, MajorPurchaseParameters):
        if parameters.total_cost <= 0:
            return "Total cost for the major purchase must be a positive amount."
        if parameters.down_payment < 0:
            return "Down payment cannot be negative."
        if parameters.monthly_rent_if_property < 0:
            return "Monthly rent cannot be negative."
    return None


class NarrativeService:
    """Attaches collaborator-written analysis to completed scenario results."""

    def __init__(self, generator: NarrativeGenerator) -> None:
        self.generator = generator
        self.logger = logging.getLogger(__name__)

    def analyze(
        self,
        result: ScenarioResult,
        snapshot: FinancialSnapshot,
        parameters: BaseScenarioParameters,
    ) -> ScenarioAnalysis:
        """
        Ask the collaborator for an analysis of a finished run.

        The returned object always carries the untouched result. When the
        collaborator fails, ``analysis`` is None and ``error`` explains why.

        Args:
            result: Complete scenario result
            snapshot: Snapshot the result was computed from
            parameters: Parameters the result was computed from

        Returns:
            The result together with the analysis or the failure reason
        """
        message = precheck(snapshot, parameters)
        if message is not None:
            return ScenarioAnalysis(result=result, analysis=message)

        narrative_input = build_narrative_input(result, snapshot, parameters)
        try:
            analysis = self.generator.generate(narrative_input)
        except Exception as e:
            self.logger.error(
                f"Narrative generation failed for {result.scenario_type.value}: {str(e)}"
            )
            return ScenarioAnalysis(result=result, error=str(e))

        if not analysis:
            self.logger.error(
                f"Narrative generator returned no text for {result.scenario_type.value}"
            )
            return ScenarioAnalysis(
                result=result, error="The narrative generator returned no analysis"
            )
        return ScenarioAnalysis(result=result, analysis=analysis)

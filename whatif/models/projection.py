"""
Projection result models.

A simulation produces one or more ProjectionSeries (year-indexed rows pairing
the current path with the new path) together with scenario-specific
difference metrics summarizing the final year. Results are plain values: they
are built once per request, never mutated and never persisted.
"""

from typing import Annotated, Dict, Iterator, Literal, Optional, Tuple, Union

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel, ConfigDict, Field, RootModel

from .scenario import ScenarioType


class ProjectionPoint(BaseModel):
    """One simulated year."""

    model_config = ConfigDict(frozen=True)

    year: int = Field(..., ge=0, description="Simulated year (0 = baseline)")
    current_path_value: float = Field(..., description="Value on the current path")
    new_path_value: float = Field(..., description="Value on the new path")
    asset_value: Optional[float] = Field(
        default=None, ge=0, description="Purchased asset value"
    )
    loan_balance: Optional[float] = Field(
        default=None, ge=0, description="Outstanding purchase loan"
    )
    invested_corpus: Optional[float] = Field(
        default=None, description="Investments held alongside the purchase"
    )

    @property
    def difference(self) -> float:
        """New path minus current path."""
        return self.new_path_value - self.current_path_value


class ProjectionSeries(RootModel[Tuple[ProjectionPoint, ...]]):
    """Ordered, finite sequence of projection points."""

    model_config = ConfigDict(frozen=True)

    def __iter__(self) -> Iterator[ProjectionPoint]:  # type: ignore[override]
        return iter(self.root)

    def __getitem__(self, index: int) -> ProjectionPoint:
        return self.root[index]

    def __len__(self) -> int:
        return len(self.root)

    @property
    def final_point(self) -> ProjectionPoint:
        """Last simulated year."""
        if not self.root:
            raise IndexError("Projection series is empty")
        return self.root[-1]

    @property
    def years(self) -> Tuple[int, ...]:
        return tuple(point.year for point in self.root)

    def as_arrays(self) -> Dict[str, NDArray[np.float64]]:
        """
        Column-oriented view of the series for charting.

        Optional fields that a scenario does not populate come back as NaN.
        """
        columns = (
            "current_path_value",
            "new_path_value",
            "asset_value",
            "loan_balance",
            "invested_corpus",
        )
        arrays = {"year": np.array(self.years, dtype=np.float64)}
        for column in columns:
            values = [getattr(point, column) for point in self.root]
            arrays[column] = np.array(
                [np.nan if value is None else value for value in values],
                dtype=np.float64,
            )
        return arrays


class CareerChangeMetrics(BaseModel):
    """Final-year comparison for a career change."""

    model_config = ConfigDict(frozen=True)

    scenario_type: Literal["career_change"] = "career_change"
    income_difference: float = Field(
        ..., description="Final-year annual income, new minus current"
    )
    savings_difference: float = Field(
        ..., description="Final cumulative savings, new minus current"
    )
    new_monthly_income: float = Field(..., description="Proposed monthly salary")
    years_simulated: int = Field(..., ge=1, description="Projection horizon")


class InvestmentStrategyMetrics(BaseModel):
    """Final comparison of two investment vehicles."""

    model_config = ConfigDict(frozen=True)

    scenario_type: Literal["investment_strategy"] = "investment_strategy"
    current_strategy_final_amount: float = Field(..., ge=0)
    new_strategy_final_amount: float = Field(..., ge=0)
    final_amount_difference: float = Field(
        ..., description="New strategy final amount minus current"
    )
    total_investment_made: float = Field(
        ..., ge=0, description="Contributions over the whole horizon"
    )
    current_strategy_name: str = Field(default="Current Strategy")
    current_strategy_return_rate: float = Field(..., ge=0)
    new_strategy_name: str = Field(default="New Strategy")
    new_strategy_return_rate: float = Field(..., ge=0)
    years_simulated: int = Field(..., ge=1)


class MajorPurchaseMetrics(BaseModel):
    """Final comparison of buying against investing instead."""

    model_config = ConfigDict(frozen=True)

    scenario_type: Literal["major_purchase"] = "major_purchase"
    loan_amount: float = Field(..., ge=0, description="Amount financed")
    monthly_emi: float = Field(..., ge=0, description="Monthly loan installment")
    net_worth_with_purchase_final: float
    net_worth_without_purchase_final: float
    net_worth_difference: float = Field(
        ..., description="With purchase minus without purchase"
    )
    years_simulated: int = Field(..., ge=1, description="Loan term in years")
    monthly_rent_if_applicable: Optional[float] = Field(
        default=None, ge=0, description="Rent saved by buying a property"
    )
    final_asset_value: float = Field(..., ge=0)
    final_loan_balance: float = Field(..., ge=0)


DifferenceMetrics = Annotated[
    Union[CareerChangeMetrics, InvestmentStrategyMetrics, MajorPurchaseMetrics],
    Field(discriminator="scenario_type"),
]


class ScenarioResult(BaseModel):
    """Complete output of one scenario simulation."""

    model_config = ConfigDict(frozen=True)

    scenario_type: ScenarioType
    series: Dict[str, ProjectionSeries] = Field(
        ..., description="Named projection series, primary series first"
    )
    difference_metrics: DifferenceMetrics

    @property
    def primary_series(self) -> ProjectionSeries:
        """The series a chart would show first."""
        return next(iter(self.series.values()))

"""Data models and calculators for what-if scenario projections."""

from .amortization import AmortizationCalculator, YearlyAmortization
from .annuity import AnnuityGrowthCalculator
from .projection import (
    CareerChangeMetrics,
    DifferenceMetrics,
    InvestmentStrategyMetrics,
    MajorPurchaseMetrics,
    ProjectionPoint,
    ProjectionSeries,
    ScenarioResult,
)
from .records import ExpenseItem, Frequency, IncomeItem, InvestmentItem, LoanItem
from .scenario import (
    INVESTMENT_STRATEGIES,
    CareerChangeParameters,
    InvestmentStrategyParameters,
    MajorPurchaseParameters,
    PurchaseType,
    ScenarioParameters,
    ScenarioType,
    parse_scenario_parameters,
)
from .snapshot import FinancialSnapshot, FinancialSnapshotAggregator

__all__ = [
    "AmortizationCalculator",
    "YearlyAmortization",
    "AnnuityGrowthCalculator",
    "CareerChangeMetrics",
    "DifferenceMetrics",
    "InvestmentStrategyMetrics",
    "MajorPurchaseMetrics",
    "ProjectionPoint",
    "ProjectionSeries",
    "ScenarioResult",
    "ExpenseItem",
    "Frequency",
    "IncomeItem",
    "InvestmentItem",
    "LoanItem",
    "INVESTMENT_STRATEGIES",
    "CareerChangeParameters",
    "InvestmentStrategyParameters",
    "MajorPurchaseParameters",
    "PurchaseType",
    "ScenarioParameters",
    "ScenarioType",
    "parse_scenario_parameters",
    "FinancialSnapshot",
    "FinancialSnapshotAggregator",
]

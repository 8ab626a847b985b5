"""
Pydantic models for what-if scenarios.

Scenario parameters form a tagged union: every parameter model carries a
``scenario_type`` literal, and ``ScenarioParameters`` discriminates on it. The
bounds declared here are the caller-side validation layer; simulators assume
parameters that already passed it.
"""

from enum import Enum
from typing import Annotated, Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator


class ScenarioType(str, Enum):
    """Supported what-if explorations."""

    CAREER_CHANGE = "career_change"
    INVESTMENT_STRATEGY = "investment_strategy"
    MAJOR_PURCHASE = "major_purchase"


class PurchaseType(str, Enum):
    """Kinds of major purchase."""

    PROPERTY = "Property"
    VEHICLE = "Vehicle"
    OTHER = "Other"


class InvestmentStrategy(BaseModel):
    """A named investment vehicle with its assumed annual return."""

    key: str = Field(..., min_length=1, description="Stable identifier")
    name: str = Field(..., min_length=1, description="Display name")
    rate: float = Field(..., ge=0, description="Assumed annual return (%)")


INVESTMENT_STRATEGIES: Dict[str, InvestmentStrategy] = {
    strategy.key: strategy
    for strategy in (
        InvestmentStrategy(key="fd_5.5", name="Fixed Deposit", rate=5.5),
        InvestmentStrategy(
            key="conservative_fund_7.0", name="Conservative Fund", rate=7.0
        ),
        InvestmentStrategy(key="balanced_fund_9.0", name="Balanced Fund", rate=9.0),
        InvestmentStrategy(key="sip_index_10.0", name="SIP - Index Funds", rate=10.0),
        InvestmentStrategy(
            key="sip_mf_moderate_11.0",
            name="SIP - Mutual Funds (Moderate)",
            rate=11.0,
        ),
        InvestmentStrategy(
            key="sip_mf_aggressive_12.5",
            name="SIP - Mutual Funds (Aggressive)",
            rate=12.5,
        ),
        InvestmentStrategy(
            key="direct_equity_15.0", name="Direct Equity (High Risk)", rate=15.0
        ),
        InvestmentStrategy(key="gold_etf_6.5", name="Gold ETF", rate=6.5),
    )
}


def get_investment_strategy(key: str) -> InvestmentStrategy:
    """Look up a catalog strategy by key."""
    try:
        return INVESTMENT_STRATEGIES[key]
    except KeyError:
        raise ValueError(f"Unknown investment strategy: {key}") from None


class BaseScenarioParameters(BaseModel):
    """Common configuration for scenario parameter models."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class CareerChangeParameters(BaseScenarioParameters):
    """Switching from the current salary to a new one."""

    scenario_type: Literal["career_change"] = "career_change"
    current_monthly_salary: float = Field(
        ..., gt=0, description="Current monthly salary"
    )
    new_monthly_salary: float = Field(..., gt=0, description="Proposed monthly salary")
    years_to_simulate: int = Field(..., ge=1, le=30, description="Projection horizon")
    annual_growth_rate_pct: float = Field(
        default=0.0, ge=0, le=20, description="Annual salary growth (%)"
    )


class InvestmentStrategyParameters(BaseScenarioParameters):
    """Moving a fixed monthly contribution to a vehicle with a different return."""

    scenario_type: Literal["investment_strategy"] = "investment_strategy"
    monthly_contribution: float = Field(
        ..., gt=0, description="Amount invested every month"
    )
    current_annual_rate_pct: float = Field(
        ..., ge=0, description="Return of the current vehicle (%)"
    )
    new_annual_rate_pct: float = Field(
        ..., ge=0, description="Return of the new vehicle (%)"
    )
    years_to_simulate: int = Field(..., ge=1, le=40, description="Projection horizon")
    current_strategy_name: Optional[str] = Field(
        default=None, description="Display name of the current vehicle"
    )
    new_strategy_name: Optional[str] = Field(
        default=None, description="Display name of the new vehicle"
    )

    @classmethod
    def from_strategies(
        cls,
        monthly_contribution: float,
        current_strategy: str,
        new_strategy: str,
        years_to_simulate: int,
    ) -> "InvestmentStrategyParameters":
        """
        Build parameters from catalog strategy keys.

        Args:
            monthly_contribution: Amount invested every month
            current_strategy: Catalog key of the current vehicle (e.g. "fd_5.5")
            new_strategy: Catalog key of the new vehicle
            years_to_simulate: Projection horizon in years

        Raises:
            ValueError: If either key is not in the catalog
        """
        current = get_investment_strategy(current_strategy)
        new = get_investment_strategy(new_strategy)
        return cls(
            monthly_contribution=monthly_contribution,
            current_annual_rate_pct=current.rate,
            new_annual_rate_pct=new.rate,
            years_to_simulate=years_to_simulate,
            current_strategy_name=current.name,
            new_strategy_name=new.name,
        )


class MajorPurchaseParameters(BaseScenarioParameters):
    """Financing a large purchase with a down payment and a loan."""

    scenario_type: Literal["major_purchase"] = "major_purchase"
    purchase_type: PurchaseType = Field(
        default=PurchaseType.PROPERTY, description="What is being bought"
    )
    total_cost: float = Field(..., gt=0, description="Purchase price")
    down_payment: float = Field(default=0.0, ge=0, description="Upfront payment")
    annual_interest_rate_pct: float = Field(
        ..., ge=0, le=30, description="Loan interest rate (%)"
    )
    loan_term_years: int = Field(..., ge=1, le=40, description="Loan term in years")
    monthly_rent_if_property: float = Field(
        default=0.0, ge=0, description="Rent paid today, avoided by buying a property"
    )

    @model_validator(mode="after")
    def validate_down_payment(self):
        if self.down_payment > self.total_cost:
            raise ValueError("Down payment cannot exceed total cost")
        return self

    @property
    def loan_amount(self) -> float:
        """Amount financed by the loan."""
        return max(0.0, self.total_cost - self.down_payment)

    @property
    def applicable_rent(self) -> float:
        """Monthly rent, counted only for property purchases."""
        if self.purchase_type == PurchaseType.PROPERTY:
            return self.monthly_rent_if_property
        return 0.0


ScenarioParameters = Annotated[
    Union[CareerChangeParameters, InvestmentStrategyParameters, MajorPurchaseParameters],
    Field(discriminator="scenario_type"),
]

_parameters_adapter: TypeAdapter = TypeAdapter(ScenarioParameters)


def parse_scenario_parameters(data: dict) -> BaseScenarioParameters:
    """
    Validate a raw mapping into the matching parameter model.

    Args:
        data: Mapping carrying a ``scenario_type`` tag and its fields

    Returns:
        The validated parameter model for the tagged scenario

    Raises:
        pydantic.ValidationError: If the tag is unknown or a field is invalid
    """
    return _parameters_adapter.validate_python(data)

"""
Financial record models consumed by the snapshot aggregator.

These mirror the income, expense, investment and loan entries a user keeps in
their finance ledger. Records arrive already validated; the models here only
describe their shape.
"""

from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

EXPENSE_CATEGORIES = [
    "Housing",
    "Transportation",
    "Food",
    "Utilities",
    "Healthcare",
    "Insurance",
    "Personal Care",
    "Entertainment",
    "Debt Payments",
    "Savings/Investments",
    "Other",
]

INVESTMENT_TYPES = [
    "Stocks",
    "Bonds",
    "Mutual Funds",
    "ETFs",
    "Real Estate",
    "Cryptocurrency",
    "Retirement Account (401k, IRA)",
    "Other",
]

LOAN_TYPES = [
    "Mortgage",
    "Student Loan",
    "Personal Loan",
    "Auto Loan",
    "Credit Card Debt",
    "Other",
]


class Frequency(str, Enum):
    """How often a recorded amount recurs."""

    MONTHLY = "monthly"
    WEEKLY = "weekly"
    YEARLY = "yearly"
    ONE_TIME = "one-time"


class FinancialRecord(BaseModel):
    """Base class for ledger entries."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str = Field(default="", description="Display name of the entry")


class IncomeItem(FinancialRecord):
    """A recurring or one-off income entry."""

    amount: float = Field(..., ge=0, description="Amount per occurrence")
    frequency: Frequency = Field(
        default=Frequency.MONTHLY, description="How often the amount is received"
    )


class ExpenseItem(FinancialRecord):
    """A recurring or one-off expense entry."""

    amount: float = Field(..., ge=0, description="Amount per occurrence")
    category: str = Field(default="Other", description="Expense category")
    type: Literal["fixed", "variable"] = Field(
        default="fixed", description="Whether the expense is fixed or variable"
    )
    frequency: Frequency = Field(
        default=Frequency.MONTHLY, description="How often the amount is paid"
    )


class InvestmentItem(FinancialRecord):
    """A holding in the user's portfolio."""

    type: str = Field(default="Other", description="Investment type")
    current_value: float = Field(
        ..., ge=0, alias="currentValue", description="Current market value"
    )
    initial_investment: Optional[float] = Field(
        default=None,
        ge=0,
        alias="initialInvestment",
        description="Amount originally invested (cost basis)",
    )


class LoanItem(FinancialRecord):
    """An outstanding loan."""

    type: str = Field(default="Other", description="Loan type")
    outstanding_balance: float = Field(
        ..., ge=0, alias="outstandingBalance", description="Remaining principal"
    )
    monthly_payment: float = Field(
        default=0, ge=0, alias="monthlyPayment", description="Monthly installment"
    )
    interest_rate: Optional[float] = Field(
        default=None, ge=0, alias="interestRate", description="Annual rate (%)"
    )
    original_amount: Optional[float] = Field(
        default=None, ge=0, alias="originalAmount", description="Amount borrowed"
    )

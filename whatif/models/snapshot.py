"""
Financial snapshot aggregation.

Reduces the user's raw ledger entries to a normalized monthly baseline that
every scenario simulator starts from. Amounts are converted to monthly
equivalents with fixed factors and then summed. Net worth is measured on a
cost basis (initial investment), not at current market value.
"""

import math
from typing import Dict, Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .records import ExpenseItem, Frequency, IncomeItem, InvestmentItem, LoanItem

DEFAULT_INVESTMENT_RETURN_RATE = 7.0
WEEKS_PER_MONTH = 4.33
DEBT_PAYMENTS_CATEGORY = "Debt Payments"

# Multipliers converting an amount at the given frequency to a monthly figure.
# One-time amounts are spread over a year.
MONTHLY_CONVERSION_FACTORS: Dict[Frequency, float] = {
    Frequency.MONTHLY: 1.0,
    Frequency.WEEKLY: WEEKS_PER_MONTH,
    Frequency.YEARLY: 1 / 12,
    Frequency.ONE_TIME: 1 / 12,
}


class FinancialSnapshot(BaseModel):
    """Normalized monthly view of the user's current finances."""

    model_config = ConfigDict(frozen=True)

    monthly_income: float = Field(default=0.0, description="Monthly income")
    monthly_expenses: float = Field(
        default=0.0, description="Monthly expenses including loan payments"
    )
    total_initial_investment: float = Field(
        default=0.0, ge=0, description="Sum of investment cost bases"
    )
    total_debt: float = Field(
        default=0.0, ge=0, description="Sum of outstanding loan balances"
    )
    assumed_investment_return_rate: float = Field(
        default=DEFAULT_INVESTMENT_RETURN_RATE,
        ge=0,
        description="Assumed annual investment return (%)",
    )
    monthly_loan_payments: float = Field(
        default=0.0, ge=0, description="Loan installments included in expenses"
    )
    monthly_expenses_by_category: Dict[str, float] = Field(
        default_factory=dict, description="Monthly expenses grouped by category"
    )

    @computed_field(description="Monthly income minus monthly expenses")
    @property
    def monthly_savings(self) -> float:
        return _finite_or_zero(self.monthly_income - self.monthly_expenses)

    @computed_field(description="Initial investments minus outstanding debt")
    @property
    def net_worth(self) -> float:
        return _finite_or_zero(self.total_initial_investment - self.total_debt)

    @classmethod
    def from_totals(
        cls,
        monthly_income: float,
        monthly_expenses: float,
        total_initial_investment: float = 0.0,
        total_debt: float = 0.0,
        assumed_investment_return_rate: float = DEFAULT_INVESTMENT_RETURN_RATE,
    ) -> "FinancialSnapshot":
        """Build a snapshot from already-aggregated totals."""
        return cls(
            monthly_income=monthly_income,
            monthly_expenses=monthly_expenses,
            total_initial_investment=total_initial_investment,
            total_debt=total_debt,
            assumed_investment_return_rate=assumed_investment_return_rate,
        )


def _finite_or_zero(value: float) -> float:
    if value is None or math.isnan(value):
        return 0.0
    return float(value)


class FinancialSnapshotAggregator:
    """Builds a FinancialSnapshot from raw ledger entries."""

    @staticmethod
    def to_monthly(amount: float, frequency: Frequency) -> float:
        """
        Convert an amount to its monthly equivalent.

        Args:
            amount: Amount per occurrence
            frequency: How often the amount occurs

        Returns:
            Monthly-equivalent amount
        """
        factor = MONTHLY_CONVERSION_FACTORS.get(Frequency(frequency), 0.0)
        return _finite_or_zero(amount * factor)

    @staticmethod
    def monthly_income(incomes: Iterable[IncomeItem]) -> float:
        """Total monthly-equivalent income."""
        return _finite_or_zero(
            sum(
                FinancialSnapshotAggregator.to_monthly(item.amount, item.frequency)
                for item in incomes
            )
        )

    @staticmethod
    def monthly_expenses_by_category(
        expenses: Iterable[ExpenseItem], loans: Iterable[LoanItem] = ()
    ) -> Dict[str, float]:
        """
        Group monthly-equivalent expenses by category.

        Loan installments are reported under the "Debt Payments" category.
        """
        by_category: Dict[str, float] = {}
        for item in expenses:
            monthly = FinancialSnapshotAggregator.to_monthly(item.amount, item.frequency)
            by_category[item.category] = by_category.get(item.category, 0.0) + monthly

        loan_payments = FinancialSnapshotAggregator.monthly_loan_payments(loans)
        if loan_payments:
            by_category[DEBT_PAYMENTS_CATEGORY] = (
                by_category.get(DEBT_PAYMENTS_CATEGORY, 0.0) + loan_payments
            )
        return {name: _finite_or_zero(value) for name, value in by_category.items()}

    @staticmethod
    def monthly_loan_payments(loans: Iterable[LoanItem]) -> float:
        """Total monthly installments across all loans."""
        return _finite_or_zero(sum(loan.monthly_payment for loan in loans))

    @staticmethod
    def total_initial_investment(investments: Iterable[InvestmentItem]) -> float:
        """Sum of investment cost bases; entries without one count as zero."""
        return _finite_or_zero(
            sum(item.initial_investment or 0.0 for item in investments)
        )

    @staticmethod
    def total_debt(loans: Iterable[LoanItem]) -> float:
        """Sum of outstanding loan balances."""
        return _finite_or_zero(sum(loan.outstanding_balance for loan in loans))

    @staticmethod
    def aggregate(
        incomes: Optional[Iterable[IncomeItem]] = None,
        expenses: Optional[Iterable[ExpenseItem]] = None,
        investments: Optional[Iterable[InvestmentItem]] = None,
        loans: Optional[Iterable[LoanItem]] = None,
        assumed_investment_return_rate: float = DEFAULT_INVESTMENT_RETURN_RATE,
    ) -> FinancialSnapshot:
        """
        Reduce ledger entries to a monthly snapshot.

        Empty or missing inputs contribute zero. The aggregator never raises
        for numeric reasons; any NaN produced along the way becomes 0.

        Args:
            incomes: Income entries
            expenses: Expense entries
            investments: Investment holdings
            loans: Outstanding loans
            assumed_investment_return_rate: Annual return (%) used by simulators

        Returns:
            Normalized financial snapshot
        """
        incomes = list(incomes or [])
        expenses = list(expenses or [])
        investments = list(investments or [])
        loans = list(loans or [])

        monthly_income = FinancialSnapshotAggregator.monthly_income(incomes)
        by_category = FinancialSnapshotAggregator.monthly_expenses_by_category(
            expenses, loans
        )
        loan_payments = FinancialSnapshotAggregator.monthly_loan_payments(loans)
        monthly_expenses = _finite_or_zero(sum(by_category.values()))
        total_initial_investment = FinancialSnapshotAggregator.total_initial_investment(
            investments
        )
        total_debt = FinancialSnapshotAggregator.total_debt(loans)

        return FinancialSnapshot(
            monthly_income=monthly_income,
            monthly_expenses=monthly_expenses,
            total_initial_investment=total_initial_investment,
            total_debt=total_debt,
            assumed_investment_return_rate=assumed_investment_return_rate,
            monthly_loan_payments=loan_payments,
            monthly_expenses_by_category=by_category,
        )

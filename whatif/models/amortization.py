"""
Loan amortization calculations for major-purchase scenarios.

This module provides the fixed-installment (EMI) formula and a yearly
amortization step used to roll a purchase loan forward one simulated year at a
time.

The yearly step is a deliberate simplification: interest for the year is
charged on the balance at the start of the year, and the twelve installments
are applied against it in one go, instead of compounding month by month.
Because that overstates interest compared with a true monthly schedule, a loan
run for its full term would be left with a small residual; the final year of
the term therefore settles whatever balance remains as a lump sum, reported
separately so callers can pay it from their own funds.
"""

from pydantic import BaseModel, Field

MONTHS_PER_YEAR = 12


class YearlyAmortization(BaseModel):
    """Outcome of one simulated loan year."""

    interest_accrued: float = Field(..., ge=0, description="Interest for the year")
    principal_paid: float = Field(..., ge=0, description="Principal repaid")
    new_balance: float = Field(..., ge=0, description="Balance at year end")
    settlement: float = Field(
        default=0.0, ge=0, description="Lump sum paid beyond the installments"
    )


class AmortizationCalculator:
    """Calculator for loan installments and yearly balance roll-forward."""

    @staticmethod
    def monthly_rate(annual_rate_pct: float) -> float:
        """Convert an annual percentage rate to a monthly decimal rate."""
        return annual_rate_pct / 100 / MONTHS_PER_YEAR

    @staticmethod
    def compute_installment(
        principal: float, annual_rate_pct: float, term_years: float
    ) -> float:
        """
        Calculate the fixed monthly installment for a loan.

        Args:
            principal: Loan principal amount
            annual_rate_pct: Annual interest rate in percent (8.5 for 8.5%)
            term_years: Loan term in years

        Returns:
            Monthly installment, 0 when there is nothing to repay
        """
        if principal <= 0 or term_years <= 0:
            return 0.0

        monthly_rate = AmortizationCalculator.monthly_rate(annual_rate_pct)
        num_payments = term_years * MONTHS_PER_YEAR

        growth = (1 + monthly_rate) ** num_payments
        # Straight-line repayment when the loan is (effectively) interest free
        if monthly_rate == 0 or growth == 1:
            return principal / num_payments

        return principal * monthly_rate * growth / (growth - 1)

    @staticmethod
    def advance_one_year(
        balance: float,
        annual_rate_pct: float,
        monthly_installment: float,
        final_year: bool = False,
    ) -> YearlyAmortization:
        """
        Roll a loan balance forward by one year.

        Args:
            balance: Balance at the start of the year
            annual_rate_pct: Annual interest rate in percent
            monthly_installment: Fixed monthly installment
            final_year: Settle the remaining balance (last year of the term)

        Returns:
            Interest accrued, principal paid, the resulting balance and any
            lump-sum settlement included in the principal
        """
        if balance <= 0:
            return YearlyAmortization(
                interest_accrued=0.0, principal_paid=0.0, new_balance=0.0
            )

        interest_accrued = balance * (annual_rate_pct / 100)
        annual_payments = monthly_installment * MONTHS_PER_YEAR
        principal_paid = max(0.0, min(balance, annual_payments - interest_accrued))
        settlement = 0.0
        if final_year:
            settlement = balance - principal_paid
            principal_paid = balance

        return YearlyAmortization(
            interest_accrued=interest_accrued,
            principal_paid=principal_paid,
            new_balance=max(0.0, balance - principal_paid),
            settlement=settlement,
        )

    @staticmethod
    def total_interest(
        principal: float, annual_rate_pct: float, term_years: float
    ) -> float:
        """
        Total interest paid over the life of a loan on the monthly schedule.

        Args:
            principal: Loan principal amount
            annual_rate_pct: Annual interest rate in percent
            term_years: Loan term in years

        Returns:
            Sum of all installments minus the principal
        """
        installment = AmortizationCalculator.compute_installment(
            principal, annual_rate_pct, term_years
        )
        if installment == 0:
            return 0.0
        return max(0.0, installment * term_years * MONTHS_PER_YEAR - principal)

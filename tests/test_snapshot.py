"""
Tests for financial snapshot aggregation.

Covers frequency normalization, loan installments counted as expenses,
cost-basis net worth and degenerate inputs.
"""

import pytest

from whatif.models import (
    ExpenseItem,
    FinancialSnapshot,
    FinancialSnapshotAggregator,
    Frequency,
    IncomeItem,
    InvestmentItem,
    LoanItem,
)
from whatif.models.snapshot import DEBT_PAYMENTS_CATEGORY


class TestToMonthly:
    """Test cases for frequency conversion."""

    def test_monthly_unchanged(self):
        assert FinancialSnapshotAggregator.to_monthly(5000, Frequency.MONTHLY) == 5000

    def test_weekly_uses_fixed_factor(self):
        monthly = FinancialSnapshotAggregator.to_monthly(1000, Frequency.WEEKLY)
        assert monthly == pytest.approx(4330)

    def test_yearly_divided_by_twelve(self):
        monthly = FinancialSnapshotAggregator.to_monthly(120000, Frequency.YEARLY)
        assert monthly == pytest.approx(10000)

    def test_one_time_spread_over_a_year(self):
        monthly = FinancialSnapshotAggregator.to_monthly(1200, Frequency.ONE_TIME)
        assert monthly == pytest.approx(100)

    def test_nan_amount_becomes_zero(self):
        assert FinancialSnapshotAggregator.to_monthly(float("nan"), "monthly") == 0.0

    def test_accepts_raw_frequency_string(self):
        monthly = FinancialSnapshotAggregator.to_monthly(1200, "one-time")
        assert monthly == pytest.approx(100)


class TestAggregate:
    """Test cases for FinancialSnapshotAggregator.aggregate."""

    def test_aggregate_records(self, records):
        """Test aggregation of a ledger with every frequency and a loan."""
        snapshot = FinancialSnapshotAggregator.aggregate(**records)

        assert snapshot.monthly_income == pytest.approx(90000 + 8660 + 10000)
        assert snapshot.monthly_expenses == pytest.approx(25000 + 12000 + 2000 + 8000)
        assert snapshot.monthly_savings == pytest.approx(
            snapshot.monthly_income - snapshot.monthly_expenses
        )
        assert snapshot.monthly_loan_payments == pytest.approx(8000)

    def test_loan_installments_grouped_as_debt_payments(self, records):
        snapshot = FinancialSnapshotAggregator.aggregate(**records)

        by_category = snapshot.monthly_expenses_by_category
        assert by_category[DEBT_PAYMENTS_CATEGORY] == pytest.approx(8000)
        assert by_category["Housing"] == pytest.approx(25000)
        assert by_category["Insurance"] == pytest.approx(2000)
        assert sum(by_category.values()) == pytest.approx(snapshot.monthly_expenses)

    def test_net_worth_uses_cost_basis(self, records):
        """Test that net worth is initial investment minus outstanding debt."""
        snapshot = FinancialSnapshotAggregator.aggregate(**records)

        # The holding without a recorded cost basis contributes nothing
        assert snapshot.total_initial_investment == pytest.approx(300000)
        assert snapshot.total_debt == pytest.approx(200000)
        assert snapshot.net_worth == pytest.approx(100000)

    def test_empty_inputs_produce_zero_snapshot(self):
        snapshot = FinancialSnapshotAggregator.aggregate()

        assert snapshot.monthly_income == 0
        assert snapshot.monthly_expenses == 0
        assert snapshot.monthly_savings == 0
        assert snapshot.total_initial_investment == 0
        assert snapshot.total_debt == 0
        assert snapshot.net_worth == 0
        assert snapshot.monthly_expenses_by_category == {}

    def test_assumed_rate_defaults_to_seven_percent(self):
        snapshot = FinancialSnapshotAggregator.aggregate(
            incomes=[IncomeItem(amount=1000)]
        )
        assert snapshot.assumed_investment_return_rate == 7.0

    def test_negative_savings_allowed(self):
        snapshot = FinancialSnapshotAggregator.aggregate(
            incomes=[IncomeItem(amount=20000)],
            expenses=[ExpenseItem(amount=30000)],
        )
        assert snapshot.monthly_savings == pytest.approx(-10000)

    def test_records_accept_camel_case_aliases(self):
        """Test that ledger entries can be built from camelCase payloads."""
        investment = InvestmentItem.model_validate(
            {"name": "Fund", "currentValue": 1500, "initialInvestment": 1000}
        )
        loan = LoanItem.model_validate(
            {"outstandingBalance": 50000, "monthlyPayment": 2500, "interestRate": 10}
        )

        snapshot = FinancialSnapshotAggregator.aggregate(
            investments=[investment], loans=[loan]
        )
        assert snapshot.total_initial_investment == 1000
        assert snapshot.monthly_loan_payments == 2500
        assert snapshot.net_worth == pytest.approx(1000 - 50000)


class TestFinancialSnapshot:
    """Test cases for FinancialSnapshot."""

    def test_from_totals_derives_savings_and_net_worth(self):
        snapshot = FinancialSnapshot.from_totals(
            monthly_income=100000,
            monthly_expenses=60000,
            total_initial_investment=500000,
            total_debt=100000,
        )
        assert snapshot.monthly_savings == 40000
        assert snapshot.net_worth == 400000

    def test_derived_fields_follow_totals(self):
        """Test savings and net worth are derived even when built directly."""
        snapshot = FinancialSnapshot.model_validate(
            {
                "monthly_income": 100000,
                "monthly_expenses": 60000,
                "total_initial_investment": 500000,
                "total_debt": 100000,
                "monthly_savings": 0,
                "net_worth": 0,
            }
        )

        assert snapshot.monthly_savings == 40000
        assert snapshot.net_worth == 400000
        assert snapshot.model_dump()["monthly_savings"] == 40000

    def test_snapshot_is_immutable(self, snapshot):
        with pytest.raises(Exception):
            snapshot.monthly_income = 1

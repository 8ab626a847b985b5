"""
Pytest configuration and shared fixtures for the what-if planner tests.
"""

import os
from unittest.mock import patch

import pytest

from whatif import create_app
from whatif.config import reset_global_settings
from whatif.models import (
    ExpenseItem,
    FinancialSnapshot,
    IncomeItem,
    InvestmentItem,
    LoanItem,
)


@pytest.fixture
def app():
    """Create a Flask app configured for testing."""
    reset_global_settings()
    with patch.dict(
        os.environ,
        {"SECRET_KEY": "test-secret-key-123", "APP_ENV": "testing"},
        clear=True,
    ):
        app = create_app()
    yield app
    reset_global_settings()


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()


@pytest.fixture
def snapshot():
    """Snapshot with positive savings, some investments and some debt."""
    return FinancialSnapshot.from_totals(
        monthly_income=100000,
        monthly_expenses=60000,
        total_initial_investment=500000,
        total_debt=100000,
        assumed_investment_return_rate=7.0,
    )


@pytest.fixture
def records():
    """A small ledger covering every record kind and frequency."""
    return {
        "incomes": [
            IncomeItem(name="Salary", amount=90000, frequency="monthly"),
            IncomeItem(name="Tutoring", amount=2000, frequency="weekly"),
            IncomeItem(name="Bonus", amount=120000, frequency="yearly"),
        ],
        "expenses": [
            ExpenseItem(name="Rent", amount=25000, category="Housing"),
            ExpenseItem(name="Groceries", amount=12000, category="Food"),
            ExpenseItem(
                name="Insurance premium",
                amount=24000,
                category="Insurance",
                frequency="one-time",
            ),
        ],
        "investments": [
            InvestmentItem(
                name="Index fund",
                type="Mutual Funds",
                current_value=450000,
                initial_investment=300000,
            ),
            InvestmentItem(name="Gift shares", type="Stocks", current_value=50000),
        ],
        "loans": [
            LoanItem(
                name="Car loan",
                type="Auto Loan",
                outstanding_balance=200000,
                monthly_payment=8000,
                interest_rate=9.0,
            ),
        ],
    }

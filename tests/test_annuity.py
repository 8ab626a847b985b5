"""Tests for the monthly-contribution future value calculator."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from whatif.models.annuity import AnnuityGrowthCalculator

future_value = AnnuityGrowthCalculator.future_value_of_monthly_contribution


class TestFutureValue:
    """Test cases for future_value_of_monthly_contribution."""

    def test_known_value(self):
        """Test 10,000 a month at 12% for one year."""
        # (1.01^12 - 1) / 0.01 = 12.682503...
        assert future_value(10000, 12, 1) == pytest.approx(126825.03, abs=0.01)

    def test_zero_rate_is_plain_sum(self):
        assert future_value(10000, 0, 10) == 10000 * 12 * 10

    def test_zero_years(self):
        assert future_value(10000, 8, 0) == 0

    def test_total_contributed(self):
        assert AnnuityGrowthCalculator.total_contributed(10000, 10) == 1200000

    @given(
        amount=st.floats(min_value=1, max_value=1e6),
        rate=st.floats(min_value=0.1, max_value=29),
        years=st.integers(min_value=1, max_value=40),
    )
    def test_higher_rate_grows_more(self, amount, rate, years):
        assert future_value(amount, rate + 1, years) > future_value(amount, rate, years)

    @given(
        amount=st.floats(min_value=1, max_value=1e6),
        rate=st.floats(min_value=0.1, max_value=30),
        years=st.integers(min_value=1, max_value=40),
    )
    def test_positive_rate_beats_contributions(self, amount, rate, years):
        assert future_value(amount, rate, years) > amount * 12 * years

    @given(
        amount=st.floats(min_value=1, max_value=1e6),
        rate=st.one_of(st.just(0.0), st.floats(min_value=0.1, max_value=30)),
        years=st.integers(min_value=0, max_value=39),
    )
    def test_more_years_grow_more(self, amount, rate, years):
        assert future_value(amount, rate, years + 1) > future_value(amount, rate, years)

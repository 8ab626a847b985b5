"""Future value of a fixed monthly contribution (ordinary annuity)."""

MONTHS_PER_YEAR = 12


class AnnuityGrowthCalculator:
    """Calculator for compounded growth of recurring monthly contributions."""

    @staticmethod
    def future_value_of_monthly_contribution(
        monthly_amount: float, annual_rate_pct: float, years: float
    ) -> float:
        """
        Calculate the value of a monthly contribution after a number of years.

        Contributions are made at the end of each month and compound monthly.

        Args:
            monthly_amount: Amount contributed every month
            annual_rate_pct: Annual return in percent (12.5 for 12.5%)
            years: Elapsed duration in years

        Returns:
            Accumulated value; the plain sum of contributions at a zero rate
        """
        monthly_rate = annual_rate_pct / 100 / MONTHS_PER_YEAR
        growth = (1 + monthly_rate) ** (years * MONTHS_PER_YEAR)
        # Zero rate, or one too small to register in floating point
        if monthly_rate == 0 or growth == 1:
            return monthly_amount * MONTHS_PER_YEAR * years
        return monthly_amount * (growth - 1) / monthly_rate

    @staticmethod
    def total_contributed(monthly_amount: float, years: float) -> float:
        """Sum of contributions made over the period."""
        return monthly_amount * MONTHS_PER_YEAR * years

"""Tests for trend series helpers."""

import pytest

from medfin.metrics.trends import (
    compound_annual_growth,
    share_of_total,
    year_over_year_growth,
)


class TestYearOverYearGrowth:
    """Tests for period-on-period growth."""

    def test_growth(self):
        """Growth is relative to the previous year."""
        growth = year_over_year_growth([(2021, 100), (2022, 110), (2023, 99)])

        assert [year for year, _ in growth] == [2022, 2023]
        assert growth[0][1] == pytest.approx(10.0)
        assert growth[1][1] == pytest.approx(-10.0)

    def test_short_series(self):
        """Fewer than two periods has no growth."""
        assert year_over_year_growth([]) == []
        assert year_over_year_growth([(2023, 100)]) == []

    def test_zero_previous(self):
        """Growth from zero is reported as 0."""
        growth = year_over_year_growth([(2022, 0), (2023, 50)])
        assert growth == [(2023, 0.0)]


class TestCompoundAnnualGrowth:
    """Tests for CAGR."""

    def test_doubling_over_two_years(self):
        """Doubling in two years is about 41.4% a year."""
        cagr = compound_annual_growth([(2021, 100), (2022, 150), (2023, 200)])
        assert cagr == pytest.approx((2 ** 0.5 - 1) * 100)

    def test_degenerate(self):
        """Short series or non-positive start returns 0."""
        assert compound_annual_growth([(2023, 100)]) == 0.0
        assert compound_annual_growth([(2022, 0), (2023, 100)]) == 0.0
        assert compound_annual_growth([(2023, 100), (2023, 200)]) == 0.0


class TestShareOfTotal:
    """Tests for pie chart shares."""

    def test_shares(self):
        """Shares sum to 100."""
        shares = share_of_total([45, 25, 18, 12])
        assert shares == pytest.approx([45.0, 25.0, 18.0, 12.0])
        assert sum(shares) == pytest.approx(100.0)

    def test_zero_total(self):
        """All-zero input gives all-zero shares."""
        assert share_of_total([0, 0]) == [0.0, 0.0]

    def test_empty(self):
        """Empty input gives empty output."""
        assert share_of_total([]) == []

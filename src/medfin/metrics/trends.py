"""Trend series helpers for the Dashboard charts.

Same zero-guard policy as the metrics engine: a zero denominator yields 0
instead of inf/nan.
"""

from typing import List, Sequence, Tuple

import numpy as np


def year_over_year_growth(
    series: Sequence[Tuple[int, float]],
) -> List[Tuple[int, float]]:
    """Percentage change of each period against the one before.

    Args:
        series: ``(year, amount)`` pairs in chronological order.

    Returns:
        ``(year, growth_pct)`` for every period after the first. Growth is 0
        when the previous amount is 0.
    """
    if len(series) < 2:
        return []

    years = [year for year, _ in series]
    amounts = np.array([amount for _, amount in series], dtype=float)

    previous = amounts[:-1]
    change = np.diff(amounts)
    growth = np.divide(
        change * 100,
        previous,
        out=np.zeros_like(change),
        where=previous != 0,
    )
    return [(year, float(g)) for year, g in zip(years[1:], growth)]


def compound_annual_growth(series: Sequence[Tuple[int, float]]) -> float:
    """Compound annual growth rate (%) between first and last period.

    Returns 0 for fewer than two periods, a non-positive starting amount or
    a zero-length span between the first and last year.
    """
    if len(series) < 2:
        return 0.0

    first_year, first_amount = series[0]
    last_year, last_amount = series[-1]
    periods = last_year - first_year
    if first_amount <= 0 or periods <= 0:
        return 0.0

    ratio = last_amount / first_amount
    if ratio <= 0:
        return 0.0
    return float((np.power(ratio, 1.0 / periods) - 1) * 100)


def share_of_total(values: Sequence[float]) -> List[float]:
    """Each value as a percentage of the sum (all zeros when the sum is 0)."""
    if len(values) == 0:
        return []

    arr = np.asarray(values, dtype=float)
    total = arr.sum()
    if total == 0:
        return [0.0] * len(arr)
    return [float(v) for v in arr / total * 100]

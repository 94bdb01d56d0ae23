"""Display formatting for money and percentages.

Amounts are shown the Indian way: abbreviated in thousands (K), lakh (L,
1e5), crore (Cr, 1e7) and billions (B), or written out in full with lakh/crore
digit grouping (12,34,567).
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import List

# Currency symbols for display
CURRENCY_SYMBOLS = {
    "INR": "₹",
    "GBP": "£",
    "USD": "$",
    "EUR": "€",
}

# (threshold, divisor, suffix), largest first
_ABBREVIATIONS = [
    (1_000_000_000, 1_000_000_000, "B"),
    (10_000_000, 10_000_000, "Cr"),
    (100_000, 100_000, "L"),
    (1_000, 1_000, "K"),
]


def format_number(value: float, symbol: str = "₹") -> str:
    """Format an amount in abbreviated form.

    Args:
        value: The monetary value.
        symbol: Currency symbol (default ₹).

    Returns:
        Abbreviated string, e.g. "₹1.2Cr", "₹45.0L", "₹850".
    """
    for threshold, divisor, suffix in _ABBREVIATIONS:
        if value >= threshold:
            return f"{symbol}{value / divisor:.1f}{suffix}"
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return f"{symbol}{value}"


def _group_indian(digits: str) -> str:
    """Insert lakh/crore separators: last three digits, then pairs."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups: List[str] = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_currency(value: float, symbol: str = "₹") -> str:
    """Format a value as a whole-unit currency string with Indian grouping.

    Halves round away from zero (2.5 -> 3).

    Args:
        value: The monetary value.
        symbol: Currency symbol (default ₹).

    Returns:
        Formatted currency string (e.g., "₹12,34,567", "-₹500").
    """
    rounded = int(Decimal(abs(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))
    sign = "-" if value < 0 and rounded != 0 else ""
    return f"{sign}{symbol}{_group_indian(str(rounded))}"


def format_percentage(value: float, decimals: int = 1) -> str:
    """Format a percentage value (already scaled to 0-100)."""
    return f"{value:.{decimals}f}%"


def format_signed_percentage(value: float, decimals: int = 1) -> str:
    """Percentage with an explicit + for positive values."""
    prefix = "+" if value > 0 else ""
    return f"{prefix}{value:.{decimals}f}%"

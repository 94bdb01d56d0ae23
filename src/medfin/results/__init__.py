"""Presentation helpers shared by the app pages."""

from medfin.results.formatting import (
    CURRENCY_SYMBOLS,
    format_currency,
    format_number,
    format_percentage,
    format_signed_percentage,
)

__all__ = [
    "CURRENCY_SYMBOLS",
    "format_currency",
    "format_number",
    "format_percentage",
    "format_signed_percentage",
]

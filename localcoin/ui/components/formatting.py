"""
Utility helpers for formatting numeric values, currency strings, and percentages.
"""

from __future__ import annotations

import math
from typing import Optional

MISSING = "–"
PRICE_MIN_DECIMALS = 2
PRICE_MAX_DECIMALS = 6


def _is_missing(value) -> bool:
    if value is None:
        return True
    try:
        return math.isnan(float(value))
    except (TypeError, ValueError):
        return True


def format_number(value: Optional[float], decimals: int = 0) -> str:
    if _is_missing(value):
        return MISSING
    return f"{float(value):,.{decimals}f}"


def format_price(value: Optional[float], symbol: str = "$") -> str:
    """USD-style price with 2 to 6 fraction digits: $67,123.45, $0.000123."""
    if _is_missing(value):
        return MISSING
    numeric = float(value)
    text = f"{abs(numeric):,.{PRICE_MAX_DECIMALS}f}"
    whole, _, fraction = text.partition(".")
    fraction = fraction.rstrip("0").ljust(PRICE_MIN_DECIMALS, "0")
    sign = "-" if numeric < 0 else ""
    return f"{sign}{symbol}{whole}.{fraction}"


def format_change(value: Optional[float], decimals: int = 2) -> str:
    """Signed percentage: +1.23%, -0.50%."""
    if _is_missing(value):
        return MISSING
    numeric = float(value)
    sign = "+" if numeric >= 0 else ""
    return f"{sign}{numeric:.{decimals}f}%"


def format_rank(value: Optional[int]) -> str:
    if _is_missing(value):
        return MISSING
    return f"#{int(value)}"


def pluralize(count: int, singular: str, plural: Optional[str] = None) -> str:
    word = singular if count == 1 else (plural or f"{singular}s")
    return f"{count} {word}"

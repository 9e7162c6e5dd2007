"""Numeric helpers shared by the aggregation core.

- sanitize_amount: clamp malformed totals at the input boundary
- js_round: half-up integer rounding used for DPS figures
- format_number: abbreviated display (1.2k, 1.5m, 2.3b)
"""

from __future__ import annotations

import logging
import math

logger = logging.getLogger(__name__)

_ABBREVIATIONS: tuple[tuple[float, str], ...] = (
    (1_000_000_000, "b"),
    (1_000_000, "m"),
    (1_000, "k"),
)


def is_finite_number(value: float | None) -> bool:
    """True for a real, finite number."""
    return value is not None and not isinstance(value, bool) and math.isfinite(value)


def sanitize_amount(value: float | None, field: str) -> float:
    """Clamp a non-negative quantity read from upstream.

    None, NaN, infinities and negatives become 0.0. Anything other than
    None is logged so a bad upstream row can be traced.

    Args:
        value: Raw value.
        field: Field name used in the warning.

    Returns:
        A finite, non-negative float.
    """
    if value is None:
        return 0.0
    if not is_finite_number(value) or value < 0:
        logger.warning(f"Clamping malformed {field}={value!r} to 0")
        return 0.0
    return float(value)


def js_round(value: float) -> int:
    """Round half up (2.5 -> 3), unlike the built-in round()."""
    return math.floor(value + 0.5)


def format_number(value: float | None, decimals: int = 1) -> str:
    """Format a number in abbreviated form.

    Args:
        value: Number to format. None or non-finite renders as "0".
        decimals: Decimal places for abbreviated values.

    Returns:
        e.g. "950", "1.2k", "3.4m", "-2.0b".
    """
    if not is_finite_number(value):
        return "0"

    abs_value = abs(value)
    sign = "-" if value < 0 else ""

    for threshold, suffix in _ABBREVIATIONS:
        if abs_value >= threshold:
            return f"{sign}{abs_value / threshold:.{decimals}f}{suffix}"

    return f"{sign}{js_round(abs_value)}"

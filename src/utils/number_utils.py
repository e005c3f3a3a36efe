"""Helpers for float normalization and guarded ratios."""

import math


def coerce_float(value) -> float:
    """Normalize numeric values to float.

    Args:
        value: Raw numeric value from SQL rows or adapters.

    Returns:
        float: Normalized numeric value, 0.0 for missing or non-finite input.
    """
    if value is None:
        return 0.0
    if isinstance(value, float):
        return value if math.isfinite(value) else 0.0
    result = float(value)
    return result if math.isfinite(result) else 0.0


def safe_divide(numerator: float, denominator: float) -> float:
    """Divide two numbers, returning 0.0 when the denominator is zero.

    Args:
        numerator: Dividend.
        denominator: Divisor.

    Returns:
        float: Quotient, or 0.0 when it would not be finite.
    """
    if not denominator:
        return 0.0
    result = numerator / denominator
    return result if math.isfinite(result) else 0.0


def percentage(part: float, whole: float) -> float:
    """Return ``part / whole * 100`` guarded against a zero ``whole``."""
    return safe_divide(part, whole) * 100


__all__ = ["coerce_float", "safe_divide", "percentage"]

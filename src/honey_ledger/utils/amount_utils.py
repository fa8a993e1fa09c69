"""Helpers for amount normalization."""

import math


def coerce_amount(value) -> float:
    """Normalize numeric values to float.

    Args:
        value: Raw amount from a JSON payload or a form input.

    Returns:
        float: Normalized amount, 0.0 for missing values.

    Raises:
        ValueError: If the value cannot be read as a finite number.
    """
    if value is None:
        return 0.0
    if isinstance(value, bool):
        raise ValueError(f"Invalid amount: {value!r}")
    amount = float(value)
    if not math.isfinite(amount):
        raise ValueError(f"Invalid amount: {value!r}")
    return amount


__all__ = ["coerce_amount"]

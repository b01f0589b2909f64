"""Pointwise and special-value checks against the function under test."""

from __future__ import annotations

import numpy as np

from ..utils.constants import SIGNIFICANT_DIGITS
from .errors import NotNaN, ValueMismatch
from .functions import NUMPY_SINHF, FunctionUnderTest


def format_failure_message(
    function_name: str,
    value: float,
    actual: float,
    expected: float,
    label: str = "",
) -> str:
    """Build the diagnostic for one failed check.

    Input, actual and expected values are rendered with ``SIGNIFICANT_DIGITS``
    significant digits so float32 rounding differences stay visible.
    """
    width = SIGNIFICANT_DIGITS + 1
    message = (
        f"{function_name}({float(value):.{SIGNIFICANT_DIGITS}g}) returned "
        f"{float(actual):{width}.{SIGNIFICANT_DIGITS}g} when it should have returned "
        f"{float(expected):{width}.{SIGNIFICANT_DIGITS}g}"
    )
    if label:
        message += f" [value: {label}]"
    return message


def _within_tolerance(actual: np.float32, expected: np.float32, tolerance: np.float32) -> bool:
    # inf - inf is NaN and would compare as "not greater than tolerance"
    if np.isinf(expected) or np.isinf(actual):
        return bool(actual == expected)
    if np.isnan(actual):
        return False
    delta = np.abs(actual - expected)
    return bool(delta <= tolerance)


def validate(
    value,
    expected,
    tolerance,
    function: FunctionUnderTest = NUMPY_SINHF,
    label: str = "",
) -> None:
    """Check ``function(value)`` lies within ``tolerance`` of ``expected``.

    Raises
    ------
    ValueMismatch
        When the result is outside the tolerance.
    ValueError
        When ``tolerance`` is negative.
    """
    value = np.float32(value)
    expected = np.float32(expected)
    tolerance = np.float32(tolerance)
    if np.isnan(tolerance) or tolerance < 0:
        raise ValueError(f"tolerance must be non-negative, got {tolerance}")

    actual = function(value)
    if not _within_tolerance(actual, expected, tolerance):
        raise ValueMismatch(
            format_failure_message(function.name, value, actual, expected, label=label),
            value=value,
            actual=actual,
            expected=expected,
            tolerance=tolerance,
        )


def validate_is_nan(value, function: FunctionUnderTest = NUMPY_SINHF) -> None:
    """Check ``function(value)`` is NaN; raise ``NotNaN`` otherwise."""
    value = np.float32(value)
    actual = function(value)
    if not np.isnan(actual):
        raise NotNaN(
            format_failure_message(function.name, value, actual, NotNaN.expected),
            value=value,
            actual=actual,
        )

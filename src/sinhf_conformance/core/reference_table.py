"""Reference values for single-precision hyperbolic sine.

Tolerances scale with the magnitude of the expected result so the comparison
covers the significant digits a binary32 result can carry (6-9 digits):

- expected ``0.xxxxxxxxx``  -> ``PAL_EPSILON``
- expected ``x.xxxxxxxx``   -> ``PAL_EPSILON * 10``
- expected ``xx.xxxxxxx``   -> ``PAL_EPSILON * 100``

The per-entry values below are kept literally; they are not rederived.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ..utils.constants import PAL_EPSILON, POSITIVE_INFINITY


@dataclass(frozen=True)
class TestCase:
    """One reference point for the function under test.

    Parameters
    ----------
    value
        Input passed to the function.
    expected
        Reference result.
    tolerance
        Maximum accepted absolute difference between actual and expected.
    label
        Where ``value`` comes from (e.g. ``pi / 4``), shown in diagnostics.
    """

    __test__ = False  # not a pytest class

    value: np.float32
    expected: np.float32
    tolerance: np.float32
    label: str = ""

    def validate(self) -> None:
        """Raise ValueError when the entry breaks a table invariant."""
        if np.isnan(self.tolerance) or self.tolerance < 0:
            raise ValueError("tolerance must be non-negative")
        for name in ("value", "expected"):
            number = getattr(self, name)
            if np.isnan(number) or (np.isinf(number) and number < 0):
                raise ValueError(f"{name} must be finite or positive infinity, got {number}")

    def negated(self) -> "TestCase":
        """Return the odd-symmetry mirror ``(-value, -expected, tolerance)``."""
        return TestCase(
            value=-self.value,
            expected=-self.expected,
            tolerance=self.tolerance,
            label=f"-({self.label})" if self.label else "",
        )


def _case(value: float, expected: float, tolerance: float, label: str = "") -> TestCase:
    case = TestCase(
        value=np.float32(value),
        expected=np.float32(expected),
        tolerance=np.float32(tolerance),
        label=label,
    )
    case.validate()
    return case


SINHF_REFERENCE_TABLE: tuple[TestCase, ...] = (
    #     value              expected           tolerance
    _case(0,                 0,                 PAL_EPSILON),
    _case(0.318309886,       0.323712439,       PAL_EPSILON,        "1 / pi"),
    _case(0.434294482,       0.448075979,       PAL_EPSILON,        "log10(e)"),
    _case(0.636619772,       0.680501678,       PAL_EPSILON,        "2 / pi"),
    _case(0.693147181,       0.75,              PAL_EPSILON,        "ln(2)"),
    _case(0.707106781,       0.767523145,       PAL_EPSILON,        "1 / sqrt(2)"),
    _case(0.785398163,       0.868670961,       PAL_EPSILON,        "pi / 4"),
    _case(1,                 1.17520119,        PAL_EPSILON * 10),
    _case(1.12837917,        1.38354288,        PAL_EPSILON * 10,   "2 / sqrt(pi)"),
    _case(1.41421356,        1.93506682,        PAL_EPSILON * 10,   "sqrt(2)"),
    _case(1.44269504,        1.99789801,        PAL_EPSILON * 10,   "log2(e)"),
    _case(1.57079633,        2.30129890,        PAL_EPSILON * 10,   "pi / 2"),
    _case(2.30258509,        4.95,              PAL_EPSILON * 10,   "ln(10)"),
    _case(2.71828183,        7.54413710,        PAL_EPSILON * 10,   "e"),
    _case(3.14159265,        11.5487394,        PAL_EPSILON * 100,  "pi"),
    _case(POSITIVE_INFINITY, POSITIVE_INFINITY, 0),
)

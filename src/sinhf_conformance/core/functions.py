"""Single-precision hyperbolic-sine implementations that can be put under test."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

import numpy as np


@dataclass(frozen=True)
class FunctionUnderTest:
    """A named float32 -> float32 callable.

    Parameters
    ----------
    name
        Display name used in diagnostics (e.g. ``numpy.sinh``).
    function
        Callable evaluated on one ``np.float32`` input.
    """

    name: str
    function: Callable[[np.float32], np.float32]

    def __call__(self, value: np.float32) -> np.float32:
        return np.float32(self.function(np.float32(value)))


def numpy_sinhf(value: np.float32) -> np.float32:
    """Evaluate ``numpy.sinh`` in single precision."""
    return np.sinh(np.float32(value), dtype=np.float32)


def math_sinhf(value: np.float32) -> np.float32:
    """Evaluate ``math.sinh`` in double precision and round to float32."""
    try:
        result = math.sinh(float(value))
    except OverflowError:
        result = math.copysign(math.inf, float(value))
    with np.errstate(over="ignore"):
        return np.float32(result)


NUMPY_SINHF = FunctionUnderTest(name="numpy.sinh", function=numpy_sinhf)
MATH_SINHF = FunctionUnderTest(name="math.sinh", function=math_sinhf)

IMPLEMENTATIONS: dict[str, FunctionUnderTest] = {
    "numpy": NUMPY_SINHF,
    "math": MATH_SINHF,
}
DEFAULT_IMPLEMENTATION = "numpy"


def get_implementation(name: str) -> FunctionUnderTest:
    """Return the registered implementation called ``name``."""
    try:
        return IMPLEMENTATIONS[name]
    except KeyError:
        known = ", ".join(sorted(IMPLEMENTATIONS))
        raise ValueError(f"unknown sinh implementation {name!r}; expected one of: {known}") from None

"""Conformance harness for single-precision hyperbolic sine.

Checks a runtime's float32 ``sinh`` against a fixed table of reference values
(and their negations) within magnitude-scaled tolerances, then confirms NaN
propagation. The first failed check fails the run.
"""

__version__ = "0.1.0"

from .core.driver import DriverState, FunctionValidator
from .core.errors import FatalSetupError, NotNaN, ValueMismatch
from .core.reference_table import SINHF_REFERENCE_TABLE, TestCase
from .core.validators import validate, validate_is_nan
from .io.environment import HarnessEnvironment

__all__ = [
    "DriverState",
    "FunctionValidator",
    "FatalSetupError",
    "NotNaN",
    "ValueMismatch",
    "SINHF_REFERENCE_TABLE",
    "TestCase",
    "validate",
    "validate_is_nan",
    "HarnessEnvironment",
]

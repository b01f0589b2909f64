"""Reference table, validators and the run driver."""

from .driver import DriverState, FunctionValidator
from .errors import (
    ConformanceError,
    FatalSetupError,
    NotNaN,
    ValidationFailure,
    ValueMismatch,
)
from .functions import (
    DEFAULT_IMPLEMENTATION,
    IMPLEMENTATIONS,
    MATH_SINHF,
    NUMPY_SINHF,
    FunctionUnderTest,
    get_implementation,
)
from .reference_table import SINHF_REFERENCE_TABLE, TestCase
from .validators import format_failure_message, validate, validate_is_nan

__all__ = [
    "DriverState",
    "FunctionValidator",
    "ConformanceError",
    "FatalSetupError",
    "NotNaN",
    "ValidationFailure",
    "ValueMismatch",
    "DEFAULT_IMPLEMENTATION",
    "IMPLEMENTATIONS",
    "MATH_SINHF",
    "NUMPY_SINHF",
    "FunctionUnderTest",
    "get_implementation",
    "SINHF_REFERENCE_TABLE",
    "TestCase",
    "format_failure_message",
    "validate",
    "validate_is_nan",
]

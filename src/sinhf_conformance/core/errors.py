"""Failure taxonomy for a conformance run.

Every failure is fatal to the run: the driver stops at the first one, tears
the environment down and hands the rendered message to the failure reporter.
"""

from __future__ import annotations

import numpy as np


class ConformanceError(Exception):
    """Base class for all harness failures.

    Attributes
    ----------
    message
        Human-readable diagnostic.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r})"


class FatalSetupError(ConformanceError):
    """Environment initialization failed; no validation has run."""


class ValidationFailure(ConformanceError):
    """A single check against the function under test failed."""

    def __init__(self, message: str, value: np.float32, actual: np.float32) -> None:
        super().__init__(message)
        self.value = value
        self.actual = actual


class ValueMismatch(ValidationFailure):
    """Result differs from the reference value by more than the tolerance."""

    def __init__(
        self,
        message: str,
        value: np.float32,
        actual: np.float32,
        expected: np.float32,
        tolerance: np.float32,
    ) -> None:
        super().__init__(message, value, actual)
        self.expected = expected
        self.tolerance = tolerance


class NotNaN(ValidationFailure):
    """A NaN input produced a non-NaN result."""

    expected = np.float32(np.nan)

"""Table-driven driver for a single conformance run.

The run is strictly sequential::

    initialize environment -> reference table (+ negations) -> NaN check
    -> terminate environment -> exit status

The first failed check stops the run. The environment is always terminated
once it was initialized, before the failure reporter is called.
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import Callable, NoReturn, Optional, Sequence

import numpy as np

from ..utils.constants import DIAGNOSTIC_PREFIX, FAIL_EXIT_CODE, NAN, PASS_EXIT_CODE
from .errors import FatalSetupError, ValidationFailure
from .functions import FunctionUnderTest
from .reference_table import SINHF_REFERENCE_TABLE, TestCase
from .validators import validate, validate_is_nan


class DriverState(Enum):
    UNINITIALIZED = "uninitialized"
    RUNNING = "running"
    TERMINATED = "terminated"


class FunctionValidator:
    """Run the reference table and NaN check against one implementation.

    Parameters
    ----------
    environment
        Collaborator exposing ``initialize(args)``, ``terminate()`` and, once
        initialized, ``options`` with ``function`` and ``verbose`` attributes.
    report_failure
        Called with the diagnostic of the first failed check; must not return.
    table : Sequence[TestCase], optional
        Reference entries, validated in order (default: ``SINHF_REFERENCE_TABLE``).
    nan_input : float, optional
        Input for the NaN propagation check.
    """

    def __init__(
        self,
        environment,
        report_failure: Callable[[str], NoReturn],
        table: Sequence[TestCase] = SINHF_REFERENCE_TABLE,
        nan_input: np.float32 = NAN,
    ):
        self.environment = environment
        self.report_failure = report_failure
        self.table = tuple(table)
        self.nan_input = nan_input
        self.state = DriverState.UNINITIALIZED
        self.checks_passed = 0

    def run(self, args: Optional[Sequence[str]] = None) -> int:
        """Execute the full run and return the process exit code."""
        if self.state is not DriverState.UNINITIALIZED:
            raise RuntimeError(f"driver already used (state: {self.state.value})")

        try:
            self.environment.initialize(args)
        except FatalSetupError as exc:
            print(f"{DIAGNOSTIC_PREFIX}setup failed: {exc.message}", file=sys.stderr)
            return FAIL_EXIT_CODE
        self.state = DriverState.RUNNING

        failure: Optional[ValidationFailure] = None
        try:
            options = self.environment.options
            function = options.function
            self._run_checks(function, bool(options.verbose))
        except ValidationFailure as exc:
            failure = exc
        finally:
            self.environment.terminate()
            self.state = DriverState.TERMINATED

        if failure is not None:
            self.report_failure(failure.message)
            # A reporter that returns still fails the run.
            return FAIL_EXIT_CODE

        print(f"{DIAGNOSTIC_PREFIX}PASS: {self.checks_passed} checks against {function.name}")
        return PASS_EXIT_CODE

    def _run_checks(self, function: FunctionUnderTest, verbose: bool) -> None:
        for case in self.table:
            for check in (case, case.negated()):
                validate(
                    check.value,
                    check.expected,
                    check.tolerance,
                    function=function,
                    label=check.label,
                )
                self._passed(verbose, f"{function.name}({float(check.value):g}) ok")

        validate_is_nan(self.nan_input, function=function)
        self._passed(verbose, f"{function.name}({float(self.nan_input):g}) is nan")

    def _passed(self, verbose: bool, line: str) -> None:
        self.checks_passed += 1
        if verbose:
            print(f"{DIAGNOSTIC_PREFIX}{line}")

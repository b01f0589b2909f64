"""Process environment for a conformance run: argument parsing and lifecycle."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from ..core.errors import FatalSetupError
from ..core.functions import (
    DEFAULT_IMPLEMENTATION,
    IMPLEMENTATIONS,
    FunctionUnderTest,
    get_implementation,
)


@dataclass(frozen=True)
class HarnessOptions:
    """Runtime options resolved from the command line.

    Parameters
    ----------
    function
        Implementation put under test.
    verbose
        Print one line per passing check.
    """

    function: FunctionUnderTest
    verbose: bool = False


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise FatalSetupError(f"invalid arguments: {message}")

    def exit(self, status=0, message=None):
        # --help ends parsing before any check ran, which is a setup failure
        if message:
            self._print_message(message, sys.stderr)
        raise FatalSetupError(f"argument parsing stopped (status {status}) before any check ran")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="sinhf-conformance",
        description="Validate a single-precision sinh implementation against reference values.",
    )
    parser.add_argument(
        "--function",
        choices=sorted(IMPLEMENTATIONS),
        default=DEFAULT_IMPLEMENTATION,
        help=f"Implementation to validate (default: {DEFAULT_IMPLEMENTATION})",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print every passing check",
    )
    return parser


class HarnessEnvironment:
    """Default environment collaborator.

    ``initialize`` must be called once before any validation and ``terminate``
    exactly once afterwards. Floating-point error reporting is silenced for
    the lifetime of the environment so overflow to infinity and NaN
    propagation do not emit numpy warnings.
    """

    def __init__(self):
        self.options: Optional[HarnessOptions] = None
        self._saved_errstate: Optional[dict] = None
        self._terminated = False

    @property
    def initialized(self) -> bool:
        return self.options is not None and not self._terminated

    def initialize(self, args: Optional[Sequence[str]] = None) -> None:
        """Parse ``args`` and prepare the process; raise FatalSetupError on failure."""
        if self.options is not None:
            raise FatalSetupError("environment already initialized")

        namespace = build_parser().parse_args(list(args) if args is not None else [])
        try:
            function = get_implementation(namespace.function)
        except ValueError as exc:
            raise FatalSetupError(str(exc)) from exc

        self._saved_errstate = np.seterr(over="ignore", invalid="ignore")
        self.options = HarnessOptions(function=function, verbose=namespace.verbose)

    def terminate(self) -> None:
        """Restore process state; valid once, after ``initialize``."""
        if self.options is None:
            raise RuntimeError("environment was never initialized")
        if self._terminated:
            raise RuntimeError("environment already terminated")

        np.seterr(**self._saved_errstate)
        self._saved_errstate = None
        self._terminated = True

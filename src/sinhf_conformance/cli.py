"""Command-line entry point.

Usage:
    python -m sinhf_conformance [--function {math,numpy}] [--verbose]
"""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .core.driver import FunctionValidator
from .io.environment import HarnessEnvironment
from .io.reporting import report_failure


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the sinhf conformance table and return the process exit code."""
    if argv is None:
        argv = sys.argv[1:]
    validator = FunctionValidator(HarnessEnvironment(), report_failure=report_failure)
    return validator.run(argv)


if __name__ == "__main__":
    sys.exit(main())

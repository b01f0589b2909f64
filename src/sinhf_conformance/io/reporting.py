"""Failure reporting and reference-table summaries."""

from __future__ import annotations

import sys
from typing import NoReturn, Sequence, TextIO

from ..core.reference_table import TestCase
from ..utils.constants import DIAGNOSTIC_PREFIX, FAIL_EXIT_CODE


def report_failure(message: str, stream: TextIO | None = None) -> NoReturn:
    """Print ``message`` and terminate the process with the FAIL exit code."""
    print(f"{DIAGNOSTIC_PREFIX}FAIL: {message}", file=stream or sys.stderr)
    raise SystemExit(FAIL_EXIT_CODE)


def format_table_summary(table: Sequence[TestCase]) -> str:
    """Build a compact deterministic one-line-per-entry rendering of ``table``."""
    if not table:
        return "(empty reference table)"

    lines = []
    for index, case in enumerate(table):
        label = f"  # {case.label}" if case.label else ""
        lines.append(
            f"{index:2d}: value={float(case.value):<12.9g} "
            f"expected={float(case.expected):<12.9g} "
            f"tolerance={float(case.tolerance):.9g}{label}"
        )
    return "\n".join(lines)


def print_table_summary(table: Sequence[TestCase], prefix: str = DIAGNOSTIC_PREFIX) -> None:
    """Print the reference table, one prefixed line per entry."""
    for line in format_table_summary(table).splitlines():
        print(f"{prefix}{line}")

"""Process environment and failure reporting."""

from .environment import HarnessEnvironment, HarnessOptions, build_parser
from .reporting import format_table_summary, print_table_summary, report_failure

__all__ = [
    "HarnessEnvironment",
    "HarnessOptions",
    "build_parser",
    "format_table_summary",
    "print_table_summary",
    "report_failure",
]

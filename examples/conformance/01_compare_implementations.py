"""
Example: compare the registered float32 sinh implementations.

Prints the reference table, then the per-entry error of every registered
implementation relative to its tolerance, and finally runs the fail-fast
harness for each one.
"""

import numpy as np

from sinhf_conformance.core.driver import FunctionValidator
from sinhf_conformance.core.functions import IMPLEMENTATIONS
from sinhf_conformance.core.reference_table import SINHF_REFERENCE_TABLE
from sinhf_conformance.io.environment import HarnessEnvironment
from sinhf_conformance.io.reporting import print_table_summary, report_failure


def main():
    """Run implementation comparison example."""
    print("=" * 60)
    print("Example: float32 sinh implementations vs reference table")
    print("=" * 60)

    print("\nReference table:")
    print_table_summary(SINHF_REFERENCE_TABLE, prefix="  ")

    for key, implementation in sorted(IMPLEMENTATIONS.items()):
        print(f"\n{implementation.name}:")
        worst = 0.0
        for case in SINHF_REFERENCE_TABLE[:-1]:
            actual = implementation(case.value)
            delta = float(np.abs(actual - case.expected))
            used = delta / float(case.tolerance)
            worst = max(worst, used)
            print(f"  sinh({float(case.value):<11.9g}) = {float(actual):<12.9g} "
                  f"|delta| = {delta:.3e} ({used:6.1%} of tolerance)")
        print(f"  Worst case: {worst:.1%} of tolerance")

        validator = FunctionValidator(HarnessEnvironment(), report_failure=report_failure)
        exit_code = validator.run(["--function", key])
        print(f"  Harness exit code: {exit_code}")


if __name__ == "__main__":
    main()

"""Floating-point constants and exit codes for the conformance harness."""

import numpy as np

# binary32 has a machine epsilon of 2^-23 (~1.19e-7); libm implementations
# across platforms only reliably agree to 2^-21 (~4.77e-7).
PAL_EPSILON = 4.76837158e-07

# Special values (IEEE-754 constants, never computed)
POSITIVE_INFINITY = np.float32(np.inf)
NAN = np.float32(np.nan)

# Process exit status
PASS_EXIT_CODE = 0
FAIL_EXIT_CODE = 1

# Diagnostics
DIAGNOSTIC_PREFIX = "[sinhf] "
SIGNIFICANT_DIGITS = 9

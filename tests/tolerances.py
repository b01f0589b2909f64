"""Shared tolerance policy for reference-table tests.

The reference table keeps literal per-entry tolerances. The bands below state
the magnitude heuristic those literals follow, so a table edit that breaks it
is caught in review:

- expected ``0.x``   -> ``EPSILON``
- expected ``x.x``   -> ``EPSILON * 10``
- expected ``xx.x``  -> ``EPSILON * 100``
- infinite results compare exactly (tolerance 0)
"""

from __future__ import annotations

import numpy as np

# 2^-21, the practical float32 agreement limit across libm implementations.
EPSILON = np.float32(4.76837158e-07)

# (exclusive upper bound on |expected|, tolerance)
MAGNITUDE_BANDS = (
    (1.0, np.float32(4.76837158e-07)),
    (10.0, np.float32(4.76837158e-07 * 10)),
    (100.0, np.float32(4.76837158e-07 * 100)),
)

EXACT_TOLERANCE = np.float32(0.0)


def band_tolerance(expected: float) -> np.float32:
    """Return the tolerance the magnitude heuristic assigns to ``expected``."""
    magnitude = abs(float(expected))
    if np.isinf(magnitude):
        return EXACT_TOLERANCE
    for upper, tolerance in MAGNITUDE_BANDS:
        if magnitude < upper:
            return tolerance
    raise ValueError(f"no tolerance band covers |expected|={magnitude}")

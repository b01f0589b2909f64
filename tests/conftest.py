"""Test configuration for the sinhf conformance suite.

Policy:
- tests/unit drive the harness with fake sinh implementations and fake
  environments; they only check harness logic
- tests/conformance (any directory other than unit) evaluate a real float32
  sinh from the implementation registry and are marked `conformance`, so a
  platform with a broken libm can deselect them with ``-m "not conformance"``
"""

from __future__ import annotations

from pathlib import Path
import pytest


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers", "conformance: evaluates a registered float32 sinh against the reference table"
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    for item in items:
        parts = Path(str(item.fspath)).parts
        # Fakes live only in tests/unit; everything else hits the platform's sinh.
        if "tests" in parts and "unit" not in parts:
            item.add_marker(pytest.mark.conformance)

"""Global pytest fixtures and hooks for IGNITION."""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

pytest_plugins = [
    "tests.fixtures.components",
]

TESTS_ROOT = Path(__file__).parent.resolve()

# Every test is marked after the top-level directory it lives in.
SUITE_MARKERS = ("unit", "contract", "integration", "e2e")


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the default suite mark (`unit`, `contract`, ...) to each test."""
    for item in items:
        try:
            suite = item.path.resolve().relative_to(TESTS_ROOT).parts[0]
        except ValueError:
            continue
        if suite not in SUITE_MARKERS:
            continue
        if not any(marker.name == suite for marker in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, suite))

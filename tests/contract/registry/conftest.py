"""Fixtures for ComponentRegistry contract tests."""

from collections.abc import Callable, Iterable

import pytest

from ignition.adapters.registry import InMemoryComponentRegistry
from ignition.interfaces.component import ComponentSpec
from ignition.interfaces.registry import ComponentRegistry

RegistryFactory = Callable[[Iterable[ComponentSpec]], ComponentRegistry]


@pytest.fixture(params=["memory"])
def registry_factory(request: pytest.FixtureRequest) -> RegistryFactory:
    """Return a factory building a fresh registry from component specs.

    Supported params:
      - `"memory"` → InMemoryComponentRegistry

    Extend by adding new identifiers to `params` and branching below.
    """
    match request.param:
        case "memory":
            return InMemoryComponentRegistry
        case _:
            raise ValueError(f"unknown registry type: {request.param}")

"""Wire a component registry and a start coordinator together."""

from __future__ import annotations

import importlib
import logging
from collections.abc import Iterable
from dataclasses import dataclass

from ignition import config
from ignition.adapters.registry import InMemoryComponentRegistry
from ignition.interfaces.component import ComponentSpec
from ignition.interfaces.registry import ComponentRegistry
from ignition.service_layer.coordinator import StartCoordinator

logger = logging.getLogger(__name__)


class InvalidSpecsPath(ValueError):
    """Raised when a ``MODULE:ATTR`` path cannot be resolved to specifications."""

    def __init__(self, path: str, problem: str) -> None:
        super().__init__(f"Cannot load component specifications from {path!r}: {problem}")
        self.path = path
        self.problem = problem


@dataclass(frozen=True)
class AppContainer:
    """A class to hold the wired application."""

    registry: ComponentRegistry
    coordinator: StartCoordinator


def build_coordinator(
    registry: ComponentRegistry, detect_cycles: bool | None = None
) -> StartCoordinator:
    """Build a start coordinator for `registry`.

    Args:
        registry: Registry the coordinator starts components through.
        detect_cycles: Explicit cycle-detection setting; None reads
            `IGNITION_DETECT_CYCLES`.
    """
    if detect_cycles is None:
        detect_cycles = config.get_detect_cycles()
    return StartCoordinator(registry, detect_cycles=detect_cycles)


def bootstrap(
    specs: Iterable[ComponentSpec] = (),
    registry: ComponentRegistry | None = None,
    detect_cycles: bool | None = None,
) -> AppContainer:
    """Bootstrap a registry and coordinator.

    Args:
        specs: Specifications to register in a new in-memory registry.
        registry: A ready-made registry to use instead. Mutually exclusive
            with `specs`.
        detect_cycles: See `build_coordinator`.

    Raises:
        ValueError: If both `specs` and `registry` are given.
    """
    specs = tuple(specs)
    if registry is None:
        registry = InMemoryComponentRegistry(specs)
    elif specs:
        raise ValueError("Pass either specs or a registry, not both.")

    coordinator = build_coordinator(registry, detect_cycles)
    logger.debug(
        "Bootstrapped %s with %d component(s), detect_cycles=%s",
        type(registry).__name__,
        len(specs),
        coordinator.detect_cycles,
    )
    return AppContainer(registry=registry, coordinator=coordinator)


def load_specs(path: str) -> tuple[ComponentSpec, ...]:
    """Import component specifications from a ``MODULE:ATTR`` path.

    The attribute may be an iterable of `ComponentSpec` or a callable
    returning one.

    Raises:
        InvalidSpecsPath: If the path is malformed, cannot be imported, or
            does not yield specifications.
    """
    module_name, sep, attr = path.partition(":")
    if not sep or not module_name or not attr:
        raise InvalidSpecsPath(path, "expected MODULE:ATTR")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise InvalidSpecsPath(path, str(e)) from e
    try:
        value = getattr(module, attr)
    except AttributeError as e:
        raise InvalidSpecsPath(path, f"module has no attribute {attr!r}") from e

    if callable(value):
        value = value()
    try:
        specs = tuple(value)
    except TypeError as e:
        raise InvalidSpecsPath(path, "not an iterable of ComponentSpec") from e
    if not all(isinstance(spec, ComponentSpec) for spec in specs):
        raise InvalidSpecsPath(path, "not an iterable of ComponentSpec")
    return specs

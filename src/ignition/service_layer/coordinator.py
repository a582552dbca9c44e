"""Start a component and, recursively, whatever it depends on."""

from __future__ import annotations

import logging

from ignition.domain.model import (
    DependencyCycle,
    Failed,
    MissingDependency,
    StartMode,
    StartOutcome,
)
from ignition.interfaces.registry import ComponentRegistry

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class StartCoordinator:
    """Starts components through a registry, resolving missing dependencies.

    The registry's `MissingDependency` answers act as a work list: the missing
    dependency is started first (always as `StartMode.TEMPORARY`), then the
    original request is retried once. Any failure while starting a dependency
    is returned unchanged and the original component is not retried.

    `AlreadyRunning` is a success outcome and is returned as such. Every other
    outcome comes back exactly as the registry produced it.

    Nothing is cached between calls; the registry is asked every time.

    Args:
        registry: The registry that performs the actual starts.
        detect_cycles: When False (the default) a dependency cycle recurses
            until Python raises `RecursionError`. When True, the chain of
            components being resolved is tracked and a cycle yields
            `Failed(DependencyCycle(path))` instead.
    """

    def __init__(
        self, registry: ComponentRegistry, *, detect_cycles: bool = False
    ) -> None:
        self.registry = registry
        self.detect_cycles = detect_cycles

    def start(
        self, component: str, mode: StartMode = StartMode.TEMPORARY
    ) -> StartOutcome:
        """Start `component` and every dependency that is not running yet.

        Args:
            component: Name of the component to start.
            mode: Start mode for `component` only. Dependencies are started
                as `StartMode.TEMPORARY`.

        Returns:
            StartOutcome: `Started`, `StartedWithState` or `AlreadyRunning` on
            success; otherwise the first failure encountered, unchanged.

        Raises:
            RecursionError: On a dependency cycle when cycle detection is off.
        """
        return self._start(component, mode, ())

    def _start(
        self, component: str, mode: StartMode, chain: tuple[str, ...]
    ) -> StartOutcome:
        if self.detect_cycles:
            chain = (*chain, component)

        # retry in place; only a dependency's own start adds a stack frame
        while True:
            logger.debug("Starting %s (%s)", component, mode.value)
            outcome = self.registry.start(component, mode)

            if not isinstance(outcome, MissingDependency):
                break

            dependency = outcome.name
            if self.detect_cycles and dependency in chain:
                cycle = DependencyCycle((*chain, dependency))
                logger.warning("Cannot start %s: %s", component, cycle)
                return Failed(cycle)

            logger.debug("%s is waiting for %s", component, dependency)
            dependency_outcome = self._start(dependency, StartMode.TEMPORARY, chain)
            if not dependency_outcome.ok:
                logger.warning(
                    "Cannot start %s: dependency %s failed with %s",
                    component,
                    dependency,
                    dependency_outcome,
                )
                return dependency_outcome

            logger.info("Dependency %s of %s is running", dependency, component)

        if isinstance(outcome, Failed):
            logger.warning("Cannot start %s: %s", component, outcome.reason)
        return outcome

"""In-memory ComponentRegistry implementation.

Keeps the registered component specifications and the set of running
components in process memory. Start modes are recorded but not enforced;
reacting to a component's termination belongs to a supervisor, which this
registry is not.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from ignition.domain.model import (
    AlreadyRunning,
    Failed,
    InvalidStartReturn,
    MissingDependency,
    Started,
    StartedWithState,
    StartMode,
    StartOutcome,
    UnknownComponent,
)
from ignition.interfaces.component import Component, ComponentSpec, ensure_component
from ignition.interfaces.registry import (
    ComponentAlreadyRegistered,
    ComponentNotRunning,
    ComponentRegistry,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunningComponent:
    """Bookkeeping for a component that is currently running."""

    name: str
    handle: Any
    state: Any
    mode: StartMode


class InMemoryComponentRegistry(ComponentRegistry):
    """Process-local registry of components.

    All operations hold a re-entrant lock, so a component may call back into
    the registry from its own ``start`` and several threads may share one
    instance. Starting the same component from two threads starts it once; the
    loser sees `AlreadyRunning`.
    """

    def __init__(self, specs: Iterable[ComponentSpec] = ()) -> None:
        self._lock = threading.RLock()
        self._specs: dict[str, ComponentSpec] = {}
        self._components: dict[str, Component] = {}
        self._running: dict[str, RunningComponent] = {}
        for spec in specs:
            self.register(spec)

    # --- registration ---

    def register(self, spec: ComponentSpec) -> None:
        """Register a component specification.

        Args:
            spec: The specification to register.

        Raises:
            ComponentContractError: If ``spec.component`` has no callable ``start``.
            ComponentAlreadyRegistered: If the name is already taken.
        """
        component = ensure_component(spec.component)
        with self._lock:
            if spec.name in self._specs:
                raise ComponentAlreadyRegistered(spec.name)
            self._specs[spec.name] = spec
            self._components[spec.name] = component
        logger.debug(
            "Registered component %s (dependencies: %s)",
            spec.name,
            ", ".join(spec.dependencies) or "<none>",
        )

    # --- lookups ---

    def is_running(self, name: str) -> bool:
        with self._lock:
            return name in self._running

    def running(self) -> tuple[str, ...]:
        """Names of running components, in the order they were started."""
        with self._lock:
            return tuple(self._running)

    def mode_of(self, name: str) -> StartMode | None:
        """The mode a running component was started with, or None."""
        with self._lock:
            entry = self._running.get(name)
            return entry.mode if entry is not None else None

    # --- lifecycle ---

    def start(self, name: str, mode: StartMode) -> StartOutcome:
        with self._lock:
            if (spec := self._specs.get(name)) is None:
                return Failed(UnknownComponent(name))
            if name in self._running:
                return AlreadyRunning(name)
            for dependency in spec.dependencies:
                if dependency not in self._running:
                    return MissingDependency(dependency)

            try:
                outcome = self._components[name].start(mode, spec.args)
            except Exception as exc:  # pylint: disable=broad-except
                logger.exception("Component %s raised while starting", name)
                return Failed(exc)

            match outcome:
                case Started(handle=handle):
                    self._running[name] = RunningComponent(name, handle, None, mode)
                case StartedWithState(handle=handle, state=state):
                    self._running[name] = RunningComponent(name, handle, state, mode)
                case Failed():
                    pass
                case _:
                    # AlreadyRunning and MissingDependency are the registry's answers only
                    return Failed(InvalidStartReturn(name, outcome))

            if outcome.ok:
                logger.debug("Component %s started (%s)", name, mode.value)
            return outcome

    def stop(self, name: str) -> None:
        """Stop a running component.

        Calls the component's ``stop`` with the state retained from its start,
        then forgets it. Components that depend on it are left running.

        Raises:
            ComponentNotRunning: If the component is not running.
            Exception: Whatever the component's ``stop`` raises; the component
                stays recorded as running in that case.
        """
        with self._lock:
            if (entry := self._running.get(name)) is None:
                raise ComponentNotRunning(name)
            self._components[name].stop(entry.state)
            del self._running[name]
        logger.debug("Component %s stopped", name)

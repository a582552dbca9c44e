"""The component contract.

Every startable component provides two operations:

* ``start(mode, args)``: required. Returns `Started` or `StartedWithState`
  on success, or a failure outcome.
* ``stop(state)``: optional. Receives the state returned by ``start`` and
  releases whatever the component holds. Defaults to a no-op; an override
  replaces the default entirely.

Components are usually written by subclassing `Component`. Plain objects that
merely expose a callable ``start`` are accepted too: `ensure_component` checks
them when they are registered and wires in the default ``stop`` if they lack
one.
"""

from __future__ import annotations

import abc
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from ignition.domain.errors import ComponentContractError, InvalidComponentSpec
from ignition.domain.model import StartMode, StartOutcome


class Component(abc.ABC):
    """Contract for a startable component."""

    @abc.abstractmethod
    def start(self, mode: StartMode, args: Any) -> StartOutcome:
        """Start the component.

        Args:
            mode: Start mode requested for this component.
            args: Start arguments taken from the component's specification.

        Returns:
            `Started(handle)` or `StartedWithState(handle, state)` on success,
            otherwise a failure outcome.
        """

    def stop(self, state: Any) -> None:  # pylint: disable=unused-argument
        """Clean up after the component has been stopped.

        Does nothing by default. Override to release resources.

        Args:
            state: The state returned by `start`, or ``None``.
        """
        return None


class _DefaultStop(Component):
    """Adapts a duck-typed component that has no ``stop`` of its own."""

    def __init__(self, wrapped: object) -> None:
        self.wrapped = wrapped

    def start(self, mode: StartMode, args: Any) -> StartOutcome:
        return self.wrapped.start(mode, args)  # type: ignore[attr-defined]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.wrapped!r})"


def ensure_component(obj: object) -> Component:
    """Check that `obj` satisfies the component contract.

    Args:
        obj: A `Component` instance, or any object with a callable ``start``.

    Returns:
        `obj` itself when it already provides ``start`` and ``stop``, otherwise
        a wrapper that supplies the default no-op ``stop``.

    Raises:
        ComponentContractError: If ``start`` is missing or not callable, or if
            ``stop`` is present but not callable.
    """
    if not callable(getattr(obj, "start", None)):
        raise ComponentContractError(obj, "start")
    if not hasattr(obj, "stop"):
        return _DefaultStop(obj)
    if not callable(getattr(obj, "stop")):
        raise ComponentContractError(obj, "stop")
    return obj  # type: ignore[return-value]


@dataclass(frozen=True)
class ComponentSpec:
    """Everything a registry needs to know to start a component.

    Attributes:
        name: Unique component name.
        component: The object implementing the component contract.
        dependencies: Names of components that must be running first, in the
            order they are checked.
        args: Opaque start arguments passed to ``component.start``.
    """

    name: str
    component: Any
    dependencies: Sequence[str] = field(default_factory=tuple)
    args: Any = None

    def __post_init__(self) -> None:
        if not self.name:
            raise InvalidComponentSpec(self.name, "name must not be empty")
        if isinstance(self.dependencies, str):
            raise InvalidComponentSpec(
                self.name, "dependencies must be a sequence of names, not a string"
            )
        # normalize so the spec stays hashable and immutable
        object.__setattr__(self, "dependencies", tuple(self.dependencies))
        if self.name in self.dependencies:
            raise InvalidComponentSpec(self.name, "a component cannot depend on itself")

"""Start modes and start outcomes.

A `StartOutcome` is what the registry answers when asked to start one
component. Outcomes are plain values; only the coordinator interprets them.

Variants:

* `Started`: running, no application-defined state.
* `StartedWithState`: running, plus opaque state later handed to `stop`.
* `AlreadyRunning`: nothing to do; counts as success.
* `MissingDependency`: a declared dependency is not running yet.
* `Failed`: anything else; `reason` is opaque and never rewritten.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

# pylint: disable=too-few-public-methods


class StartMode(Enum):
    """How the runtime reacts when a directly started component terminates.

    The coordinator passes the mode through untouched; enforcing it is the
    registry's business. Dependencies are always started as `TEMPORARY`.
    """

    PERMANENT = "permanent"
    TRANSIENT = "transient"
    TEMPORARY = "temporary"


@dataclass(frozen=True)
class StartOutcome:
    """Base class for every start outcome."""

    @property
    def ok(self) -> bool:
        """Whether the component is running after this outcome."""
        return False


@dataclass(frozen=True)
class Started(StartOutcome):
    """Component started without application-defined state."""

    handle: Any

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class StartedWithState(StartOutcome):
    """Component started; `state` is retained and passed to `stop` later."""

    handle: Any
    state: Any

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class AlreadyRunning(StartOutcome):
    """Component was already running. Starting it again is a no-op."""

    name: str

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class MissingDependency(StartOutcome):
    """Component could not start because dependency `name` is not running."""

    name: str


@dataclass(frozen=True)
class Failed(StartOutcome):
    """Any other failure. The reason is surfaced to callers verbatim."""

    reason: Any


# --- Failure reasons ---


@dataclass(frozen=True)
class UnknownComponent:
    """Failure reason: the registry has no component by this name."""

    name: str

    def __str__(self) -> str:
        return f"unknown component '{self.name}'"


@dataclass(frozen=True)
class InvalidStartReturn:
    """Failure reason: a component's `start` returned something other than a start or a failure."""

    name: str
    value: Any

    def __str__(self) -> str:
        return f"component '{self.name}' returned {self.value!r} from start"


@dataclass(frozen=True)
class DependencyCycle:
    """Failure reason: dependency resolution looped back on itself.

    `path` lists the components in resolution order, ending with the
    component that closed the loop.
    """

    path: tuple[str, ...]

    def __str__(self) -> str:
        return "dependency cycle: " + " -> ".join(self.path)

"""Interface for the authority that knows which components run.

The registry owns every start/stop side effect. Callers never ask it for the
dependency graph; they ask it to start one component and read the outcome.
"""

from __future__ import annotations

import abc

from ignition.domain.model import StartMode, StartOutcome

# pylint: disable=too-few-public-methods


class ComponentRegistry(abc.ABC):
    """Start-one-component primitive."""

    @abc.abstractmethod
    def start(self, name: str, mode: StartMode) -> StartOutcome:
        """Attempt to start a single component.

        Implementations must tell apart a dependency that is not running
        (`MissingDependency`), a component that is already running
        (`AlreadyRunning`), and every other failure (`Failed`). They must be
        re-entrant: a call may arrive while another call is in progress on the
        same thread.

        Args:
            name: Name of the component to start.
            mode: Start mode for the component.

        Returns:
            StartOutcome: The classified result of the attempt.
        """

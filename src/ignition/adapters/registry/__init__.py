"""Component registry adapters."""

from .memory import InMemoryComponentRegistry, RunningComponent

__all__ = ["InMemoryComponentRegistry", "RunningComponent"]

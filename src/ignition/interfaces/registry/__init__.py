"""IGNITION Component Registry Interface Package"""

from .errors import (
    ComponentAlreadyRegistered,
    ComponentNotRunning,
    RegistryError,
)
from .registry import ComponentRegistry

__all__ = [
    "ComponentAlreadyRegistered",
    "ComponentNotRunning",
    "ComponentRegistry",
    "RegistryError",
]

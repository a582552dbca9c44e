"""Configuration utilities for IGNITION.

Settings are read from the environment on demand; nothing is cached at import.
"""

import os

DETECT_CYCLES_ENV = "IGNITION_DETECT_CYCLES"  # pragma: no mutate
SPECS_ENV = "IGNITION_SPECS"  # pragma: no mutate

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"", "0", "false", "no", "off"})


class InvalidSettingError(ValueError):
    """Raised when an environment setting cannot be parsed."""

    def __init__(self, name: str, value: str) -> None:
        super().__init__(f"Invalid value {value!r} for {name}.")
        self.name = name
        self.value = value


class SpecsNotSetError(Exception):
    """Raised when the IGNITION_SPECS environment variable is not set."""


def get_detect_cycles() -> bool:
    """Whether the coordinator should detect dependency cycles.

    Returns:
        True if `IGNITION_DETECT_CYCLES` is set to a truthy value
        (``1``, ``true``, ``yes``, ``on``; case-insensitive), False if it is
        unset, empty or falsy.

    Raises:
        InvalidSettingError: If the value is neither truthy nor falsy.
    """
    raw = os.environ.get(DETECT_CYCLES_ENV, "")
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise InvalidSettingError(DETECT_CYCLES_ENV, raw)


def get_specs_path() -> str:
    """Get the ``MODULE:ATTR`` path of the component specifications.

    Returns:
        The value of the `IGNITION_SPECS` environment variable.

    Raises:
        SpecsNotSetError: If `IGNITION_SPECS` is not set.
    """
    if not (path := os.environ.get(SPECS_ENV)):
        raise SpecsNotSetError
    return path

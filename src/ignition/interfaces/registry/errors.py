"""Exceptions for component registry operations."""


class RegistryError(Exception):
    """Base class for registry errors."""


class ComponentAlreadyRegistered(RegistryError):
    """Conflict: a component with this name is already registered.

    Attributes:
        name (str): The duplicated component name.
    """

    def __init__(self, name: str):
        super().__init__(f"Component '{name}' is already registered.")
        self.name = name


class ComponentNotRunning(RegistryError):
    """The component is not running, so it cannot be stopped.

    Attributes:
        name (str): The component name.
    """

    def __init__(self, name: str):
        super().__init__(f"Component '{name}' is not running.")
        self.name = name

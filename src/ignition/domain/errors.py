"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


# ============================================================================
#                       Component contract errors
# ============================================================================


class ComponentContractError(DomainError):
    """Raised when an object does not satisfy the component contract.

    Attributes:
        obj: The offending object.
        missing (str): Name of the missing (or non-callable) operation.
    """

    def __init__(self, obj: object, missing: str) -> None:
        super().__init__(
            f"{obj!r} is not a component: operation '{missing}' is missing "
            "or not callable."
        )
        self.obj = obj
        self.missing = missing


class InvalidComponentSpec(DomainError):
    """Raised when a component specification is malformed."""

    def __init__(self, name: str, problem: str) -> None:
        super().__init__(f"Invalid specification for component '{name}': {problem}")
        self.name = name
        self.problem = problem

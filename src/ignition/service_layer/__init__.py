"""Service layer for IGNITION.

Implements the use-case of starting a component with its transitive
dependencies on top of the `ComponentRegistry` port.

Dependency rule: may import `ignition.domain` and `ignition.interfaces`, but not
`ignition.adapters` or `ignition.entrypoints`.
"""

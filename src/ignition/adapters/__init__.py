"""Adapters (infrastructure) for IGNITION.

Provide concrete implementations of the ports in `ignition.interfaces`,
currently the in-process component registry.

Dependency rule: may import `ignition.domain` and `ignition.interfaces`; the
inner layers must not import this package.
"""

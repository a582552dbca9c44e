"""Interfaces (application boundary) for IGNITION.

Defines framework-free contracts: the `Component` capability interface that
component authors implement, the `ComponentSpec` describing a registrable
component, and the `ComponentRegistry` port the coordinator depends on.

Dependency rule: may import `ignition.domain` only. It may be imported by
`ignition.service_layer`, `ignition.adapters` and `ignition.bootstrap`.
"""

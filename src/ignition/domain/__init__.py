"""Domain layer for IGNITION.

Contains the vocabulary shared by every other layer: start modes, start
outcomes, and the errors raised for contract or configuration mistakes.

Dependency rule: do not import from `ignition.adapters`, `ignition.bootstrap`
or `ignition.entrypoints`.
"""

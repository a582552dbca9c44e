"""Entrypoints (inbound adapters) for IGNITION.

Expose the application to the outside world. Parse and validate inputs, go
through `ignition.bootstrap`, and present results.

Dependency rule: import `ignition.bootstrap`; avoid importing
`ignition.adapters` directly.
"""

"""Bootstrap (composition root) for IGNITION.

Assembles the application at runtime: builds a component registry, registers
component specifications, reads configuration and wires the start coordinator
on top.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain).
- This package may import: `ignition.adapters`, `ignition.service_layer`,
  `ignition.interfaces`, `ignition.domain`, and `ignition.config`.
- Inner layers must not import `ignition.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap, build_coordinator, load_specs

__all__ = ["AppContainer", "bootstrap", "build_coordinator", "load_specs"]

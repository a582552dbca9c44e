"""IGNITION

Start a named component together with every dependency it declares.
Components are started through a registry that knows what exists and what is
already running; missing dependencies are resolved recursively, innermost first.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"

"""Interactive terminal host: wraps the Commune engine with a line-based loop."""

from .console import ConsoleHost

__all__ = ["ConsoleHost"]

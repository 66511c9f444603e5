"""Tareas - task list HTTP service with bearer-token authentication."""

__version__ = "0.1.0"

__all__ = ["__version__"]

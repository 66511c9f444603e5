"""Domain entities for Tareas.

Entities are pure Python dataclasses that represent core business concepts.
They have no dependencies on infrastructure or external frameworks.
"""

from tareas.domain.entities.task import Task
from tareas.domain.entities.user import User

__all__ = [
    "Task",
    "User",
]

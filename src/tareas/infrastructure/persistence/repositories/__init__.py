"""Persistence repositories over JSON snapshot files."""

from tareas.infrastructure.persistence.repositories.task_repository import (
    TaskRepository,
)
from tareas.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "TaskRepository",
    "UserRepository",
]

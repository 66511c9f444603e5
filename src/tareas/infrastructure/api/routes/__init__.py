"""API Routes for Tareas."""

from tareas.infrastructure.api.routes.auth_router import router as auth_router
from tareas.infrastructure.api.routes.tasks_router import router as tasks_router

__all__ = [
    "auth_router",
    "tasks_router",
]

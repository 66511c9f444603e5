"""API Schemas for request/response validation."""

from tareas.infrastructure.api.schemas.auth_schemas import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
)
from tareas.infrastructure.api.schemas.task_schemas import (
    CreateTaskRequest,
    TaskMutationResponse,
    TaskResponse,
    UpdateTaskRequest,
)

__all__ = [
    "CreateTaskRequest",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "RegisterRequest",
    "TaskMutationResponse",
    "TaskResponse",
    "UpdateTaskRequest",
]

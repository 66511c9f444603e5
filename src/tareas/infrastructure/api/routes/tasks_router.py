"""Task list API routes.

Only listing is gated by a bearer token; create, update and delete are
open, matching the service's published behaviour.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from tareas.core.exceptions import NotFoundError, ValidationError
from tareas.core.logging import get_logger
from tareas.infrastructure.api.dependencies import CurrentUser, get_task_repository
from tareas.infrastructure.api.schemas import (
    CreateTaskRequest,
    MessageResponse,
    TaskMutationResponse,
    TaskResponse,
    UpdateTaskRequest,
)
from tareas.infrastructure.persistence.repositories import TaskRepository

logger = get_logger(__name__)

router = APIRouter()

TASK_NOT_FOUND = "Task not found"

Tasks = Annotated[TaskRepository, Depends(get_task_repository)]


def parse_task_id(raw: str) -> int:
    """Parse a path id, treating anything non-numeric as an unknown task."""
    try:
        return int(raw)
    except ValueError:
        raise NotFoundError(TASK_NOT_FOUND) from None


@router.get("", response_model=list[TaskResponse])
async def list_tasks(current_user: CurrentUser, tasks: Tasks) -> list[TaskResponse]:
    """Return the whole task list. Requires a bearer token."""
    items = await tasks.list_all()
    logger.debug("Listed tasks", user_id=current_user.subject_id, count=len(items))
    return [TaskResponse.model_validate(t) for t in items]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=TaskMutationResponse,
    responses={400: {"description": "Missing titulo or descripcion"}},
)
async def create_task(request: CreateTaskRequest, tasks: Tasks) -> TaskMutationResponse:
    if not request.titulo or not request.descripcion:
        raise ValidationError("Titulo and descripcion are required")

    task = await tasks.create(request.titulo, request.descripcion)
    logger.info("Task created", task_id=task.id)
    return TaskMutationResponse(
        message="Task created successfully",
        tarea=TaskResponse.model_validate(task),
    )


@router.put(
    "/{task_id}",
    response_model=TaskMutationResponse,
    responses={404: {"description": "Task not found"}},
)
async def update_task(
    task_id: str, request: UpdateTaskRequest, tasks: Tasks
) -> TaskMutationResponse:
    task = await tasks.update(
        parse_task_id(task_id),
        titulo=request.titulo,
        descripcion=request.descripcion,
    )
    if task is None:
        raise NotFoundError(TASK_NOT_FOUND)

    logger.info("Task updated", task_id=task.id)
    return TaskMutationResponse(
        message="Task updated successfully",
        tarea=TaskResponse.model_validate(task),
    )


@router.delete(
    "/{task_id}",
    response_model=MessageResponse,
    responses={404: {"description": "Task not found"}},
)
async def delete_task(task_id: str, tasks: Tasks) -> MessageResponse:
    task_pk = parse_task_id(task_id)
    if not await tasks.delete(task_pk):
        raise NotFoundError(TASK_NOT_FOUND)

    logger.info("Task deleted", task_id=task_pk)
    return MessageResponse(message="Task deleted successfully")

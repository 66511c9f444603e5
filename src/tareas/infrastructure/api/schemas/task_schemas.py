"""Pydantic schemas for task endpoints."""

from pydantic import BaseModel, Field


class CreateTaskRequest(BaseModel):
    titulo: str | None = Field(None, description="Task title")
    descripcion: str | None = Field(None, description="Task description")


class UpdateTaskRequest(BaseModel):
    """Partial update; omitted or null fields keep their current value."""

    titulo: str | None = Field(None, description="New task title")
    descripcion: str | None = Field(None, description="New task description")


class TaskResponse(BaseModel):
    id: int = Field(..., description="Task ID")
    titulo: str = Field(..., description="Task title")
    descripcion: str = Field(..., description="Task description")

    model_config = {"from_attributes": True}


class TaskMutationResponse(BaseModel):
    """Response for task creation and update."""

    message: str = Field(..., description="Human-readable result")
    tarea: TaskResponse = Field(..., description="The task as stored")

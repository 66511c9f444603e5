"""Task repository."""

from tareas.core.exceptions import StorageError
from tareas.domain.entities import Task
from tareas.infrastructure.persistence.json_store import JsonFileStore


class TaskRepository:
    """Repository for the task list.

    Same whole-file load/save semantics as the user repository. New ids are
    one more than the highest existing id, so an id freed by a delete is not
    handed to the next task while a higher one still exists.
    """

    def __init__(self, store: JsonFileStore) -> None:
        self.store = store

    async def list_all(self) -> list[Task]:
        records = await self.store.load()
        try:
            return [Task.from_dict(record) for record in records]
        except (KeyError, TypeError, ValueError) as e:
            raise StorageError(f"Corrupt task record in {self.store.path}: {e}") from e

    async def get_by_id(self, task_id: int) -> Task | None:
        for task in await self.list_all():
            if task.id == task_id:
                return task
        return None

    async def create(self, titulo: str, descripcion: str) -> Task:
        """Append a task and persist the whole collection."""
        tasks = await self.list_all()
        next_id = max((t.id for t in tasks), default=0) + 1
        task = Task(id=next_id, titulo=titulo, descripcion=descripcion)
        tasks.append(task)
        await self._save(tasks)
        return task

    async def update(
        self,
        task_id: int,
        titulo: str | None = None,
        descripcion: str | None = None,
    ) -> Task | None:
        """Update the given fields of a task.

        Fields left as None keep their current value.

        Returns:
            The updated task, or None if no task has that id.
        """
        tasks = await self.list_all()
        for task in tasks:
            if task.id == task_id:
                if titulo is not None:
                    task.titulo = titulo
                if descripcion is not None:
                    task.descripcion = descripcion
                await self._save(tasks)
                return task
        return None

    async def delete(self, task_id: int) -> bool:
        """Remove a task.

        Returns:
            True if a task was removed, False if no task has that id.
        """
        tasks = await self.list_all()
        remaining = [t for t in tasks if t.id != task_id]
        if len(remaining) == len(tasks):
            return False
        await self._save(remaining)
        return True

    async def _save(self, tasks: list[Task]) -> None:
        await self.store.save([t.to_dict() for t in tasks])

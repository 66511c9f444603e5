"""Task entity."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class Task:
    """A single entry in the task list."""

    id: int
    titulo: str
    descripcion: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Task":
        return cls(
            id=int(data["id"]),
            titulo=data["titulo"],
            descripcion=data["descripcion"],
        )

"""Snapshot-file persistence for users and tasks."""

from tareas.infrastructure.persistence.json_store import JsonFileStore

__all__ = ["JsonFileStore"]

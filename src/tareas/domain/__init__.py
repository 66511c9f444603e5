"""Domain layer for Tareas."""

"""Entry point for 'python -m tareas' command."""

from tareas.cli import main

if __name__ == "__main__":
    main()

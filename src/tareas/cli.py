"""Command-line interface for Tareas.

This module provides the CLI commands for running the server and
managing the data files.
"""

import asyncio
import sys

import click

from tareas.core.config import get_settings
from tareas.core.exceptions import StorageError
from tareas.core.logging import configure_logging, get_logger
from tareas.infrastructure.auth import PasswordHasher, TokenService
from tareas.infrastructure.persistence import JsonFileStore
from tareas.infrastructure.persistence.repositories import UserRepository


@click.group()
@click.version_option(version="0.1.0", prog_name="Tareas")
def cli() -> None:
    """Tareas - task list service with bearer-token authentication.

    Configuration is read from TAREAS_* environment variables and .env.
    """


@cli.command()
@click.option("--host", type=str, default=None, help="Host to bind to (overrides config)")
@click.option("--port", type=int, default=None, help="Port to bind to (overrides config)")
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
def serve(host: str | None, port: int | None, reload: bool) -> None:
    """Start the Tareas server.

    Always a single worker: the data files have no cross-process locking.
    """
    import uvicorn

    settings = get_settings()

    bind_host = host or settings.host
    bind_port = port or settings.port

    configure_logging(settings)

    logger = get_logger(__name__)
    logger.info(
        "Starting Tareas server",
        host=bind_host,
        port=bind_port,
        reload=reload,
        environment=settings.environment,
    )

    uvicorn.run(
        "tareas.infrastructure.api.app:app",
        host=bind_host,
        port=bind_port,
        workers=1,
        reload=reload,
        log_level=settings.log_level.lower(),
        access_log=True,
    )


@cli.command("init-data")
def init_data() -> None:
    """Create empty users and tasks files if they do not exist."""
    settings = get_settings()
    for path in (settings.users_path, settings.tasks_path):
        try:
            created = JsonFileStore(path).ensure_exists()
        except StorageError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)
        click.echo(f"{'Created' if created else 'Exists '} {path}")


@cli.command("create-user")
@click.argument("email")
@click.password_option("--password", help="Password for the new user")
def create_user(email: str, password: str) -> None:
    """Register a user directly in the credential store."""
    settings = get_settings()
    repo = UserRepository(JsonFileStore(settings.users_path))
    hasher = PasswordHasher.from_settings(settings)

    async def _create():
        if await repo.email_exists(email):
            return None
        return await repo.append(email, hasher.hash(password))

    try:
        user = asyncio.run(_create())
    except StorageError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if user is None:
        click.echo(f"Error: user {email} already exists", err=True)
        sys.exit(1)
    click.echo(f"Created user {user.id} <{user.email}>")


@cli.command("issue-token")
@click.argument("email")
@click.option("--password", prompt=True, hide_input=True, help="User's password")
def issue_token(email: str, password: str) -> None:
    """Check a user's credentials and print a bearer token."""
    settings = get_settings()
    repo = UserRepository(JsonFileStore(settings.users_path))
    hasher = PasswordHasher.from_settings(settings)

    try:
        user = asyncio.run(repo.find_by_email(email))
    except StorageError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if user is None or not hasher.verify(password, user.password_hash):
        click.echo("Error: invalid credentials", err=True)
        sys.exit(1)

    click.echo(TokenService.from_settings(settings).issue(user))


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()

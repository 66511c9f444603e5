"""FastAPI application factory and configuration.

This module provides the application factory function for creating
and configuring the FastAPI application with all middleware, routes,
and lifecycle handlers.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from tareas.core.config import Settings, get_settings
from tareas.core.exceptions import StorageError, TareasError
from tareas.core.logging import (
    bind_correlation_id,
    clear_context,
    configure_logging,
    get_logger,
    new_correlation_id,
)
from tareas.infrastructure.auth import PasswordHasher, TokenService
from tareas.infrastructure.persistence import JsonFileStore
from tareas.infrastructure.persistence.repositories import (
    TaskRepository,
    UserRepository,
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Args:
        app: FastAPI application instance.

    Yields:
        None: Control is yielded to the application during its lifetime.
    """
    settings: Settings = app.state.settings

    configure_logging(settings)

    logger.info(
        "Starting Tareas",
        app_name=settings.app_name,
        version=settings.app_version,
        environment=settings.environment,
        users_path=str(settings.users_path),
        tasks_path=str(settings.tasks_path),
    )
    if settings.uses_default_secret and settings.is_production:
        logger.warning("Default secret_key in use; set TAREAS_SECRET_KEY")

    yield

    logger.info("Shutting down Tareas")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    The token service, password hasher and repositories are built here from
    settings and kept on ``app.state`` for the route dependencies.

    Args:
        settings: Settings to use. Defaults to the cached environment settings.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Task list with bearer-token authentication",
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        openapi_url="/openapi.json" if settings.is_development else None,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.token_service = TokenService.from_settings(settings)
    app.state.password_hasher = PasswordHasher.from_settings(settings)
    app.state.user_repository = UserRepository(JsonFileStore(settings.users_path))
    app.state.task_repository = TaskRepository(JsonFileStore(settings.tasks_path))

    register_health_check(app)
    register_routes(app)
    register_exception_handlers(app)
    register_middleware(app)

    return app


def register_health_check(app: FastAPI) -> None:
    """Register health check endpoints.

    Args:
        app: FastAPI application instance.
    """

    @app.get("/health", tags=["health"])
    async def health_check():
        """Basic health check endpoint.

        Returns 200 if the service is running. Does not touch the data files.
        """
        return {
            "status": "healthy",
            "service": app.state.settings.app_name,
            "version": app.state.settings.app_version,
        }


def register_routes(app: FastAPI) -> None:
    """Register API routes.

    Args:
        app: FastAPI application instance.
    """
    from tareas.infrastructure.api.routes import auth_router, tasks_router

    app.include_router(auth_router, tags=["auth"])
    app.include_router(tasks_router, prefix="/tareas", tags=["tareas"])


def register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers.

    Args:
        app: FastAPI application instance.
    """

    @app.exception_handler(TareasError)
    async def tareas_error_handler(request: Request, exc: TareasError):
        """Map domain errors to their status and a message body."""
        if isinstance(exc, StorageError):
            logger.error(
                "Storage failure",
                path=str(request.url.path),
                method=request.method,
                error=str(exc),
            )
            return JSONResponse(
                status_code=exc.status_code,
                content={"message": StorageError.default_message},
            )
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """Reject bodies that are not a JSON object of string fields."""
        logger.info(
            "Request body rejected",
            path=str(request.url.path),
            error_count=len(exc.errors()),
        )
        return JSONResponse(
            status_code=400,
            content={"message": "Invalid request body"},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return JSONResponse(status_code=404, content={"error": "Route not found"})
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle uncaught exceptions."""
        logger.error(
            "Unhandled exception",
            path=str(request.url),
            method=request.method,
            error=str(exc),
            exc_type=type(exc).__name__,
        )
        content = {"error": "Internal server error"}
        if app.state.settings.debug:
            content["detail"] = str(exc)
        return JSONResponse(status_code=500, content=content)


def register_middleware(app: FastAPI) -> None:
    """Register custom middleware.

    Args:
        app: FastAPI application instance.
    """

    @app.middleware("http")
    async def logging_middleware(request, call_next):
        """Middleware to log all requests and add correlation ID."""
        correlation_id = request.headers.get("X-Correlation-ID") or new_correlation_id()
        bind_correlation_id(correlation_id)

        logger.info(
            "Request started",
            method=request.method,
            path=str(request.url.path),
        )

        try:
            response = await call_next(request)
            logger.info(
                "Request completed",
                method=request.method,
                path=str(request.url.path),
                status_code=response.status_code,
            )
            response.headers["X-Correlation-ID"] = correlation_id
            return response
        finally:
            clear_context()


# Create the application instance
app = create_app()

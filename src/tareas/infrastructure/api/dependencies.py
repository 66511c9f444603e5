"""FastAPI dependencies for services, repositories and the auth gate.

Services are built once by the application factory and kept on
``app.state``; the dependencies here only look them up.
"""

from typing import Annotated

from fastapi import Depends, Header, Request

from tareas.core.exceptions import AuthenticationError, AuthorizationError
from tareas.core.logging import get_logger
from tareas.infrastructure.auth import (
    PasswordHasher,
    TokenClaims,
    TokenError,
    TokenService,
)
from tareas.infrastructure.persistence.repositories import (
    TaskRepository,
    UserRepository,
)

logger = get_logger(__name__)

TOKEN_REQUIRED = "Token required"
INVALID_TOKEN = "Invalid token"


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_user_repository(request: Request) -> UserRepository:
    return request.app.state.user_repository


def get_task_repository(request: Request) -> TaskRepository:
    return request.app.state.task_repository


def extract_bearer_token(authorization: str | None) -> str | None:
    """Pull the token out of an ``Authorization: Bearer <token>`` header.

    Returns:
        The token, or None if the header is missing, uses another scheme,
        or has no token segment.
    """
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None


async def get_current_user(
    request: Request,
    token_service: Annotated[TokenService, Depends(get_token_service)],
    authorization: Annotated[str | None, Header()] = None,
) -> TokenClaims:
    """Gate a request on a valid bearer token.

    The resolved identity is returned to the handler and also attached to
    ``request.state.user``. Nothing is stored between requests.

    Raises:
        AuthenticationError: 401 if no bearer token was presented.
        AuthorizationError: 403 if the token is malformed, forged or expired.
    """
    token = extract_bearer_token(authorization)
    if token is None:
        logger.info("Authentication failed: token required", path=request.url.path)
        raise AuthenticationError(TOKEN_REQUIRED)

    try:
        claims = token_service.verify(token)
    except TokenError as e:
        logger.info(
            "Authentication failed: invalid token",
            reason=e.kind.value,
            path=request.url.path,
        )
        raise AuthorizationError(INVALID_TOKEN) from e

    request.state.user = claims
    return claims


# Type alias for dependency injection
CurrentUser = Annotated[TokenClaims, Depends(get_current_user)]

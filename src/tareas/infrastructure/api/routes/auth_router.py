"""Authentication API routes.

Provides endpoints for user registration and login.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from tareas.core.exceptions import AuthenticationError, ConflictError, ValidationError
from tareas.core.logging import get_logger
from tareas.infrastructure.api.dependencies import (
    get_password_hasher,
    get_token_service,
    get_user_repository,
)
from tareas.infrastructure.api.schemas import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
)
from tareas.infrastructure.auth import PasswordHasher, TokenService
from tareas.infrastructure.persistence.repositories import UserRepository

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=MessageResponse,
    responses={
        400: {"description": "Missing fields or email already registered"},
    },
)
async def register(
    request: RegisterRequest,
    user_repo: Annotated[UserRepository, Depends(get_user_repository)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
) -> MessageResponse:
    """Register a new user.

    Flow:
    1. Require email and password
    2. Reject an email that is already registered
    3. Hash password
    4. Append the user to the credential store
    """
    if not request.email or not request.password:
        raise ValidationError("Email and password are required")

    if await user_repo.email_exists(request.email):
        logger.info("Registration failed: email exists", email=request.email)
        raise ConflictError("User already exists")

    password_hash = hasher.hash(request.password)
    user = await user_repo.append(request.email, password_hash)

    logger.info("User registered successfully", user_id=user.id, email=user.email)
    return MessageResponse(message="User registered successfully")


@router.post(
    "/login",
    status_code=status.HTTP_200_OK,
    response_model=LoginResponse,
    responses={
        401: {"description": "Invalid credentials"},
    },
)
async def login(
    request: LoginRequest,
    user_repo: Annotated[UserRepository, Depends(get_user_repository)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    token_service: Annotated[TokenService, Depends(get_token_service)],
) -> LoginResponse:
    """Authenticate a user and return a bearer token.

    Security:
    - All authentication failures return the same generic 401 message
    - Password verification is always performed (against a dummy hash for
      unknown emails) to prevent timing attacks
    - A stored hash made with other Argon2 parameters is replaced on success
    """
    user = await user_repo.find_by_email(request.email) if request.email else None
    password = request.password or ""

    if user is None:
        hasher.verify(password, hasher.dummy_hash)
        logger.info("Login failed: unknown email", email=request.email)
        raise AuthenticationError("Invalid credentials")

    if not hasher.verify(password, user.password_hash):
        logger.info("Login failed: wrong password", user_id=user.id)
        raise AuthenticationError("Invalid credentials")

    if hasher.needs_rehash(user.password_hash):
        await user_repo.update_password_hash(user.id, hasher.hash(password))
        logger.info("Password rehashed with current parameters", user_id=user.id)

    token = token_service.issue(user)
    logger.info("User logged in", user_id=user.id)
    return LoginResponse(message="Login successful", token=token)

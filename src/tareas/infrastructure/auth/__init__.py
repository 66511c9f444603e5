"""Authentication infrastructure components.

This module provides password hashing, JWT token services, and
the token claim types they produce.
"""

from tareas.infrastructure.auth.jwt_service import (
    InvalidSignatureError,
    MalformedTokenError,
    TokenError,
    TokenExpiredError,
    TokenService,
)
from tareas.infrastructure.auth.password_hasher import (
    PasswordHasher,
    hash_password,
    needs_rehash,
    verify_password,
)
from tareas.infrastructure.auth.token_types import (
    TokenClaims,
    TokenErrorKind,
    TokenVerification,
)

__all__ = [
    "InvalidSignatureError",
    "MalformedTokenError",
    "PasswordHasher",
    "TokenClaims",
    "TokenError",
    "TokenErrorKind",
    "TokenExpiredError",
    "TokenService",
    "TokenVerification",
    "hash_password",
    "needs_rehash",
    "verify_password",
]
